"""In-memory device source."""

from typing import Iterable, List

from iot_dashboard.models.device import DeviceRecord


class InMemoryDeviceSource:
    """Device source backed by a list held in memory.

    Each call returns a new list, so callers cannot disturb the held
    records or each other's snapshots.
    """

    def __init__(self, devices: Iterable[DeviceRecord] = ()):
        self._devices: List[DeviceRecord] = list(devices)

    def add(self, device: DeviceRecord) -> None:
        self._devices.append(device)

    def list_all_devices(self) -> List[DeviceRecord]:
        return list(self._devices)
