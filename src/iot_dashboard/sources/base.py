"""Device source protocol: the snapshot collaborator."""

from typing import List, Protocol, runtime_checkable

from iot_dashboard.models.device import DeviceRecord


@runtime_checkable
class DeviceSource(Protocol):
    """Anything that can list the full current set of device records.

    Implementations return every device with no filtering; ordering is
    unspecified.
    """

    def list_all_devices(self) -> List[DeviceRecord]:
        ...
