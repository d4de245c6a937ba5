"""Device snapshot sources."""

from iot_dashboard.sources.base import DeviceSource
from iot_dashboard.sources.file import FileDeviceSource
from iot_dashboard.sources.memory import InMemoryDeviceSource

__all__ = ["DeviceSource", "FileDeviceSource", "InMemoryDeviceSource"]
