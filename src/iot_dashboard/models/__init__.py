"""Data models for the IoT dashboard."""

from .enums import AlertSeverity, AlertType, DeviceStatus, DeviceType, SystemStatus
from .device import DeviceRecord

__all__ = [
    "AlertSeverity",
    "AlertType",
    "DeviceRecord",
    "DeviceStatus",
    "DeviceType",
    "SystemStatus",
]
