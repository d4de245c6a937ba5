"""Shared enumerations for the IoT dashboard models."""

from enum import Enum
from typing import Optional


class DeviceType(str, Enum):
    """Kind of IoT device."""

    TRACKER = "TRACKER"
    TEMPERATURE_SENSOR = "TEMPERATURE_SENSOR"
    VIBRATION_SENSOR = "VIBRATION_SENSOR"
    OXYGEN_METER = "OXYGEN_METER"
    HUMIDITY_SENSOR = "HUMIDITY_SENSOR"
    PRESSURE_SENSOR = "PRESSURE_SENSOR"
    GENERIC = "GENERIC"

    @property
    def display_name(self) -> str:
        return _DEVICE_TYPE_NAMES[self]

    @classmethod
    def from_display_name(cls, display_name: str) -> Optional["DeviceType"]:
        """Look up a type by its display name (case-insensitive)."""
        for member in cls:
            if member.display_name.lower() == display_name.lower():
                return member
        return None


_DEVICE_TYPE_NAMES = {
    DeviceType.TRACKER: "Tracker",
    DeviceType.TEMPERATURE_SENSOR: "Temperature Sensor",
    DeviceType.VIBRATION_SENSOR: "Vibration Sensor",
    DeviceType.OXYGEN_METER: "Oxygen Meter",
    DeviceType.HUMIDITY_SENSOR: "Humidity Sensor",
    DeviceType.PRESSURE_SENSOR: "Pressure Sensor",
    DeviceType.GENERIC: "Generic Device",
}


class DeviceStatus(str, Enum):
    """Operational status reported for a device."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    MAINTENANCE = "MAINTENANCE"
    ERROR = "ERROR"
    OFFLINE = "OFFLINE"
    CONFIGURING = "CONFIGURING"

    @property
    def display_name(self) -> str:
        return _DEVICE_STATUS_NAMES[self]

    @classmethod
    def from_display_name(cls, display_name: str) -> Optional["DeviceStatus"]:
        """Look up a status by its display name (case-insensitive)."""
        for member in cls:
            if member.display_name.lower() == display_name.lower():
                return member
        return None


_DEVICE_STATUS_NAMES = {
    DeviceStatus.ACTIVE: "Active",
    DeviceStatus.INACTIVE: "Inactive",
    DeviceStatus.MAINTENANCE: "Under Maintenance",
    DeviceStatus.ERROR: "Error",
    DeviceStatus.OFFLINE: "Offline",
    DeviceStatus.CONFIGURING: "Configuring",
}


class AlertType(str, Enum):
    """Type of device alert."""

    DEVICE_OFFLINE = "DEVICE_OFFLINE"
    COMMUNICATION_LOST = "COMMUNICATION_LOST"
    DEVICE_ERROR = "DEVICE_ERROR"
    MAINTENANCE_REQUIRED = "MAINTENANCE_REQUIRED"
    BATTERY_LOW = "BATTERY_LOW"
    CONFIGURATION_ISSUE = "CONFIGURATION_ISSUE"
    NETWORK_ISSUE = "NETWORK_ISSUE"


class AlertSeverity(str, Enum):
    """Severity level for alerts, lowest first."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        """Numeric rank for ordering (LOW=0 ... CRITICAL=3)."""
        return list(AlertSeverity).index(self)


class SystemStatus(str, Enum):
    """Overall classification of the device fleet."""

    NO_DATA = "NO_DATA"
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    EXCELLENT = "EXCELLENT"
    HEALTHY = "HEALTHY"
