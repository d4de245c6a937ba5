"""Device record model supplied by the device-management subsystem.

Records are immutable snapshots: the dashboard engine only reads them.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from iot_dashboard.models.enums import DeviceStatus, DeviceType
from iot_dashboard.utils.timestamps import normalize_timestamp

# Raw record keys accepted by from_record, camelCase -> field name
_KEY_ALIASES = {
    "deviceName": "name",
    "device_name": "name",
    "deviceType": "device_type",
    "type": "device_type",
    "deviceIdentifier": "device_identifier",
    "lastCommunication": "last_communication",
    "lastReading": "last_reading",
    "isActive": "is_active",
}


class DeviceRecord(BaseModel):
    """A single IoT device as stored by the owning subsystem.

    `status` and `last_communication` are set independently; a device
    can be ACTIVE and still have never communicated.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Union[int, str] = Field(..., description="Opaque unique identifier")
    name: str = Field(..., description="Human-readable device name")
    device_type: DeviceType = Field(
        default=DeviceType.GENERIC, description="Kind of device"
    )
    status: DeviceStatus = Field(
        default=DeviceStatus.INACTIVE, description="Reported operational status"
    )
    location: Optional[str] = Field(default=None, description="Where the device is installed")
    last_communication: Optional[datetime] = Field(
        default=None, description="Last time the device talked to the platform"
    )
    is_active: bool = Field(default=True, description="Enabled flag, independent of status")

    device_identifier: Optional[str] = Field(
        default=None, description="Hardware identifier (MAC, IMEI, ...)"
    )
    description: Optional[str] = Field(default=None)
    last_reading: Optional[str] = Field(default=None, description="Last value captured")
    latitude: Optional[float] = Field(default=None)
    longitude: Optional[float] = Field(default=None)

    @field_validator("device_type", mode="before")
    @classmethod
    def parse_device_type(cls, v: Any) -> Any:
        """Accept enum names case-insensitively, or display names."""
        if isinstance(v, str) and not isinstance(v, DeviceType):
            by_display = DeviceType.from_display_name(v)
            return by_display or v.strip().upper()
        return v

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: Any) -> Any:
        """Accept enum names case-insensitively, or display names."""
        if isinstance(v, str) and not isinstance(v, DeviceStatus):
            by_display = DeviceStatus.from_display_name(v)
            return by_display or v.strip().upper()
        return v

    @field_validator("last_communication", mode="before")
    @classmethod
    def parse_last_communication(cls, v: Any) -> Optional[datetime]:
        """Normalize epoch, string, and naive timestamps to aware datetimes."""
        if v is None or v == "":
            return None
        return normalize_timestamp(v)

    @property
    def has_communicated(self) -> bool:
        """Check whether the device ever reported in."""
        return self.last_communication is not None

    def is_online(self, now: datetime, threshold: timedelta = timedelta(minutes=5)) -> bool:
        """Check whether the device communicated strictly within threshold of now."""
        if self.last_communication is None:
            return False
        return self.last_communication > now - threshold

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "DeviceRecord":
        """Factory for creating a DeviceRecord from a raw storage/API record.

        Accepts camelCase keys (``deviceType``, ``lastCommunication``) as well
        as field names.

        Args:
            record: Raw device dictionary

        Returns:
            Validated DeviceRecord

        Raises:
            pydantic.ValidationError: If required fields are missing or invalid
        """
        data: Dict[str, Any] = {}
        for key, value in record.items():
            data[_KEY_ALIASES.get(key, key)] = value
        return cls.model_validate(data)
