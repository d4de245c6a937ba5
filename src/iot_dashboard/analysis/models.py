"""Result models produced by the dashboard engine.

All results are frozen and rebuilt on every call; they carry no identity
across calls.
"""

from datetime import datetime
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from iot_dashboard.models.enums import (
    AlertSeverity,
    AlertType,
    DeviceStatus,
    DeviceType,
    SystemStatus,
)


class DashboardStats(BaseModel):
    """Headline statistics for the dashboard cards."""

    model_config = ConfigDict(frozen=True)

    total_devices: int = 0
    online_devices: int = Field(default=0, description="Communicated within the online window")
    offline_devices: int = 0
    active_devices: int = 0
    inactive_devices: int = 0
    error_devices: int = 0
    maintenance_devices: int = 0
    configuring_devices: int = 0
    offline_status_devices: int = Field(
        default=0, description="Devices whose reported status is OFFLINE"
    )
    status_counts: Dict[DeviceStatus, int] = Field(default_factory=dict)
    online_percentage: float = 0.0
    availability_percentage: float = 0.0
    total_device_types: int = 0
    last_updated: datetime
    system_status: SystemStatus = SystemStatus.NO_DATA
    has_critical_alerts: bool = False
    active_alerts: int = 0


class ConnectivityStats(BaseModel):
    """Communication metrics over several lookback windows."""

    model_config = ConfigDict(frozen=True)

    devices_online_last_5_min: int = 0
    devices_online_last_hour: int = 0
    devices_online_today: int = 0
    devices_never_communicated: int = 0
    average_time_since_last_communication: float = Field(
        default=0.0, description="Mean minutes since last communication"
    )
    overall_uptime_percentage: float = 0.0
    connectivity_rate: float = 0.0
    devices_with_irregular_communication: int = 0
    last_check_time: datetime


class DeviceAlert(BaseModel):
    """An actionable alert raised for a single device."""

    model_config = ConfigDict(frozen=True)

    device_id: Union[int, str]
    device_name: str
    device_type: DeviceType
    device_status: DeviceStatus
    alert_type: AlertType
    severity: AlertSeverity
    alert_message: str
    location: Optional[str] = None
    last_communication: Optional[datetime] = None
    minutes_since_last_communication: Optional[int] = None
    alert_timestamp: datetime
    is_critical: bool = False


class StatusDistribution(BaseModel):
    """Device counts per reported status."""

    model_config = ConfigDict(frozen=True)

    status_counts: Dict[DeviceStatus, int] = Field(default_factory=dict)
    total_devices: int = 0
    most_common_status: str = "N/A"
    most_common_count: int = 0


class TypeDistribution(BaseModel):
    """Device counts per device type."""

    model_config = ConfigDict(frozen=True)

    type_counts: Dict[DeviceType, int] = Field(default_factory=dict)
    total_devices: int = 0
    most_common_type: str = "N/A"
    most_common_count: int = 0
    total_types: int = 0
