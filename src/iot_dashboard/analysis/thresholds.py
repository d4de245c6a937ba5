"""Dashboard threshold configuration.

Defines the communication windows and fleet-level limits used to
classify devices, raise alerts, and grade overall system status.
"""

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class DashboardThresholds:
    """Configurable thresholds for dashboard computations.

    Attributes:
        online_minutes: A device is online if it communicated strictly
            within this many minutes
        irregular_minutes: ACTIVE devices silent for longer than this are
            irregular; also the MEDIUM communication-lost alert window
        communication_lost_minutes: Silence longer than this raises the HIGH
            communication-lost alert (six online windows)
        critical_error_ratio: Share of ERROR devices above which the system
            is CRITICAL
        warning_online_percentage: Online percentage below which the system
            is WARNING
        excellent_online_percentage: Online percentage at or above which the
            system is EXCELLENT
    """

    # Communication windows (minutes)
    online_minutes: int = 5
    irregular_minutes: int = 30
    communication_lost_minutes: int = 30

    # System status grading
    critical_error_ratio: float = 0.10
    warning_online_percentage: float = 70.0
    excellent_online_percentage: float = 90.0

    @property
    def online_window(self) -> timedelta:
        return timedelta(minutes=self.online_minutes)

    @property
    def irregular_window(self) -> timedelta:
        return timedelta(minutes=self.irregular_minutes)

    @property
    def communication_lost_window(self) -> timedelta:
        return timedelta(minutes=self.communication_lost_minutes)


# Default thresholds for production use
DEFAULT_THRESHOLDS = DashboardThresholds()
