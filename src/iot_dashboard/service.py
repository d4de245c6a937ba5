"""Dashboard service wiring a device source to the engine.

Each call pulls one snapshot from the source and runs the pure
computations over it with a single "now" from the clock. Source failures
propagate unchanged.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional

import structlog

from iot_dashboard.analysis.aggregator import (
    compute_dashboard_stats,
    compute_status_distribution,
    compute_type_distribution,
)
from iot_dashboard.analysis.alerts import compute_active_alerts
from iot_dashboard.analysis.connectivity import compute_connectivity_stats
from iot_dashboard.analysis.models import (
    ConnectivityStats,
    DashboardStats,
    DeviceAlert,
    StatusDistribution,
    TypeDistribution,
)
from iot_dashboard.analysis.thresholds import DEFAULT_THRESHOLDS, DashboardThresholds
from iot_dashboard.models.device import DeviceRecord
from iot_dashboard.sources.base import DeviceSource

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DashboardService:
    """Computes dashboard views from the devices a source currently holds.

    Usage:
        service = DashboardService(FileDeviceSource("devices.yaml"))
        stats = service.get_general_stats()
        alerts = service.get_active_alerts()
    """

    def __init__(
        self,
        source: DeviceSource,
        thresholds: Optional[DashboardThresholds] = None,
        clock: Optional[Clock] = None,
    ):
        """Initialize the service.

        Args:
            source: Supplier of the full device snapshot.
            thresholds: Custom thresholds. Defaults to DEFAULT_THRESHOLDS.
            clock: Zero-argument callable returning the current time.
                   Defaults to the UTC wall clock.
        """
        self._source = source
        self._thresholds = thresholds or DEFAULT_THRESHOLDS
        self._clock = clock or utc_now

    @property
    def thresholds(self) -> DashboardThresholds:
        return self._thresholds

    def _snapshot(self) -> List[DeviceRecord]:
        return list(self._source.list_all_devices())

    def get_general_stats(self) -> DashboardStats:
        logger.info("computing_dashboard_stats")
        stats = compute_dashboard_stats(self._snapshot(), self._clock(), self._thresholds)
        logger.info(
            "dashboard_stats_ready",
            total=stats.total_devices,
            system_status=stats.system_status.value,
            has_critical_alerts=stats.has_critical_alerts,
        )
        return stats

    def get_connectivity_stats(self) -> ConnectivityStats:
        logger.info("computing_connectivity_stats")
        return compute_connectivity_stats(self._snapshot(), self._clock(), self._thresholds)

    def get_active_alerts(self) -> List[DeviceAlert]:
        logger.info("generating_active_alerts")
        alerts = compute_active_alerts(self._snapshot(), self._clock(), self._thresholds)
        logger.info("active_alerts_ready", count=len(alerts))
        return alerts

    def get_status_distribution(self) -> StatusDistribution:
        logger.info("computing_status_distribution")
        return compute_status_distribution(self._snapshot())

    def get_type_distribution(self) -> TypeDistribution:
        logger.info("computing_type_distribution")
        return compute_type_distribution(self._snapshot())
