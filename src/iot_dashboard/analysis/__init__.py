"""Dashboard engine: aggregation, connectivity analysis, and alerting."""

from iot_dashboard.analysis.aggregator import (
    compute_dashboard_stats,
    compute_status_distribution,
    compute_type_distribution,
    determine_system_status,
)
from iot_dashboard.analysis.alerts import ALERT_RULES, AlertRule, compute_active_alerts
from iot_dashboard.analysis.connectivity import (
    calculate_percentage,
    compute_connectivity_stats,
    count_online_since,
)
from iot_dashboard.analysis.models import (
    ConnectivityStats,
    DashboardStats,
    DeviceAlert,
    StatusDistribution,
    TypeDistribution,
)
from iot_dashboard.analysis.thresholds import DEFAULT_THRESHOLDS, DashboardThresholds

__all__ = [
    "ALERT_RULES",
    "AlertRule",
    "ConnectivityStats",
    "DEFAULT_THRESHOLDS",
    "DashboardStats",
    "DashboardThresholds",
    "DeviceAlert",
    "StatusDistribution",
    "TypeDistribution",
    "calculate_percentage",
    "compute_active_alerts",
    "compute_connectivity_stats",
    "compute_dashboard_stats",
    "compute_status_distribution",
    "compute_type_distribution",
    "count_online_since",
    "determine_system_status",
]
