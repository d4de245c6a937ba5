"""Alert rules and generation for device snapshots."""

from iot_dashboard.analysis.alerts.rules import ALERT_RULES, AlertRule, find_matching_rule
from iot_dashboard.analysis.alerts.generator import (
    compute_active_alerts,
    generate_alert,
    sort_alerts,
)

__all__ = [
    "ALERT_RULES",
    "AlertRule",
    "compute_active_alerts",
    "find_matching_rule",
    "generate_alert",
    "sort_alerts",
]
