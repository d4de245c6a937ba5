"""Alert generation over a device snapshot."""

from datetime import datetime
from typing import Iterable, List, Optional, Sequence

import structlog

from iot_dashboard.analysis.alerts.rules import ALERT_RULES, AlertRule, find_matching_rule
from iot_dashboard.analysis.models import DeviceAlert
from iot_dashboard.analysis.thresholds import DEFAULT_THRESHOLDS, DashboardThresholds
from iot_dashboard.models.device import DeviceRecord
from iot_dashboard.utils.timestamps import ensure_aware, minutes_between

logger = structlog.get_logger(__name__)


def generate_alert(
    device: DeviceRecord,
    now: datetime,
    thresholds: DashboardThresholds = DEFAULT_THRESHOLDS,
    rules: Optional[List[AlertRule]] = None,
) -> Optional[DeviceAlert]:
    """Evaluate one device against the ordered rules.

    Args:
        device: Device to evaluate
        now: Reference instant, also used as the alert timestamp
        thresholds: Communication windows for the rules
        rules: Ordered rules, defaults to ALERT_RULES

    Returns:
        DeviceAlert for the first matching rule, None if no rule matches
    """
    rule = find_matching_rule(device, now, thresholds, rules)
    if rule is None:
        return None

    minutes_since: Optional[int] = None
    if device.last_communication is not None:
        minutes_since = minutes_between(device.last_communication, now)

    return DeviceAlert(
        device_id=device.id,
        device_name=device.name,
        device_type=device.device_type,
        device_status=device.status,
        alert_type=rule.alert_type,
        severity=rule.severity,
        alert_message=rule.render_message(thresholds),
        location=device.location,
        last_communication=device.last_communication,
        minutes_since_last_communication=minutes_since,
        alert_timestamp=now,
        is_critical=rule.is_critical,
    )


def sort_alerts(alerts: Sequence[DeviceAlert]) -> List[DeviceAlert]:
    """Order alerts by severity then timestamp, both descending.

    The sort is stable, so alerts that tie keep their snapshot order.
    """
    return sorted(
        alerts,
        key=lambda alert: (alert.severity.rank, alert.alert_timestamp),
        reverse=True,
    )


def compute_active_alerts(
    devices: Iterable[DeviceRecord],
    now: datetime,
    thresholds: DashboardThresholds = DEFAULT_THRESHOLDS,
    rules: Optional[List[AlertRule]] = None,
) -> List[DeviceAlert]:
    """Generate the ranked alert list for a device snapshot.

    Args:
        devices: Snapshot of device records
        now: Reference instant
        thresholds: Communication windows for the rules
        rules: Ordered rules, defaults to ALERT_RULES

    Returns:
        At most one alert per device, most severe first
    """
    now = ensure_aware(now)
    snapshot = tuple(devices)
    active_rules = ALERT_RULES if rules is None else rules

    alerts: List[DeviceAlert] = []
    for device in snapshot:
        alert = generate_alert(device, now, thresholds, active_rules)
        if alert:
            alerts.append(alert)

    logger.debug(
        "alerts_generated",
        devices_evaluated=len(snapshot),
        alerts_created=len(alerts),
        critical=sum(1 for alert in alerts if alert.is_critical),
    )
    return sort_alerts(alerts)
