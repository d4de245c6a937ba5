"""Ordered alert rules for device evaluation.

Each rule is a pure predicate paired with the alert it produces. Rules are
evaluated in list order and the first match wins, so a device raises at
most one alert.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from iot_dashboard.analysis.thresholds import DashboardThresholds
from iot_dashboard.models.device import DeviceRecord
from iot_dashboard.models.enums import AlertSeverity, AlertType, DeviceStatus

Predicate = Callable[[DeviceRecord, datetime, DashboardThresholds], bool]


@dataclass(frozen=True)
class AlertRule:
    """Definition of a single alert rule.

    Attributes:
        name: Rule identifier for logging and debugging
        condition: Pure predicate over (device, now, thresholds)
        alert_type: Alert type emitted when the condition holds
        severity: Alert severity
        is_critical: Whether the alert counts as critical
        message_template: Alert message with {placeholders} filled from
            the thresholds (e.g. {communication_lost_minutes})
    """

    name: str
    condition: Predicate
    alert_type: AlertType
    severity: AlertSeverity
    is_critical: bool
    message_template: str

    def matches(
        self, device: DeviceRecord, now: datetime, thresholds: DashboardThresholds
    ) -> bool:
        return self.condition(device, now, thresholds)

    def render_message(self, thresholds: DashboardThresholds) -> str:
        return self.message_template.format(
            online_minutes=thresholds.online_minutes,
            irregular_minutes=thresholds.irregular_minutes,
            communication_lost_minutes=thresholds.communication_lost_minutes,
        )


def _silent_longer_than(device: DeviceRecord, now: datetime, window: timedelta) -> bool:
    last = device.last_communication
    return last is not None and last < now - window


ALERT_RULES: List[AlertRule] = [
    AlertRule(
        name="device_error",
        condition=lambda device, now, t: device.status == DeviceStatus.ERROR,
        alert_type=AlertType.DEVICE_ERROR,
        severity=AlertSeverity.HIGH,
        is_critical=True,
        message_template="Device is reporting an error status",
    ),
    AlertRule(
        name="maintenance_required",
        condition=lambda device, now, t: device.status == DeviceStatus.MAINTENANCE,
        alert_type=AlertType.MAINTENANCE_REQUIRED,
        severity=AlertSeverity.MEDIUM,
        is_critical=False,
        message_template="Device requires maintenance",
    ),
    AlertRule(
        name="never_communicated",
        condition=lambda device, now, t: device.last_communication is None,
        alert_type=AlertType.DEVICE_OFFLINE,
        severity=AlertSeverity.CRITICAL,
        is_critical=True,
        message_template="Device has never communicated",
    ),
    # With default thresholds this shadows irregular_communication entirely;
    # both windows are 30 minutes.
    AlertRule(
        name="communication_lost",
        condition=lambda device, now, t: _silent_longer_than(
            device, now, t.communication_lost_window
        ),
        alert_type=AlertType.COMMUNICATION_LOST,
        severity=AlertSeverity.HIGH,
        is_critical=True,
        message_template=(
            "Device has not responded for more than {communication_lost_minutes} minutes"
        ),
    ),
    AlertRule(
        name="irregular_communication",
        condition=lambda device, now, t: _silent_longer_than(
            device, now, t.irregular_window
        ),
        alert_type=AlertType.COMMUNICATION_LOST,
        severity=AlertSeverity.MEDIUM,
        is_critical=False,
        message_template="Irregular communication detected",
    ),
]


def find_matching_rule(
    device: DeviceRecord,
    now: datetime,
    thresholds: DashboardThresholds,
    rules: Optional[List[AlertRule]] = None,
) -> Optional[AlertRule]:
    """Find the first rule whose condition holds for the device.

    Args:
        device: Device to evaluate
        now: Reference instant
        thresholds: Thresholds passed to every predicate
        rules: Ordered rules, defaults to ALERT_RULES

    Returns:
        First matching AlertRule, or None if no rule matches
    """
    for rule in ALERT_RULES if rules is None else rules:
        if rule.matches(device, now, thresholds):
            return rule
    return None
