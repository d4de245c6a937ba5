"""Connectivity analysis: online windows and communication recency.

Every "online since X" count in the dashboard goes through
count_online_since, so the 5-minute, 1-hour, and today windows all share
one predicate.
"""

import math
from datetime import datetime, timedelta
from typing import Iterable

import structlog

from iot_dashboard.analysis.models import ConnectivityStats
from iot_dashboard.analysis.thresholds import DEFAULT_THRESHOLDS, DashboardThresholds
from iot_dashboard.models.device import DeviceRecord
from iot_dashboard.models.enums import DeviceStatus
from iot_dashboard.utils.timestamps import ensure_aware, minutes_between, start_of_day

logger = structlog.get_logger(__name__)


def calculate_percentage(numerator: int, denominator: int) -> float:
    """Percentage rounded half-up to one decimal, 0.0 when denominator is 0."""
    if denominator == 0:
        return 0.0
    return math.floor(numerator * 100.0 / denominator * 10.0 + 0.5) / 10.0


def communicated_since(device: DeviceRecord, since: datetime) -> bool:
    """Check whether the device communicated strictly after since."""
    return device.last_communication is not None and device.last_communication > since


def count_online_since(devices: Iterable[DeviceRecord], since: datetime) -> int:
    """Count devices that communicated strictly after since."""
    return sum(1 for device in devices if communicated_since(device, since))


def count_irregular(
    devices: Iterable[DeviceRecord], now: datetime, window: timedelta
) -> int:
    """Count ACTIVE devices whose last communication is older than window.

    Devices that never communicated are not irregular; they are counted
    as never-communicated instead.
    """
    cutoff = now - window
    return sum(
        1
        for device in devices
        if device.status == DeviceStatus.ACTIVE
        and device.last_communication is not None
        and device.last_communication < cutoff
    )


def average_minutes_since_communication(
    devices: Iterable[DeviceRecord], now: datetime
) -> float:
    """Mean whole-minute age of last communication, 0.0 if none communicated."""
    ages = [
        minutes_between(device.last_communication, now)
        for device in devices
        if device.last_communication is not None
    ]
    if not ages:
        return 0.0
    return sum(ages) / len(ages)


def compute_connectivity_stats(
    devices: Iterable[DeviceRecord],
    now: datetime,
    thresholds: DashboardThresholds = DEFAULT_THRESHOLDS,
) -> ConnectivityStats:
    """Compute connectivity metrics for a device snapshot.

    Args:
        devices: Snapshot of device records
        now: Reference instant for every window
        thresholds: Online and irregular windows

    Returns:
        ConnectivityStats, all zeros for an empty snapshot
    """
    now = ensure_aware(now)
    snapshot = tuple(devices)

    if not snapshot:
        return ConnectivityStats(last_check_time=now)

    total = len(snapshot)
    online_last_5_min = count_online_since(snapshot, now - thresholds.online_window)
    online_last_hour = count_online_since(snapshot, now - timedelta(hours=1))
    online_today = count_online_since(snapshot, start_of_day(now))
    never_communicated = sum(1 for device in snapshot if not device.has_communicated)
    active = sum(1 for device in snapshot if device.status == DeviceStatus.ACTIVE)

    stats = ConnectivityStats(
        devices_online_last_5_min=online_last_5_min,
        devices_online_last_hour=online_last_hour,
        devices_online_today=online_today,
        devices_never_communicated=never_communicated,
        average_time_since_last_communication=average_minutes_since_communication(
            snapshot, now
        ),
        overall_uptime_percentage=calculate_percentage(active, total),
        connectivity_rate=calculate_percentage(online_last_5_min, total),
        devices_with_irregular_communication=count_irregular(
            snapshot, now, thresholds.irregular_window
        ),
        last_check_time=now,
    )
    logger.debug(
        "connectivity_stats_computed",
        total=total,
        online_last_5_min=online_last_5_min,
        never_communicated=never_communicated,
    )
    return stats
