"""Dashboard aggregation: fleet counts, percentages, and system status.

Counting is keyed by enumeration: every member starts at zero and one
pass over the snapshot increments it, so absent statuses and types read
as 0 rather than missing.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, Tuple, Type, TypeVar

import structlog

from iot_dashboard.analysis.alerts.generator import compute_active_alerts
from iot_dashboard.analysis.connectivity import calculate_percentage, count_online_since
from iot_dashboard.analysis.models import DashboardStats, StatusDistribution, TypeDistribution
from iot_dashboard.analysis.thresholds import DEFAULT_THRESHOLDS, DashboardThresholds
from iot_dashboard.models.device import DeviceRecord
from iot_dashboard.models.enums import AlertSeverity, DeviceStatus, DeviceType, SystemStatus
from iot_dashboard.utils.timestamps import ensure_aware

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=Enum)


def count_by(members: Type[E], values: Iterable[E]) -> Dict[E, int]:
    """Count values per enumeration member, including zero counts."""
    counts: Dict[E, int] = {member: 0 for member in members}
    for value in values:
        counts[value] += 1
    return counts


def most_common(counts: Dict[E, int]) -> Tuple[str, int]:
    """Name and count of the most frequent member.

    Ties go to the member declared first. Returns ("N/A", 0) when every
    count is zero.
    """
    best_name, best_count = "N/A", 0
    for member, count in counts.items():
        if count > best_count:
            best_name, best_count = member.name, count
    return best_name, best_count


def determine_system_status(
    online_percentage: float,
    error_devices: int,
    total_devices: int,
    thresholds: DashboardThresholds = DEFAULT_THRESHOLDS,
) -> SystemStatus:
    """Grade the fleet; the first matching condition wins.

    1. ERROR share above critical_error_ratio -> CRITICAL
    2. online percentage below the warning level -> WARNING
    3. online percentage at or above the excellent level -> EXCELLENT
    4. otherwise -> HEALTHY
    """
    if error_devices > total_devices * thresholds.critical_error_ratio:
        return SystemStatus.CRITICAL
    if online_percentage < thresholds.warning_online_percentage:
        return SystemStatus.WARNING
    if online_percentage >= thresholds.excellent_online_percentage:
        return SystemStatus.EXCELLENT
    return SystemStatus.HEALTHY


def compute_dashboard_stats(
    devices: Iterable[DeviceRecord],
    now: datetime,
    thresholds: DashboardThresholds = DEFAULT_THRESHOLDS,
) -> DashboardStats:
    """Compute headline dashboard statistics for a device snapshot.

    Args:
        devices: Snapshot of device records
        now: Reference instant for the online window and alerts
        thresholds: Windows and system status limits

    Returns:
        DashboardStats; NO_DATA with zero counts for an empty snapshot
    """
    now = ensure_aware(now)
    snapshot = tuple(devices)

    if not snapshot:
        return DashboardStats(
            status_counts=count_by(DeviceStatus, ()),
            last_updated=now,
            system_status=SystemStatus.NO_DATA,
        )

    total = len(snapshot)
    online = count_online_since(snapshot, now - thresholds.online_window)
    status_counts = count_by(DeviceStatus, (device.status for device in snapshot))
    online_percentage = calculate_percentage(online, total)

    alerts = compute_active_alerts(snapshot, now, thresholds)
    has_critical_alerts = any(alert.severity == AlertSeverity.CRITICAL for alert in alerts)

    system_status = determine_system_status(
        online_percentage, status_counts[DeviceStatus.ERROR], total, thresholds
    )

    stats = DashboardStats(
        total_devices=total,
        online_devices=online,
        offline_devices=total - online,
        active_devices=status_counts[DeviceStatus.ACTIVE],
        inactive_devices=status_counts[DeviceStatus.INACTIVE],
        error_devices=status_counts[DeviceStatus.ERROR],
        maintenance_devices=status_counts[DeviceStatus.MAINTENANCE],
        configuring_devices=status_counts[DeviceStatus.CONFIGURING],
        offline_status_devices=status_counts[DeviceStatus.OFFLINE],
        status_counts=status_counts,
        online_percentage=online_percentage,
        availability_percentage=calculate_percentage(
            status_counts[DeviceStatus.ACTIVE], total
        ),
        total_device_types=len({device.device_type for device in snapshot}),
        last_updated=now,
        system_status=system_status,
        has_critical_alerts=has_critical_alerts,
        active_alerts=len(alerts),
    )
    logger.debug(
        "dashboard_stats_computed",
        total=total,
        online=online,
        system_status=system_status.value,
        active_alerts=len(alerts),
    )
    return stats


def compute_status_distribution(devices: Iterable[DeviceRecord]) -> StatusDistribution:
    """Count devices per status and find the most common one."""
    snapshot = tuple(devices)
    counts = count_by(DeviceStatus, (device.status for device in snapshot))
    name, count = most_common(counts)
    return StatusDistribution(
        status_counts=counts,
        total_devices=len(snapshot),
        most_common_status=name,
        most_common_count=count,
    )


def compute_type_distribution(devices: Iterable[DeviceRecord]) -> TypeDistribution:
    """Count devices per type and find the most common one."""
    snapshot = tuple(devices)
    counts = count_by(DeviceType, (device.device_type for device in snapshot))
    name, count = most_common(counts)
    return TypeDistribution(
        type_counts=counts,
        total_devices=len(snapshot),
        most_common_type=name,
        most_common_count=count,
        total_types=sum(1 for value in counts.values() if value > 0),
    )
