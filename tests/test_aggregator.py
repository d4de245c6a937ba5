"""Tests for dashboard aggregation and distributions."""

import pytest

from helpers import make_device
from iot_dashboard.analysis.aggregator import (
    compute_dashboard_stats,
    compute_status_distribution,
    compute_type_distribution,
    count_by,
    determine_system_status,
    most_common,
)
from iot_dashboard.analysis.thresholds import DashboardThresholds
from iot_dashboard.models import DeviceStatus, DeviceType, SystemStatus


class TestCountBy:
    def test_absent_members_default_to_zero(self):
        counts = count_by(DeviceStatus, [DeviceStatus.ACTIVE, DeviceStatus.ACTIVE])

        assert counts[DeviceStatus.ACTIVE] == 2
        assert counts[DeviceStatus.ERROR] == 0
        assert set(counts) == set(DeviceStatus)

    def test_most_common_tie_goes_to_first_declared(self):
        counts = count_by(DeviceStatus, [DeviceStatus.ERROR, DeviceStatus.INACTIVE])
        assert most_common(counts) == ("INACTIVE", 1)

    def test_most_common_of_nothing(self):
        assert most_common(count_by(DeviceType, [])) == ("N/A", 0)


class TestDetermineSystemStatus:
    """Tests for the system status priority order."""

    def test_error_share_above_ten_percent_is_critical(self):
        """CRITICAL wins even when everything is online."""
        assert determine_system_status(100.0, 2, 10) == SystemStatus.CRITICAL

    def test_error_share_exactly_ten_percent_is_not_critical(self):
        assert determine_system_status(100.0, 1, 10) == SystemStatus.EXCELLENT

    def test_low_online_is_warning(self):
        assert determine_system_status(69.9, 0, 10) == SystemStatus.WARNING

    def test_seventy_percent_is_healthy(self):
        assert determine_system_status(70.0, 0, 10) == SystemStatus.HEALTHY

    def test_ninety_percent_is_excellent(self):
        assert determine_system_status(90.0, 0, 10) == SystemStatus.EXCELLENT

    def test_between_is_healthy(self):
        assert determine_system_status(89.9, 0, 10) == SystemStatus.HEALTHY

    def test_custom_thresholds(self):
        thresholds = DashboardThresholds(
            critical_error_ratio=0.5,
            warning_online_percentage=50.0,
            excellent_online_percentage=60.0,
        )
        assert determine_system_status(65.0, 2, 10, thresholds) == SystemStatus.EXCELLENT
        assert determine_system_status(55.0, 6, 10, thresholds) == SystemStatus.CRITICAL


class TestComputeDashboardStats:
    """Tests for compute_dashboard_stats."""

    def test_empty_snapshot_is_no_data(self, now):
        stats = compute_dashboard_stats([], now)

        assert stats.total_devices == 0
        assert stats.online_devices == 0
        assert stats.offline_devices == 0
        assert stats.error_devices == 0
        assert stats.online_percentage == 0.0
        assert stats.availability_percentage == 0.0
        assert stats.total_device_types == 0
        assert stats.system_status == SystemStatus.NO_DATA
        assert stats.has_critical_alerts is False
        assert stats.active_alerts == 0
        assert stats.last_updated == now
        assert all(count == 0 for count in stats.status_counts.values())

    def test_example_snapshot(self, example_snapshot, now):
        """ERROR + never-communicated + recent device."""
        stats = compute_dashboard_stats(example_snapshot, now)

        assert stats.total_devices == 3
        assert stats.online_devices == 1
        assert stats.offline_devices == 2
        assert stats.error_devices == 1
        assert stats.active_devices == 2
        assert stats.online_percentage == 33.3
        assert stats.availability_percentage == 66.7
        assert stats.system_status == SystemStatus.CRITICAL
        assert stats.has_critical_alerts is True
        assert stats.active_alerts == 2

    def test_status_counts_cover_every_status(self, now):
        devices = [
            make_device(1, status=DeviceStatus.ACTIVE, minutes_ago=1),
            make_device(2, status=DeviceStatus.INACTIVE, minutes_ago=1),
            make_device(3, status=DeviceStatus.MAINTENANCE, minutes_ago=1),
            make_device(4, status=DeviceStatus.CONFIGURING, minutes_ago=1),
            make_device(5, status=DeviceStatus.OFFLINE, minutes_ago=1),
        ]

        stats = compute_dashboard_stats(devices, now)

        assert stats.active_devices == 1
        assert stats.inactive_devices == 1
        assert stats.maintenance_devices == 1
        assert stats.configuring_devices == 1
        assert stats.offline_status_devices == 1
        assert stats.error_devices == 0
        assert stats.status_counts[DeviceStatus.ERROR] == 0
        assert sum(stats.status_counts.values()) == stats.total_devices

    def test_excellent_fleet(self, now):
        devices = [make_device(i, minutes_ago=1) for i in range(10)]

        stats = compute_dashboard_stats(devices, now)

        assert stats.online_percentage == 100.0
        assert stats.availability_percentage == 100.0
        assert stats.system_status == SystemStatus.EXCELLENT
        assert stats.has_critical_alerts is False
        assert stats.active_alerts == 0

    def test_healthy_fleet(self, now):
        devices = [make_device(i, minutes_ago=1) for i in range(8)]
        devices += [make_device(i, minutes_ago=10) for i in range(8, 10)]

        stats = compute_dashboard_stats(devices, now)

        assert stats.online_percentage == 80.0
        assert stats.system_status == SystemStatus.HEALTHY

    def test_warning_fleet(self, now):
        devices = [make_device(i, minutes_ago=1) for i in range(6)]
        devices += [make_device(i, minutes_ago=20) for i in range(6, 10)]

        stats = compute_dashboard_stats(devices, now)

        assert stats.online_percentage == 60.0
        assert stats.system_status == SystemStatus.WARNING

    def test_high_alerts_are_not_critical_flag(self, now):
        """has_critical_alerts looks only at CRITICAL severity, not HIGH."""
        devices = [
            make_device(1, status=DeviceStatus.ERROR, minutes_ago=1),
            make_device(2, minutes_ago=1),
        ]

        stats = compute_dashboard_stats(devices, now)

        assert stats.active_alerts == 1
        assert stats.has_critical_alerts is False

    def test_distinct_device_types(self, now):
        devices = [
            make_device(1, device_type=DeviceType.TRACKER, minutes_ago=1),
            make_device(2, device_type=DeviceType.TRACKER, minutes_ago=1),
            make_device(3, device_type=DeviceType.OXYGEN_METER, minutes_ago=1),
        ]
        assert compute_dashboard_stats(devices, now).total_device_types == 2

    @pytest.mark.parametrize("minutes", [None, 1, 4, 5, 6, 45])
    def test_online_plus_offline_is_total(self, now, minutes):
        devices = [make_device(1, minutes_ago=minutes), make_device(2, minutes_ago=2)]

        stats = compute_dashboard_stats(devices, now)

        assert stats.online_devices + stats.offline_devices == stats.total_devices == 2
        assert 0.0 <= stats.online_percentage <= 100.0

    def test_idempotent(self, example_snapshot, now):
        first = compute_dashboard_stats(example_snapshot, now).model_dump_json()
        second = compute_dashboard_stats(example_snapshot, now).model_dump_json()
        assert first == second

    def test_json_projection(self, example_snapshot, now):
        data = compute_dashboard_stats(example_snapshot, now).model_dump(mode="json")

        assert data["system_status"] == "CRITICAL"
        assert data["status_counts"]["ERROR"] == 1
        assert data["last_updated"].startswith("2024-01-15T14:30:00")


class TestDistributions:
    """Tests for status and type distributions."""

    def test_status_distribution(self):
        devices = [
            make_device(1, status=DeviceStatus.ACTIVE),
            make_device(2, status=DeviceStatus.ACTIVE),
            make_device(3, status=DeviceStatus.ERROR),
        ]

        dist = compute_status_distribution(devices)

        assert dist.total_devices == 3
        assert dist.status_counts[DeviceStatus.ACTIVE] == 2
        assert dist.status_counts[DeviceStatus.MAINTENANCE] == 0
        assert dist.most_common_status == "ACTIVE"
        assert dist.most_common_count == 2

    def test_type_distribution(self):
        devices = [
            make_device(1, device_type=DeviceType.HUMIDITY_SENSOR),
            make_device(2, device_type=DeviceType.PRESSURE_SENSOR),
            make_device(3, device_type=DeviceType.PRESSURE_SENSOR),
        ]

        dist = compute_type_distribution(devices)

        assert dist.total_devices == 3
        assert dist.total_types == 2
        assert dist.most_common_type == "PRESSURE_SENSOR"
        assert dist.most_common_count == 2
        assert dist.type_counts[DeviceType.TRACKER] == 0

    def test_empty_distributions(self):
        status = compute_status_distribution([])
        types = compute_type_distribution([])

        assert status.most_common_status == "N/A"
        assert status.most_common_count == 0
        assert types.most_common_type == "N/A"
        assert types.total_types == 0
