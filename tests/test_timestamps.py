"""Tests for timestamp utilities."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from iot_dashboard.utils.timestamps import (
    ensure_aware,
    minutes_between,
    normalize_timestamp,
    start_of_day,
)


class TestNormalizeTimestamp:
    """Tests for normalize_timestamp function."""

    def test_millisecond_timestamp(self) -> None:
        """Millisecond timestamps are correctly converted."""
        result = normalize_timestamp(1705084800000)
        assert result == datetime(2024, 1, 12, 18, 40, tzinfo=timezone.utc)

    def test_second_timestamp(self) -> None:
        """Second timestamps are correctly converted."""
        result = normalize_timestamp(1705084800)
        assert result == datetime(2024, 1, 12, 18, 40, tzinfo=timezone.utc)

    def test_iso_string_with_z(self) -> None:
        """ISO strings with Z suffix are parsed as UTC."""
        result = normalize_timestamp("2024-01-12T20:00:00Z")
        assert result == datetime(2024, 1, 12, 20, 0, tzinfo=timezone.utc)

    def test_iso_string_with_offset_keeps_instant(self) -> None:
        """Offsets are preserved; the instant is unchanged."""
        result = normalize_timestamp("2024-01-12T15:00:00-05:00")
        assert result == datetime(2024, 1, 12, 20, 0, tzinfo=timezone.utc)

    def test_naive_string_assumed_utc(self) -> None:
        result = normalize_timestamp("2024-01-12 20:00:00")
        assert result.tzinfo is not None
        assert result == datetime(2024, 1, 12, 20, 0, tzinfo=timezone.utc)

    def test_invalid_string_raises(self) -> None:
        with pytest.raises(ValueError):
            normalize_timestamp("not a timestamp")

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(ValueError):
            normalize_timestamp([2024, 1, 12])

    def test_bool_is_rejected(self) -> None:
        """Booleans are ints in Python but never timestamps."""
        with pytest.raises(ValueError):
            normalize_timestamp(True)


class TestEnsureAware:
    def test_naive_gets_utc(self) -> None:
        assert ensure_aware(datetime(2024, 1, 1)).tzinfo == timezone.utc

    def test_aware_keeps_zone(self) -> None:
        zone = ZoneInfo("America/Sao_Paulo")
        dt = datetime(2024, 1, 1, tzinfo=zone)
        assert ensure_aware(dt).tzinfo is zone


class TestMinutesBetween:
    """Tests for whole-minute elapsed time."""

    def test_partial_minutes_are_truncated(self) -> None:
        start = datetime(2024, 1, 15, 14, 0, tzinfo=timezone.utc)
        assert minutes_between(start, start + timedelta(minutes=44, seconds=59)) == 44

    def test_negative_durations_truncate_toward_zero(self) -> None:
        """A timestamp slightly in the future yields 0, not -1."""
        start = datetime(2024, 1, 15, 14, 0, 30, tzinfo=timezone.utc)
        end = datetime(2024, 1, 15, 14, 0, 0, tzinfo=timezone.utc)
        assert minutes_between(start, end) == 0


class TestStartOfDay:
    def test_midnight_in_same_zone(self) -> None:
        zone = ZoneInfo("Europe/Berlin")
        now = datetime(2024, 1, 15, 9, 45, 12, 500, tzinfo=zone)
        assert start_of_day(now) == datetime(2024, 1, 15, 0, 0, tzinfo=zone)
