"""Timestamp helpers for device communication times."""

from datetime import datetime, timedelta, timezone
from typing import Any

from dateutil import parser as dateutil_parser

_ONE_MINUTE = timedelta(minutes=1)


def normalize_timestamp(value: Any) -> datetime:
    """Convert various timestamp formats to a timezone-aware datetime.

    Handles:
    - int/float: Unix timestamp (auto-detects milliseconds vs seconds)
    - str: ISO format or other parseable formats via dateutil
    - datetime: Returned unchanged if aware, assumed UTC if naive

    Args:
        value: Timestamp as int (ms or s), float, str, or datetime

    Returns:
        Timezone-aware datetime (epoch values are returned in UTC)

    Raises:
        ValueError: If value cannot be parsed as a timestamp

    Example:
        >>> normalize_timestamp(1705084800000)  # milliseconds
        datetime.datetime(2024, 1, 12, 18, 40, tzinfo=datetime.timezone.utc)
        >>> normalize_timestamp("2024-01-12T20:00:00Z")
        datetime.datetime(2024, 1, 12, 20, 0, tzinfo=tzutc())
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot parse timestamp: {value!r} (type: bool)")
    if isinstance(value, datetime):
        return ensure_aware(value)
    if isinstance(value, (int, float)):
        # Timestamps > 1e12 are milliseconds (after year 2001)
        if value > 1e12:
            value = value / 1000
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        try:
            dt = dateutil_parser.parse(value)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Cannot parse timestamp: {value!r}") from e
        return ensure_aware(dt)
    raise ValueError(f"Cannot parse timestamp: {value!r} (type: {type(value).__name__})")


def ensure_aware(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes keep their zone."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes elapsed from start to end, truncated toward zero."""
    return int((end - start) / _ONE_MINUTE)


def start_of_day(now: datetime) -> datetime:
    """Midnight of now's calendar day, in now's timezone."""
    return now.replace(hour=0, minute=0, second=0, microsecond=0)
