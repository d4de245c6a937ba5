"""Utility helpers for the IoT dashboard."""

from iot_dashboard.utils.timestamps import (
    ensure_aware,
    minutes_between,
    normalize_timestamp,
    start_of_day,
)

__all__ = ["ensure_aware", "minutes_between", "normalize_timestamp", "start_of_day"]
