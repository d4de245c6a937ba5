"""Configuration management for the IoT dashboard."""

from iot_dashboard.config.loader import ConfigurationError, load_config
from iot_dashboard.config.settings import DashboardSettings

__all__ = [
    "ConfigurationError",
    "DashboardSettings",
    "load_config",
]
