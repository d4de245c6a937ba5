"""Pydantic settings models for IoT dashboard configuration."""

from __future__ import annotations

import os
from typing import Any, Dict, Literal, Optional, Tuple, Type
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from iot_dashboard.analysis.thresholds import DashboardThresholds


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source reading dashboard values from the CONFIG_PATH YAML file.

    The file is parsed once per settings build. Read and parse errors
    yield no values here; load_yaml_config reports them to the user.
    """

    def __init__(self, settings_cls: Type[BaseSettings]):
        super().__init__(settings_cls)
        self._values = _read_yaml_mapping(os.environ.get("CONFIG_PATH"))

    def get_field_value(
        self, field: Any, field_name: str
    ) -> Tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, False

    def __call__(self) -> Dict[str, Any]:
        return {
            name: self._values[name]
            for name in self.settings_cls.model_fields
            if name in self._values
        }


def _read_yaml_mapping(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


class DashboardSettings(BaseSettings):
    """IoT dashboard configuration settings.

    Configuration is loaded in the following precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables (IOT_DASHBOARD_ prefix)
    3. .env file
    4. YAML configuration file (via CONFIG_PATH)
    5. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="IOT_DASHBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Snapshot source
    devices_path: Optional[str] = Field(
        default=None,
        description="Path to the JSON/YAML device snapshot",
    )

    # Communication windows
    online_threshold_minutes: int = Field(
        default=5,
        description="Minutes within which a device counts as online",
        gt=0,
    )
    irregular_threshold_minutes: int = Field(
        default=30,
        description="Minutes of silence after which an ACTIVE device is irregular",
        gt=0,
    )
    communication_lost_threshold_minutes: int = Field(
        default=30,
        description="Minutes of silence that raise the HIGH communication-lost alert",
        gt=0,
    )

    # System status grading
    critical_error_ratio: float = Field(
        default=0.10,
        description="Share of ERROR devices above which the system is CRITICAL",
        ge=0.0,
        le=1.0,
    )
    warning_online_percentage: float = Field(
        default=70.0,
        description="Online percentage below which the system is WARNING",
        ge=0.0,
        le=100.0,
    )
    excellent_online_percentage: float = Field(
        default=90.0,
        description="Online percentage at or above which the system is EXCELLENT",
        ge=0.0,
        le=100.0,
    )

    timezone: str = Field(
        default="UTC",
        description="Timezone that defines 'today' for connectivity windows",
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format: json (production) or text (development)",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to set precedence.

        Order (first = highest priority):
        1. init_settings (constructor arguments)
        2. env_settings (environment variables with IOT_DASHBOARD_ prefix)
        3. dotenv_settings (.env file)
        4. yaml_settings (CONFIG_PATH YAML file)
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL"}
        normalized = v.upper()
        if normalized == "WARN":
            normalized = "WARNING"
        if normalized not in valid_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: DEBUG, INFO, WARNING, ERROR"
            )
        return normalized

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone '{v}'. Use an IANA name like 'Europe/Berlin'")
        return v

    @model_validator(mode="after")
    def validate_online_percentages(self) -> "DashboardSettings":
        """Warning level must not exceed the excellent level."""
        if self.warning_online_percentage > self.excellent_online_percentage:
            raise ValueError(
                "warning_online_percentage must be <= excellent_online_percentage"
            )
        return self

    def get_zoneinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def to_thresholds(self) -> DashboardThresholds:
        """Build engine thresholds from these settings."""
        return DashboardThresholds(
            online_minutes=self.online_threshold_minutes,
            irregular_minutes=self.irregular_threshold_minutes,
            communication_lost_minutes=self.communication_lost_threshold_minutes,
            critical_error_ratio=self.critical_error_ratio,
            warning_online_percentage=self.warning_online_percentage,
            excellent_online_percentage=self.excellent_online_percentage,
        )
