"""Shared fixtures for dashboard engine tests."""

import os

import pytest
import structlog

from helpers import NOW, make_device
from iot_dashboard.models import DeviceStatus


@pytest.fixture
def now():
    """Fixed reference instant for deterministic tests."""
    return NOW


@pytest.fixture
def example_snapshot():
    """Snapshot with one errored, one silent, and one healthy device."""
    return [
        make_device("A", status=DeviceStatus.ERROR, minutes_ago=5),
        make_device("B", status=DeviceStatus.ACTIVE, minutes_ago=None),
        make_device("C", status=DeviceStatus.ACTIVE, minutes_ago=1),
    ]


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch):
    """Keep host configuration out of settings-driven tests."""
    for key in list(os.environ):
        if key.startswith("IOT_DASHBOARD_") or key == "CONFIG_PATH":
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo CLI logging configuration so later tests do not log to a closed stream."""
    yield
    structlog.reset_defaults()
