"""Device factories shared by the test modules."""

from datetime import datetime, timedelta, timezone

from iot_dashboard.models import DeviceRecord, DeviceStatus, DeviceType

NOW = datetime(2024, 1, 15, 14, 30, 0, tzinfo=timezone.utc)


def make_device(
    device_id,
    status=DeviceStatus.ACTIVE,
    minutes_ago=None,
    device_type=DeviceType.GENERIC,
    **kwargs,
):
    """Build a DeviceRecord whose last communication is minutes_ago before NOW."""
    last_communication = None
    if minutes_ago is not None:
        last_communication = NOW - timedelta(minutes=minutes_ago)
    return DeviceRecord(
        id=device_id,
        name=kwargs.pop("name", f"Device {device_id}"),
        device_type=device_type,
        status=status,
        last_communication=last_communication,
        **kwargs,
    )


