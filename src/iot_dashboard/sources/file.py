"""File-backed device source reading JSON or YAML snapshots.

Accepted document shapes:
    - a list of device records
    - a mapping with a ``devices`` list

YAML is a superset of JSON, so both formats go through yaml.safe_load.
"""

from pathlib import Path
from typing import Any, List, Union

import structlog
import yaml
from pydantic import ValidationError

from iot_dashboard.exceptions import SnapshotLoadError
from iot_dashboard.models.device import DeviceRecord

logger = structlog.get_logger(__name__)


class FileDeviceSource:
    """Device source that re-reads a snapshot file on every call."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def list_all_devices(self) -> List[DeviceRecord]:
        """Load and validate every record in the file.

        Returns:
            List of DeviceRecord in file order

        Raises:
            SnapshotLoadError: If the file is missing, unparsable, has the
                wrong shape, or contains an invalid record
        """
        records = self._read_records()

        devices: List[DeviceRecord] = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise SnapshotLoadError(
                    f"Device record #{index} in {self._path} is not a mapping",
                    hint="Each device must be an object with at least 'id' and 'name'.",
                )
            try:
                devices.append(DeviceRecord.from_record(record))
            except ValidationError as e:
                raise SnapshotLoadError(
                    f"Device record #{index} in {self._path} is invalid: "
                    f"{_summarize_errors(e)}",
                    hint="Check device_type and status against the supported values.",
                ) from e

        logger.info("snapshot_loaded", path=str(self._path), devices=len(devices))
        return devices

    def _read_records(self) -> List[Any]:
        try:
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise SnapshotLoadError(
                f"Devices file not found: {self._path}",
                hint="Pass --devices or set IOT_DASHBOARD_DEVICES_PATH.",
            )
        except OSError as e:
            raise SnapshotLoadError(
                f"Cannot read devices file {self._path}: {e.strerror or e}"
            ) from e
        except UnicodeDecodeError as e:
            raise SnapshotLoadError(
                f"Devices file {self._path} is not valid UTF-8: {e.reason}"
            ) from e
        except yaml.YAMLError as e:
            raise SnapshotLoadError(f"Invalid JSON/YAML in devices file {self._path}: {e}") from e

        if data is None:
            return []
        if isinstance(data, dict):
            data = data.get("devices", [])
        if not isinstance(data, list):
            raise SnapshotLoadError(
                f"Devices file {self._path} must contain a list of devices",
                hint="Use a top-level list, or a mapping with a 'devices' list.",
            )
        return data


def _summarize_errors(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        loc = ".".join(str(part) for part in item.get("loc", []))
        parts.append(f"'{loc}' {item.get('msg', 'invalid value')}")
    return "; ".join(parts)
