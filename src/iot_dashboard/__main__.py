"""
Entry point for the iot-dashboard CLI.

Usage:
    iot-dashboard [REPORT] --devices devices.yaml   Print a report as JSON
    iot-dashboard --help                            Show help message
    iot-dashboard --version                         Show version and exit

Exit Codes:
    0 - Success
    1 - Configuration error (invalid settings, missing required values)
    2 - Snapshot error (devices file missing, unreadable, or invalid)
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime, tzinfo
from typing import Any, Callable, Dict, List, Optional

from iot_dashboard import __version__

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_SNAPSHOT_ERROR = 2

REPORTS = ("stats", "connectivity", "alerts", "status", "types", "all")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="iot-dashboard",
        description="Compute IoT device dashboard statistics and alerts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Reports:
  stats          Headline counts, percentages, and system status
  connectivity   Online windows and communication recency
  alerts         Ranked device alerts
  status         Device counts per status
  types          Device counts per device type
  all            Everything above (default)

Exit Codes:
  0   Success
  1   Configuration error
  2   Snapshot error (devices file missing or invalid)

Environment Variables:
  CONFIG_PATH                          Path to YAML configuration file
  IOT_DASHBOARD_DEVICES_PATH           Device snapshot (JSON or YAML)
  IOT_DASHBOARD_ONLINE_THRESHOLD_MINUTES
  IOT_DASHBOARD_IRREGULAR_THRESHOLD_MINUTES
  IOT_DASHBOARD_TIMEZONE               Timezone that defines "today"
  IOT_DASHBOARD_LOG_LEVEL              Logging level: DEBUG, INFO, WARNING, ERROR
  IOT_DASHBOARD_LOG_FORMAT             Log format: json or text

Examples:
  iot-dashboard alerts --devices devices.yaml
  iot-dashboard stats --devices devices.json --now 2024-01-15T14:30:00Z
""",
    )
    parser.add_argument(
        "report",
        nargs="?",
        choices=REPORTS,
        default="all",
        help="Report to print (default: all)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--devices",
        metavar="PATH",
        help="Device snapshot file (overrides IOT_DASHBOARD_DEVICES_PATH)",
    )
    parser.add_argument(
        "--now",
        metavar="TIMESTAMP",
        help="Evaluate as of this instant (ISO 8601; naive values are UTC)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    return parser.parse_args(argv)


def make_clock(now: Optional[str], zone: tzinfo) -> Callable[[], datetime]:
    """Build the service clock, fixed when --now is given.

    Either way the time is expressed in the configured zone so that
    "today" starts at local midnight.
    """
    from iot_dashboard.utils.timestamps import normalize_timestamp

    if now is None:
        return lambda: datetime.now(zone)
    fixed = normalize_timestamp(now).astimezone(zone)
    return lambda: fixed


def build_report(service: Any, report: str) -> Any:
    """Run the requested report and return its JSON projection."""
    builders: Dict[str, Callable[[], Any]] = {
        "stats": lambda: service.get_general_stats().model_dump(mode="json"),
        "connectivity": lambda: service.get_connectivity_stats().model_dump(mode="json"),
        "alerts": lambda: [
            alert.model_dump(mode="json") for alert in service.get_active_alerts()
        ],
        "status": lambda: service.get_status_distribution().model_dump(mode="json"),
        "types": lambda: service.get_type_distribution().model_dump(mode="json"),
    }
    if report == "all":
        return {name: build() for name, build in builders.items()}
    return builders[report]()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for iot-dashboard.

    Returns:
        Exit code (0=success, 1=config error, 2=snapshot error)
    """
    args = parse_args(argv)

    from iot_dashboard.config.loader import ConfigurationError, load_config
    from iot_dashboard.exceptions import SnapshotLoadError
    from iot_dashboard.logging import configure_logging, get_logger
    from iot_dashboard.service import DashboardService
    from iot_dashboard.sources import FileDeviceSource

    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except SystemExit as e:
        # Validation errors cause sys.exit(1) in loader
        return e.code if isinstance(e.code, int) else EXIT_CONFIG_ERROR

    configure_logging(log_format=config.log_format, log_level=config.log_level)
    log = get_logger()

    devices_path = args.devices or config.devices_path
    if not devices_path:
        print(
            "Configuration error: no device snapshot given. "
            "Pass --devices or set IOT_DASHBOARD_DEVICES_PATH.",
            file=sys.stderr,
        )
        return EXIT_CONFIG_ERROR

    try:
        clock = make_clock(args.now, config.get_zoneinfo())
    except ValueError as e:
        print(f"Configuration error: invalid --now value: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    service = DashboardService(
        FileDeviceSource(devices_path),
        thresholds=config.to_thresholds(),
        clock=clock,
    )

    log.info("report_starting", report=args.report, devices_path=devices_path)
    try:
        payload = build_report(service, args.report)
    except SnapshotLoadError as e:
        log.error("snapshot_load_failed", error=e.message)
        print(f"Snapshot error: {e}", file=sys.stderr)
        return e.exit_code

    print(json.dumps(payload, indent=args.indent or None))
    log.info("report_complete", report=args.report)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
