"""
IoT Dashboard - Turn raw IoT device records into operational health signals.

This package computes dashboard statistics, connectivity metrics, and a
ranked list of actionable alerts from a snapshot of device records.

Features:
- Pure, on-demand computation over a snapshot with an explicit "now"
- Ordered alert rules with deterministic ranking
- Configuration via YAML with environment variable overrides
- Structured logging (JSON for production, text for development)
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
