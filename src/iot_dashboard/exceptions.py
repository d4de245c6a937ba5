"""Custom exceptions for the IoT dashboard.

The computations themselves never raise; these cover the layers around
them (loading snapshots, running the CLI). Each exception includes a
helpful message and an optional troubleshooting hint.
"""

from typing import Optional


class DashboardError(Exception):
    """Base exception for all dashboard errors.

    Attributes:
        message: Human-readable error message.
        hint: Optional troubleshooting hint.
        exit_code: Suggested exit code for CLI applications.
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        hint: Optional[str] = None,
        exit_code: Optional[int] = None,
    ) -> None:
        self.message = message
        self.hint = hint
        if exit_code is not None:
            self.exit_code = exit_code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional hint."""
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class SnapshotLoadError(DashboardError):
    """The device snapshot could not be loaded.

    This typically occurs when:
    - The devices file does not exist or cannot be read
    - The file is not valid JSON/YAML
    - A record is missing required fields or has unknown enum values
    """

    exit_code: int = 2
