"""Progress reporting for long-running analyses."""

from collections.abc import Callable
from enum import StrEnum


class Severity(StrEnum):
    """Severity levels for progress messages."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


ProgressCallback = Callable[[Severity, str], None]


def noop_progress(severity: Severity, message: str) -> None:
    """Default no-op progress callback."""
