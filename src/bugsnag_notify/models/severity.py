"""
Event severity levels.
"""

from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


def severity_to_string(severity: Severity) -> str:
    """Wire value for a severity: "error", "warning" or "info"."""
    if not isinstance(severity, Severity):
        raise ValueError(f"Unknown severity: {severity!r}")
    return severity.value
