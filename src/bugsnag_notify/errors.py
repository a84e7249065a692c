"""
bugsnag-notify error types.
"""

from typing import Any, Optional


class BugsnagNotifyError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ConfigurationError(BugsnagNotifyError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("configuration_error", message, details)


class SerializationError(BugsnagNotifyError):
    """Metadata could not be represented as JSON. Raised before any network I/O."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("serialization_error", message, details)


class TransportError(BugsnagNotifyError):
    def __init__(self, message: str = "Failed to send notification"):
        super().__init__("transport_error", message)
