"""
bugsnag-notify — error event reporting for Python applications.

Builds version 5 ingestion payloads and delivers them to notify.bugsnag.com.
"""

from bugsnag_notify._version import __version__
from bugsnag_notify.client import AsyncBugsnag, Bugsnag, create_client
from bugsnag_notify.errors import BugsnagNotifyError, ConfigurationError, SerializationError, TransportError
from bugsnag_notify.models.config import Configuration, User
from bugsnag_notify.models.severity import Severity, severity_to_string
from bugsnag_notify.notifier import NOTIFY_URL, notify, should_send
from bugsnag_notify.payload import build_payload
from bugsnag_notify.transport.http import HttpTransport, NotifyRequest

__all__ = [
    "AsyncBugsnag",
    "Bugsnag",
    "create_client",
    "notify",
    "should_send",
    "build_payload",
    "Configuration",
    "User",
    "Severity",
    "severity_to_string",
    "HttpTransport",
    "NotifyRequest",
    "NOTIFY_URL",
    "BugsnagNotifyError",
    "ConfigurationError",
    "SerializationError",
    "TransportError",
]
