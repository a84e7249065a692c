"""
Payload builder — maps a notify call onto the version 5 ingestion schema.

Pure: no I/O, no clock, no randomness. Identical inputs produce identical bytes.
"""

import json
from typing import Any, Callable, Mapping, Optional

from pydantic import ValidationError

from bugsnag_notify._version import __version__
from bugsnag_notify.errors import SerializationError
from bugsnag_notify.models.config import Configuration
from bugsnag_notify.models.payload import AppInfo, EventInfo, EventPayload, ExceptionInfo, NotifierInfo, UserInfo
from bugsnag_notify.models.severity import Severity, severity_to_string

PAYLOAD_VERSION = "5"
NOTIFIER_NAME = "bugsnag-notify"
NOTIFIER_VERSION = __version__
NOTIFIER_URL = "https://github.com/bugsnag-notify/bugsnag-notify-python"
APP_TYPE = "python"

# Reserved metaData key for the rendered application state
STATE_KEY = "model"


def build_payload(
    config: Configuration,
    severity: Severity,
    message: str,
    metadata: Mapping[str, Any],
    describe_state: Optional[Callable[[], str]] = None,
) -> dict[str, Any]:
    """Build the JSON document for a single event.

    ``message`` is sent as the exception's errorClass. When ``describe_state`` is
    given, its result is stored under metaData["model"], replacing any caller value.

    Raises SerializationError if metadata cannot be represented as JSON.
    """
    wire_severity = severity_to_string(severity)
    meta_data = dict(metadata)
    if describe_state is not None:
        state = describe_state()
        if not isinstance(state, str):
            raise SerializationError(
                f"describe_state must return str, got {type(state).__name__}",
            )
        meta_data[STATE_KEY] = state

    try:
        # rejects NaN and infinity, which the JSON-mode dump would turn into null
        json.dumps(meta_data, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Metadata is not JSON-serializable: {e}") from e

    user = None
    if config.user is not None:
        user = UserInfo(id=config.user.id, name=config.user.username, email=config.user.email)

    try:
        payload = EventPayload(
            payload_version=PAYLOAD_VERSION,
            notifier=NotifierInfo(name=NOTIFIER_NAME, version=NOTIFIER_VERSION, url=NOTIFIER_URL),
            events=[
                EventInfo(
                    exceptions=[ExceptionInfo(error_class=message)],
                    context=config.context,
                    severity=wire_severity,
                    meta_data=meta_data,
                    app=AppInfo(version=config.code_version, release_stage=config.release_stage, type=APP_TYPE),
                    user=user,
                ),
            ],
        )
        return payload.model_dump(mode="json", by_alias=True)
    except ValidationError as e:
        raise SerializationError(f"Invalid event fields: {e.error_count()} error(s)") from e
    except (TypeError, ValueError) as e:
        raise SerializationError("Payload could not be serialized") from e


def encode_payload(document: Mapping[str, Any]) -> bytes:
    """Serialize a built document to UTF-8 JSON."""
    try:
        return json.dumps(document, ensure_ascii=False, allow_nan=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Payload is not JSON-serializable: {e}") from e
