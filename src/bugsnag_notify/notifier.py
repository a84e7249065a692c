"""
Notifier — release-stage filtering plus a single POST per event.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from bugsnag_notify.models.config import Configuration
from bugsnag_notify.models.severity import Severity, severity_to_string
from bugsnag_notify.payload import PAYLOAD_VERSION, build_payload, encode_payload
from bugsnag_notify.transport.http import NotifyRequest, Transport

logger = logging.getLogger("bugsnag_notify.notifier")

NOTIFY_URL = "https://notify.bugsnag.com"


def should_send(config: Configuration) -> bool:
    """An empty allow-list means every release stage transmits."""
    if not config.notify_release_stages:
        return True
    return config.release_stage in config.notify_release_stages


def build_request(
    config: Configuration,
    severity: Severity,
    message: str,
    metadata: Mapping[str, Any],
    describe_state: Optional[Callable[[], str]] = None,
) -> NotifyRequest:
    body = encode_payload(build_payload(config, severity, message, metadata, describe_state))
    return NotifyRequest(
        method="POST",
        url=NOTIFY_URL,
        headers={
            "Bugsnag-Api-Key": config.token,
            "Bugsnag-Payload-Version": PAYLOAD_VERSION,
        },
        body=body,
    )


async def notify(
    config: Configuration,
    severity: Severity,
    message: str,
    metadata: Mapping[str, Any],
    describe_state: Optional[Callable[[], str]] = None,
    *,
    transport: Transport,
) -> None:
    """Report one event.

    Suppressed events are logged and never reach the transport. Serialization
    errors are raised before any send; transport failures propagate as
    TransportError. Nothing is retried.
    """
    if not should_send(config):
        logger.info(
            "Suppressed notification %r: release stage %r is not in notify_release_stages %s",
            message, config.release_stage, list(config.notify_release_stages),
        )
        return

    request = build_request(config, severity, message, metadata, describe_state)
    logger.debug("Sending %s notification to %s", severity_to_string(severity), request.url)
    await transport.send(request)
