"""Shared fixtures: a fixed configuration and an in-memory transport double."""

import pytest

from bugsnag_notify import Configuration, User
from bugsnag_notify.errors import TransportError
from bugsnag_notify.transport.http import NotifyRequest


class RecordingTransport:
    """Collects requests instead of sending them."""

    def __init__(self, fail: bool = False):
        self.requests: list[NotifyRequest] = []
        self.fail = fail

    async def send(self, request: NotifyRequest) -> None:
        self.requests.append(request)
        if self.fail:
            raise TransportError()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def config() -> Configuration:
    return Configuration(
        token="abc123def456",
        code_version="1.4.2",
        context="checkout",
        release_stage="production",
    )


@pytest.fixture
def leeroy() -> User:
    return User(id="42", username="Leeroy Jenkins", email="support@bugsnag.com")


@pytest.fixture
def failing_transport() -> RecordingTransport:
    return RecordingTransport(fail=True)
