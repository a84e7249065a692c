"""
AsyncBugsnag / Bugsnag — severity-bound clients over an immutable Configuration.
"""

import asyncio
from functools import partial
from typing import Any, Callable, Mapping, Optional

from bugsnag_notify.models.config import Configuration
from bugsnag_notify.models.severity import Severity
from bugsnag_notify.notifier import notify
from bugsnag_notify.transport.http import HttpTransport, Transport


class AsyncBugsnag:
    """Async client (primary). Safe to share across concurrent tasks."""

    def __init__(self, config: Configuration, transport: Optional[Transport] = None):
        self._config = config
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpTransport()

        self.error = partial(self.notify, Severity.ERROR)
        self.warning = partial(self.notify, Severity.WARNING)
        self.info = partial(self.notify, Severity.INFO)

    @property
    def config(self) -> Configuration:
        return self._config

    async def notify(
        self,
        severity: Severity,
        message: str,
        metadata: Optional[Mapping[str, Any]] = None,
        describe_state: Optional[Callable[[], str]] = None,
    ) -> None:
        await notify(
            self._config, severity, message, metadata or {}, describe_state,
            transport=self._transport,
        )

    async def close(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpTransport):
            await self._transport.close()

    async def __aenter__(self) -> "AsyncBugsnag":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def create_client(config: Configuration, transport: Optional[Transport] = None) -> AsyncBugsnag:
    return AsyncBugsnag(config, transport)


class Bugsnag:
    """Sync wrapper around AsyncBugsnag. Runs the event loop internally."""

    def __init__(self, config: Configuration, transport: Optional[Transport] = None):
        self._async = AsyncBugsnag(config, transport)
        self._loop = asyncio.new_event_loop()

        self.error = partial(self.notify, Severity.ERROR)
        self.warning = partial(self.notify, Severity.WARNING)
        self.info = partial(self.notify, Severity.INFO)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def config(self) -> Configuration:
        return self._async.config

    def notify(
        self,
        severity: Severity,
        message: str,
        metadata: Optional[Mapping[str, Any]] = None,
        describe_state: Optional[Callable[[], str]] = None,
    ) -> None:
        self._run(self._async.notify(severity, message, metadata, describe_state))

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
