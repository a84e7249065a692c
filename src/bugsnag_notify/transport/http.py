"""
HTTP transport for event delivery.

The notifier only needs ``send(request)``; anything with that coroutine
(a test double, a queue-backed sender) can stand in for HttpTransport.
"""

import logging
from typing import Optional, Protocol

import httpx
from pydantic import BaseModel, ConfigDict

from bugsnag_notify._version import __version__
from bugsnag_notify.errors import TransportError

logger = logging.getLogger("bugsnag_notify.transport.http")

USER_AGENT = f"bugsnag-notify/{__version__}"


class NotifyRequest(BaseModel):
    """Fully-built outbound request: method, URL, headers and encoded body."""
    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: dict[str, str]
    body: bytes


class Transport(Protocol):
    async def send(self, request: NotifyRequest) -> None: ...


class HttpTransport:
    def __init__(self, timeout: Optional[float] = None, client: Optional[httpx.AsyncClient] = None):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
        )

    async def send(self, request: NotifyRequest) -> None:
        """Issue the request once. The response body is never read."""
        headers = {"Content-Type": "application/json", **request.headers}
        try:
            resp = await self._client.request(request.method, request.url, content=request.body, headers=headers)
        except httpx.HTTPError as e:
            logger.debug("Notification request to %s failed: %s", request.url, type(e).__name__)
            raise TransportError() from e
        if not resp.is_success:
            logger.debug("Notification request to %s returned HTTP %d", request.url, resp.status_code)
            raise TransportError()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
