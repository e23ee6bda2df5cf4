"""HTTP transport used by API clients.

A transport performs exactly one GET and hands back the raw status and body.
It never interprets the status code; classification belongs to the caller.
"""

from dataclasses import dataclass
from typing import Protocol

import httpx

from data.base import TransportError


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: bytes


class Transport(Protocol):
    async def get(self, url: str) -> HttpResponse:
        """Perform one GET request. Raises TransportError on network failure."""
        ...


class HttpxTransport:
    """Live transport backed by ``httpx.AsyncClient``.

    With an injected client, connection pooling is shared across calls and the
    caller owns the client's lifetime. Without one, a short-lived client is
    opened per request.
    """

    def __init__(self, *, timeout: float = 30.0, client: httpx.AsyncClient | None = None) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be > 0")
        self.timeout = timeout
        self._client = client

    async def get(self, url: str) -> HttpResponse:
        if self._client is not None and self._client.is_closed:
            raise TransportError("Cannot send request: the injected HTTP client is closed")

        try:
            if self._client is not None:
                response = await self._client.get(url, timeout=self.timeout)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(url, timeout=self.timeout)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request timed out after {self.timeout}s") from exc
        except httpx.HTTPError as exc:
            # TransportError, and any other failure that left us without a response
            raise TransportError(f"Network error during request: {exc}") from exc

        return HttpResponse(status_code=response.status_code, body=response.content)
