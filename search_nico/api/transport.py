"""Transport used by the request builders to reach the search API.

Anything implementing Transport can stand in for HTTP (tests, alternative
clients). HttpxTransport is the default.
"""

from abc import ABC, abstractmethod

import httpx

from search_nico.core.config import config
from search_nico.core.errors import TransportError


class Transport(ABC):
    """Issues one POST and returns the raw response body."""

    @abstractmethod
    async def post(self, path: str, serialized_query: str, timeout_ms: int) -> str:
        """POST serialized_query to path and return the body text.

        Raises TransportError on network failure or a non-200 status.
        """


class HttpxTransport(Transport):
    """POSTs JSON bodies with httpx. One client per request unless one is injected."""

    def __init__(self, base_url: str | None = None, client: httpx.AsyncClient | None = None):
        self._base_url = (base_url or config.base_url).rstrip("/")
        self._client = client

    async def post(self, path: str, serialized_query: str, timeout_ms: int) -> str:
        url = f"{self._base_url}{path}"
        if self._client is not None:
            return await self._post(self._client, url, serialized_query, timeout_ms)
        async with httpx.AsyncClient() as client:
            return await self._post(client, url, serialized_query, timeout_ms)

    async def _post(
        self,
        client: httpx.AsyncClient,
        url: str,
        serialized_query: str,
        timeout_ms: int,
    ) -> str:
        try:
            response = await client.post(
                url,
                content=serialized_query.encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=timeout_ms / 1000,
            )
        except httpx.TimeoutException as e:
            raise TransportError(0, "Timeout", f"Request to {url} timed out after {timeout_ms}ms") from e
        except httpx.HTTPError as e:
            raise TransportError(0, type(e).__name__, str(e) or f"Request to {url} failed") from e

        if response.status_code != 200:
            raise TransportError(response.status_code, response.reason_phrase)
        return response.text
