import httpx

from market_sdk.exceptions import TransportError

from .base import BaseTransport
from .base import UnifiedResponse


class HttpxTransport(BaseTransport):
    """
    Async transport implementation using httpx.AsyncClient.

    A preconfigured ``client`` may be passed in (custom proxies, mounts or an
    ``httpx.MockTransport`` in tests); the transport then closes it on ``close()``.
    """

    def __init__(self, timeout: float = 30.0, client: httpx.AsyncClient | None = None):
        self._timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=self._timeout)

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        try:
            async with self._client.stream(
                method=method,
                url=url,
                headers=headers,
                content=content,
                timeout=timeout or self._timeout,
            ) as response:
                body = await response.aread()
                return UnifiedResponse(response.status_code, body, response.headers)
        except httpx.HTTPError as err:
            raise TransportError(f"execute request: {err}") from err

    async def close(self):
        await self._client.aclose()
