"""
Aiohttp transport implementation for Market SDK.

This module provides AiohttpTransport, an alternative async HTTP client for the SDK.
The session is created lazily on the first request so the transport can be built
outside of a running event loop.
"""

import asyncio

import aiohttp

from market_sdk.exceptions import TransportError

from .base import BaseTransport
from .base import UnifiedResponse


class AiohttpTransport(BaseTransport):
    """
    Async transport implementation using aiohttp.ClientSession.
    """

    def __init__(self, timeout: float = 30.0):
        self._timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )

        timeout_obj = aiohttp.ClientTimeout(total=timeout or self._timeout)
        try:
            async with self._session.request(
                method=method,
                url=url,
                headers=headers,
                data=content,
                timeout=timeout_obj,
            ) as response:
                body = await response.read()
                return UnifiedResponse(response.status, body, response.headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise TransportError(f"execute request: {err!r}") from err

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None
