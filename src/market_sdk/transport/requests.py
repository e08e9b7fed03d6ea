import asyncio

import requests

from market_sdk.exceptions import TransportError

from .base import BaseTransport
from .base import UnifiedResponse


class RequestsTransport(BaseTransport):
    """
    Sync transport implementation using requests.Session.

    This transport wraps the synchronous requests library in an async interface
    to provide compatibility with the async-first SDK design.

    Note: This is a compatibility layer for users who need to use requests
    in an async context. For best performance, use httpx or aiohttp.
    """

    def __init__(self, timeout: float = 30.0):
        self._timeout = timeout
        self._session = requests.Session()

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        """
        Async wrapper around synchronous requests.

        This method runs the synchronous requests call in a thread pool
        to avoid blocking the event loop.
        """
        loop = asyncio.get_running_loop()

        def make_request() -> UnifiedResponse:
            response = self._session.request(
                method=method,
                url=url,
                headers=headers or {},
                data=content,
                timeout=timeout or self._timeout,
            )
            try:
                return UnifiedResponse(
                    response.status_code, response.content, response.headers
                )
            finally:
                response.close()

        try:
            return await loop.run_in_executor(None, make_request)
        except requests.RequestException as err:
            raise TransportError(f"execute request: {err}") from err

    async def close(self):
        """
        Async wrapper for closing the session.
        """
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._session.close)
