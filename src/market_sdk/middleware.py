"""
Middleware interface for YandexMarketClient.

This module defines the `Middleware` protocol used in Market SDK.
It allows users to hook into the request/response lifecycle of all HTTP operations
performed by the client.

Any class that implements this interface can be passed to the client as a middleware.

Current implementations:
- Logging (see: LoggingMiddleware) - logs requests/responses with timing

Hooks receive everything they need as arguments and should not keep per-call
state on ``self``: one client may run several calls concurrently.
"""

from typing import Protocol

from market_sdk.request import APIRequest
from market_sdk.transport.base import UnifiedResponse


class Middleware(Protocol):
    async def on_request(self, request: APIRequest) -> None:
        """
        Called before the HTTP request is executed.

        This can be used to:
        - Log request details (current: LoggingMiddleware)
        - Record metrics
        - Cancel or abort execution (by raising)

        Args:
            request (APIRequest): Fully built request (method, URL with query, headers, body)
        """

    async def on_response(
        self, request: APIRequest, response: UnifiedResponse, elapsed: float
    ) -> None:
        """
        Called after the HTTP response is received (but before it's decoded).

        Args:
            request (APIRequest): The request that produced the response
            response (UnifiedResponse): Unified response object from transport layer
            elapsed (float): Seconds spent in the transport
        """
