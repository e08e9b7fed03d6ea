"""
Logging middleware for Market SDK.

This module provides LoggingMiddleware, a built-in middleware that logs
all HTTP requests and responses with timing information. Useful for
debugging, monitoring, and understanding SDK behavior.

The OAuth credentials in the authorization header are never logged.
"""

import logging

from market_sdk.request import APIRequest
from market_sdk.transport.base import UnifiedResponse

logger = logging.getLogger("market_sdk.middleware.logging")

_MASKED_HEADERS = {"authorization"}


def _safe_headers(headers: dict[str, str]) -> dict[str, str]:
    return {
        name: "***" if name.lower() in _MASKED_HEADERS else value
        for name, value in headers.items()
    }


class LoggingMiddleware:
    """
    Middleware for logging HTTP requests and responses in YandexMarketClient.
    Uses standard Python logging.

    Args:
        log_bodies (bool): Also log request and response bodies (default: False)
        level (int): Log level for the messages (default: logging.INFO)
    """

    def __init__(self, log_bodies: bool = False, level: int = logging.INFO):
        self.log_bodies = log_bodies
        self.level = level

    async def on_request(self, request: APIRequest):
        logger.log(
            self.level,
            "Request: %s %s | headers=%s",
            request.method,
            request.url,
            _safe_headers(request.headers),
        )
        if self.log_bodies and request.content:
            logger.log(self.level, "Request body: %s", request.content.decode("utf-8"))

    async def on_response(
        self, request: APIRequest, response: UnifiedResponse, elapsed: float
    ):
        logger.log(
            self.level,
            "Response: %s %s -> %s | elapsed=%.3fs",
            request.method,
            request.url,
            response.status_code,
            elapsed,
        )
        if self.log_bodies:
            logger.log(self.level, "Response body: %s", response.text)
