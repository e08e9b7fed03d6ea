"""
Custom exceptions for the Market SDK.
Provides meaningful error classes for client consumers.
"""

from typing import Any, Optional


class MarketAPIError(Exception):
    """
    Base exception for all SDK-level API failures.

    Args:
        message (str): Short explanation of the error.
        details (Any | None): Optional structured details (e.g., the raw body).
    """

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class RequestBuildError(MarketAPIError):
    """Raised when a request cannot be built, e.g. the API endpoint is malformed."""


class TransportError(MarketAPIError):
    """Raised when the request could not be delivered or the response not received."""


class DecodeError(MarketAPIError):
    """Raised when the response body is not JSON of the expected shape."""


class MarketResponseError(MarketAPIError):
    """
    Raised when the marketplace answers with ``status: ERROR``.

    The original error entries are available in ``errors`` so callers can
    inspect codes one by one; ``str()`` gives the aggregated text.
    """

    def __init__(self, context: str, errors: list):
        self.context = context
        self.errors = list(errors)
        super().__init__(f"{context}: {format_errors(self.errors)}", details=self.errors)

    @property
    def codes(self) -> list[str]:
        return [error.code for error in self.errors]


def format_errors(errors: list) -> str:
    return "".join(
        f"err[{i}]: {error.message}, code: {error.code};" for i, error in enumerate(errors)
    )
