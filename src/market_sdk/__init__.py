"""
Market SDK - Async-first SDK for the Yandex.Market partner API.

This SDK provides:
- Async client for feeds, prices, hidden offers, offers, regions and outlets
- Synchronous wrapper for sync operations
- Multiple HTTP transport support
- Middleware support
"""

from .client import YandexMarketClient
from .client_sync import YandexMarketClientSync
from .config import ClientOptions
from .config import MarketAPISettings
from .exceptions import DecodeError
from .exceptions import MarketAPIError
from .exceptions import MarketResponseError
from .exceptions import RequestBuildError
from .exceptions import TransportError
from .middleware import Middleware

__version__ = "1.0.0"

__all__ = [
    "YandexMarketClient",
    "YandexMarketClientSync",
    "ClientOptions",
    "MarketAPISettings",
    "MarketAPIError",
    "RequestBuildError",
    "TransportError",
    "DecodeError",
    "MarketResponseError",
    "Middleware",
]
