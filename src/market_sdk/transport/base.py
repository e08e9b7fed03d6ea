import json
from typing import Any, Mapping


class UnifiedResponse:
    """
    Unified response wrapper that handles differences between HTTP clients.

    Transports read the whole body before releasing the underlying connection,
    so a UnifiedResponse never holds an open network resource.
    """

    def __init__(
        self,
        status_code: int,
        content: bytes = b"",
        headers: Mapping[str, str] | None = None,
    ):
        self.status_code = status_code
        self.content = content
        self.headers = dict(headers or {})

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.content)


class BaseTransport:
    """
    Abstract transport layer interface for Market SDK.
    All HTTP client backends should inherit from this class.

    Supported transports:
    - httpx: Native async HTTP client
    - aiohttp: Native async HTTP client
    - requests: Sync HTTP client wrapped in async interface

    Implementations must raise ``market_sdk.exceptions.TransportError`` for
    network failures and must release the response before returning.
    """

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        """
        Async request method for all transports.
        Override this method in transport implementations.
        """
        raise NotImplementedError(
            "Transport implementations must override this method."
        )

    async def close(self) -> None:
        """Release pooled connections. Nothing to do by default."""
