"""
Configuration management for Market SDK.

Two layers live here:

- ``ClientOptions``: the frozen, in-process configuration every client call reads
  (credentials, endpoint, user agent, transport and logger).
- ``MarketAPISettings``: loads the same values from environment variables and
  ``.env`` files, for scripts and the CLI.

Environment variables are automatically loaded with MARKET_API_ prefix.
Example: MARKET_API_OAUTH_TOKEN=your_token
"""

import logging

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from market_sdk.transport import get_transport
from market_sdk.transport.base import BaseTransport
from market_sdk.transport.httpx import HttpxTransport

DEFAULT_API_ENDPOINT = "https://api.partner.market.yandex.ru/"
DEFAULT_USER_AGENT = "market-sdk/1.0.0 python client"
DEFAULT_TIMEOUT = 20.0


def _discard_logger() -> logging.Logger:
    """Logger that drops every record, whatever handlers get attached to it."""
    logger = logging.getLogger("market_sdk.discard")
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    logger.disabled = True
    return logger


class ClientOptions(BaseModel):
    """
    Immutable client configuration shared by all operation calls.

    Nothing is validated against the remote platform here: bad credentials
    only surface when a call is rejected.

    Example:
        options = ClientOptions(oauth_token="token", oauth_client_id="client-id")
        staging = options.with_overrides(api_endpoint="https://staging.example/")
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    oauth_token: str = ""
    oauth_client_id: str = ""
    api_endpoint: str = DEFAULT_API_ENDPOINT
    user_agent: str = DEFAULT_USER_AGENT
    transport: BaseTransport = Field(
        default_factory=lambda: HttpxTransport(DEFAULT_TIMEOUT)
    )
    logger: logging.Logger | logging.LoggerAdapter = Field(default_factory=_discard_logger)

    def with_overrides(self, **fields) -> "ClientOptions":
        """Return a copy with ``fields`` replaced, applied in the given order."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(fields)
        return type(self)(**data)


class MarketAPISettings(BaseSettings):
    """
    Configuration settings for Market SDK with environment variable support.

    This class automatically loads configuration from:
    - Environment variables (with MARKET_API_ prefix)
    - .env files
    - Default values for optional settings

    Example:
        # From environment
        export MARKET_API_OAUTH_TOKEN=your_token
        export MARKET_API_OAUTH_CLIENT_ID=your_client_id

        # In code
        options = MarketAPISettings().to_client_options()
    """

    oauth_token: str = Field("", description="OAuth token issued for the application")
    oauth_client_id: str = Field("", description="OAuth application client ID")
    api_endpoint: str = DEFAULT_API_ENDPOINT
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    transport: str = "httpx"  # default, can be 'aiohttp' or 'requests'

    model_config = SettingsConfigDict(
        env_prefix="MARKET_API_", env_file=".env", extra="ignore"
    )

    def to_client_options(
        self, logger: logging.Logger | logging.LoggerAdapter | None = None
    ) -> ClientOptions:
        fields = dict(
            oauth_token=self.oauth_token,
            oauth_client_id=self.oauth_client_id,
            api_endpoint=self.api_endpoint,
            user_agent=self.user_agent,
            transport=get_transport(self.transport, timeout=self.timeout),
        )
        if logger is not None:
            fields["logger"] = logger
        return ClientOptions(**fields)
