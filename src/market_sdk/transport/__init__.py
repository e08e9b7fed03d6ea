"""
HTTP backends for Market SDK.

Every backend implements BaseTransport and hands back a fully read
UnifiedResponse, so the client never sees library-specific response objects.

- httpx: default, always installed
- aiohttp: install the ``aiohttp`` extra
- requests: install the ``requests`` extra; runs in a worker thread
"""

import importlib

from .base import BaseTransport
from .base import UnifiedResponse
from .httpx import HttpxTransport

# name -> (module, class, pip extra)
_BACKENDS = {
    "httpx": (".httpx", "HttpxTransport", None),
    "aiohttp": (".aiohttp", "AiohttpTransport", "aiohttp"),
    "requests": (".requests", "RequestsTransport", "requests"),
}


def get_transport(name: str, timeout: float = 10.0) -> BaseTransport:
    """
    Build the transport registered under ``name`` (case-insensitive).

    Optional backends are imported on demand; a missing library raises
    ImportError naming the extra to install.
    """
    key = name.lower()
    try:
        module_name, class_name, extra = _BACKENDS[key]
    except KeyError:
        raise ValueError(
            f"Unknown transport: {name}. Available: {', '.join(_BACKENDS)}"
        ) from None

    try:
        module = importlib.import_module(module_name, __name__)
    except ImportError as err:
        raise ImportError(
            f"{key} transport requires the {extra} package. "
            f"Install with: pip install 'market-sdk[{extra}]'"
        ) from err
    return getattr(module, class_name)(timeout)


__all__ = ["BaseTransport", "UnifiedResponse", "HttpxTransport", "get_transport"]
