"""
Request building and execution shared by every client operation.

``build_request`` turns a verb, a relative API path, query arguments and an
optional body into a fully qualified ``APIRequest``. ``execute_request`` sends
it through the configured transport and decodes the JSON body into a pydantic
model. Neither looks at HTTP status codes: the marketplace reports failures in
the ``status``/``errors`` envelope, which the client checks afterwards.
"""

import asyncio
import json
import time
from dataclasses import dataclass
from dataclasses import field
from typing import Any, Sequence, TypeVar
from urllib.parse import urlencode
from urllib.parse import urlsplit

from pydantic import BaseModel
from pydantic import ValidationError

from market_sdk.config import ClientOptions
from market_sdk.exceptions import DecodeError
from market_sdk.exceptions import RequestBuildError
from market_sdk.exceptions import TransportError

ResponseT = TypeVar("ResponseT", bound=BaseModel)

JSON_SUFFIX = ".json"


@dataclass(frozen=True)
class APIRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes | None = None


def authorization_header(oauth_token: str, oauth_client_id: str) -> str:
    return f"OAuth oauth_token={oauth_token}, oauth_client_id={oauth_client_id}"


def join_url(endpoint: str, path: str) -> str:
    """
    Join the API endpoint and a relative path.

    Exactly one slash separates them and the result ends with a single
    ``.json`` suffix, whatever slashes either side carries.
    """
    url = f"{endpoint.rstrip('/')}/{path.strip('/')}"
    if not url.endswith(JSON_SUFFIX):
        url += JSON_SUFFIX
    return url


def encode_body(payload: Any) -> bytes:
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def build_request(
    options: ClientOptions,
    method: str,
    path: str,
    query: Sequence[tuple[str, str]] | str | None = None,
    content: bytes | None = None,
) -> APIRequest:
    """
    Build a request against ``options.api_endpoint``.

    Args:
        options: Client configuration with endpoint, credentials and user agent
        method: HTTP method, e.g. 'GET'
        path: Path relative to the endpoint, with or without leading slash
        query: Query arguments as (key, value) pairs, or an already encoded string
        content: Raw JSON body

    Raises:
        RequestBuildError: If the endpoint is not an absolute http(s) URL
    """
    parts = urlsplit(options.api_endpoint)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise RequestBuildError(
            f"url parse request uri: invalid API endpoint {options.api_endpoint!r}"
        )

    url = join_url(options.api_endpoint, path)
    if isinstance(query, str):
        query_string = query
    else:
        query_string = urlencode(list(query or []))
    if query_string:
        url = f"{url}?{query_string}"

    headers = {
        "authorization": authorization_header(
            options.oauth_token, options.oauth_client_id
        ),
        "user-agent": options.user_agent,
        "accept": "*/*",
    }
    if content is not None:
        headers["content-type"] = "application/json"

    return APIRequest(method=method.upper(), url=url, headers=headers, content=content)


async def execute_request(
    options: ClientOptions,
    request: APIRequest,
    response_model: type[ResponseT],
    middlewares: Sequence = (),
) -> ResponseT:
    """
    Send ``request`` and decode the body into ``response_model``.

    Raises:
        TransportError: The transport failed to deliver the request
        DecodeError: The body is not JSON or does not fit ``response_model``
    """
    for mw in middlewares:
        await mw.on_request(request)

    options.logger.debug("request: %s %s", request.method, request.url)
    started = time.monotonic()
    try:
        response = await options.transport.request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            content=request.content,
        )
    except TransportError:
        options.logger.error("request %s %s failed", request.method, request.url)
        raise
    except (OSError, asyncio.TimeoutError) as err:
        options.logger.error("request %s %s failed", request.method, request.url)
        raise TransportError(f"execute request: {err!r}") from err
    elapsed = time.monotonic() - started

    for mw in middlewares:
        await mw.on_response(request, response, elapsed)

    options.logger.debug(
        "response: %s %s -> %s in %.3fs",
        request.method,
        request.url,
        response.status_code,
        elapsed,
    )

    try:
        return response_model.model_validate_json(response.content)
    except ValidationError as err:
        options.logger.error(
            "failed to decode response of %s %s (status %s)",
            request.method,
            request.url,
            response.status_code,
        )
        raise DecodeError(f"unmarshal json: {err}", details=response.text) from err
