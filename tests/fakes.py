"""
Test utilities and mock objects for Market SDK.

This module provides mock transport implementations for testing the SDK
without making real HTTP requests:

- MockTransport records every request and answers through a handler
- FakeMarketplace keeps prices, hidden offers and outlets in memory and
  answers like the partner API does, for end-to-end scenarios
"""

import json
import re
from urllib.parse import parse_qs
from urllib.parse import urlsplit

from market_sdk.transport.base import BaseTransport
from market_sdk.transport.base import UnifiedResponse


def json_response(data, status_code: int = 200) -> UnifiedResponse:
    return UnifiedResponse(status_code, json.dumps(data).encode("utf-8"))


def ok(**payload) -> dict:
    return {"status": "OK", **payload}


def error(*entries: tuple[str, str]) -> dict:
    return {
        "status": "ERROR",
        "errors": [{"code": code, "message": message} for code, message in entries],
    }


class MockTransport(BaseTransport):
    """Mock transport for testing."""

    def __init__(self, handler=None):
        """
        Initialize mock transport.

        Args:
            handler: Optional callable taking the recorded call dict and returning
                     a UnifiedResponse, a dict (sent as JSON) or raising.
                     If not provided, answers ``{"status": "OK"}``.
        """
        self.handler = handler
        self.request_calls = []
        self.closed = False

    @property
    def request_count(self):
        """Number of requests made to this transport."""
        return len(self.request_calls)

    @property
    def last_call(self) -> dict:
        return self.request_calls[-1]

    async def request(
        self,
        method: str,
        url: str,
        headers: dict | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        call = {
            "method": method,
            "url": url,
            "headers": headers or {},
            "content": content,
            "json": json.loads(content) if content else None,
        }
        self.request_calls.append(call)

        if self.handler is None:
            return json_response(ok())
        result = self.handler(call)
        if isinstance(result, UnifiedResponse):
            return result
        return json_response(result)

    async def close(self):
        """Mock close method."""
        self.closed = True


class FakeMarketplace(BaseTransport):
    """In-memory stand-in for the partner API, one state per campaign."""

    _CAMPAIGN = r"^/v2/campaigns/(?P<campaign>\d+)"

    def __init__(self):
        self.prices = {}
        self.hidden = {}
        self.outlets = {}
        self._next_outlet_id = 1000
        self.closed = False
        self._routes = [
            ("POST", self._CAMPAIGN + r"/offer-prices/updates\.json$", self._set_prices),
            ("GET", self._CAMPAIGN + r"/offer-prices\.json$", self._get_prices),
            ("POST", self._CAMPAIGN + r"/offer-prices/removals\.json$", self._remove_prices),
            ("POST", self._CAMPAIGN + r"/hidden-offers\.json$", self._hide),
            ("GET", self._CAMPAIGN + r"/hidden-offers\.json$", self._get_hidden),
            ("DELETE", self._CAMPAIGN + r"/hidden-offers\.json$", self._unhide),
            ("POST", self._CAMPAIGN + r"/outlets\.json$", self._create_outlet),
            ("GET", self._CAMPAIGN + r"/outlets\.json$", self._list_outlets),
            ("GET", self._CAMPAIGN + r"/outlets/(?P<outlet>\d+)\.json$", self._get_outlet),
            ("PUT", self._CAMPAIGN + r"/outlets/(?P<outlet>\d+)\.json$", self._update_outlet),
            ("DELETE", self._CAMPAIGN + r"/outlets/(?P<outlet>\d+)\.json$", self._delete_outlet),
        ]

    async def request(
        self,
        method: str,
        url: str,
        headers: dict | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        parts = urlsplit(url)
        query = parse_qs(parts.query)
        body = json.loads(content) if content else None
        for route_method, pattern, handler in self._routes:
            match = re.match(pattern, parts.path)
            if route_method == method and match:
                params = match.groupdict()
                campaign = int(params.pop("campaign"))
                return json_response(handler(campaign, query, body, **params))
        return json_response(error(("NOT_FOUND", f"{method} {parts.path}")), 404)

    async def close(self):
        self.closed = True

    # --- prices ---

    def _set_prices(self, campaign, query, body):
        prices = self.prices.setdefault(campaign, {})
        for offer in body["offers"]:
            key = (offer["feed"]["id"], offer["id"])
            if offer.get("delete"):
                prices.pop(key, None)
            else:
                prices[key] = {
                    "feed": offer["feed"],
                    "id": offer["id"],
                    "price": offer["price"],
                    "updatedAt": "2026-10-18T12:00:00+03:00",
                }
        return ok()

    def _get_prices(self, campaign, query, body):
        offers = list(self.prices.get(campaign, {}).values())
        return ok(result={"offers": offers, "total": len(offers)})

    def _remove_prices(self, campaign, query, body):
        if body != {"removeAll": True}:
            return error(("BAD_REQUEST", "removeAll expected"))
        self.prices.pop(campaign, None)
        return ok()

    # --- hidden offers ---

    def _hide(self, campaign, query, body):
        hidden = self.hidden.setdefault(campaign, {})
        for offer in body["hiddenOffers"]:
            hidden[(offer["feedId"], offer["offerId"])] = offer
        return ok()

    def _get_hidden(self, campaign, query, body):
        offers = list(self.hidden.get(campaign, {}).values())
        return ok(
            result={
                "hiddenOffers": offers,
                "total": len(offers),
                "paging": {"nextPageToken": ""},
            }
        )

    def _unhide(self, campaign, query, body):
        hidden = self.hidden.get(campaign, {})
        for offer in body["hiddenOffers"]:
            hidden.pop((offer["feedId"], offer["offerId"]), None)
        return ok()

    # --- outlets ---

    def _create_outlet(self, campaign, query, body):
        if "id" in body:
            return error(("BAD_REQUEST", "id is assigned by the marketplace"))
        self._next_outlet_id += 1
        outlet_id = self._next_outlet_id
        self.outlets.setdefault(campaign, {})[outlet_id] = {**body, "id": outlet_id}
        return ok(result={"id": outlet_id})

    def _list_outlets(self, campaign, query, body):
        outlets = list(self.outlets.get(campaign, {}).values())
        return ok(outlets=outlets, pager={"total": len(outlets)})

    def _get_outlet(self, campaign, query, body, outlet):
        found = self.outlets.get(campaign, {}).get(int(outlet))
        if found is None:
            return error(("NOT_FOUND", f"outlet {outlet} not found"))
        return ok(**found)

    def _update_outlet(self, campaign, query, body, outlet):
        outlets = self.outlets.get(campaign, {})
        if int(outlet) not in outlets:
            return error(("NOT_FOUND", f"outlet {outlet} not found"))
        outlets[int(outlet)] = {**body, "id": int(outlet)}
        return ok()

    def _delete_outlet(self, campaign, query, body, outlet):
        if self.outlets.get(campaign, {}).pop(int(outlet), None) is None:
            return error(("NOT_FOUND", f"outlet {outlet} not found"))
        return ok()
