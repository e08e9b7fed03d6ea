"""
Async-first Market API SDK Client.

This module provides the main YandexMarketClient class that handles all interactions
with the marketplace partner API:

- Feeds: list campaign feeds, trigger a feed refresh
- Prices: set, read and remove price overrides for offers
- Visibility: hide offers, list hidden offers, unhide offers
- Catalogue: explore offers as the marketplace sees them, find regions
- Points of sale: create, update, read, delete and list outlets

Every call builds a request (see ``market_sdk.request``), sends it through the
configured transport, decodes the JSON envelope and raises
``MarketResponseError`` when the envelope status is ``ERROR``. Nothing is retried
or cached.

Example usage:
    from market_sdk import ClientOptions, YandexMarketClient

    options = ClientOptions(oauth_token="token", oauth_client_id="client-id")

    async with YandexMarketClient(options) as client:
        feeds = await client.list_feeds(campaign_id)
"""

from typing import Any, Sequence

from pydantic import ValidationError

from market_sdk.config import ClientOptions
from market_sdk.exceptions import DecodeError
from market_sdk.exceptions import MarketResponseError
from market_sdk.middleware import Middleware
from market_sdk.models import MAX_HIDDEN_OFFERS_PER_CALL
from market_sdk.models import MAX_PRICE_OFFERS_PER_CALL
from market_sdk.models import CommonResponse
from market_sdk.models import CreateOutletResponse
from market_sdk.models import CreateOutletResult
from market_sdk.models import ExploreOffersResponse
from market_sdk.models import ExploreOptions
from market_sdk.models import Feed
from market_sdk.models import FeedsResponse
from market_sdk.models import HiddenOffer
from market_sdk.models import HiddenOffersOptions
from market_sdk.models import HiddenOffersResponse
from market_sdk.models import HiddenOffersResult
from market_sdk.models import HideOffersRequest
from market_sdk.models import Offer
from market_sdk.models import OfferPricesOptions
from market_sdk.models import OfferToUnhide
from market_sdk.models import PointOfSale
from market_sdk.models import PointOfSaleResponse
from market_sdk.models import PointsOfSaleOptions
from market_sdk.models import PointsOfSaleResponse
from market_sdk.models import PricedOffer
from market_sdk.models import PricesResponse
from market_sdk.models import Region
from market_sdk.models import RegionsResponse
from market_sdk.models import SetPricesRequest
from market_sdk.models import UnhideOffersRequest
from market_sdk.request import build_request
from market_sdk.request import encode_body
from market_sdk.request import execute_request


class YandexMarketClient:
    """
    Async client for the marketplace partner API.

    Args:
        options (ClientOptions | None): Client configuration. Defaults to
                                        ``ClientOptions()`` (production endpoint,
                                        httpx transport, silent logger).
        middlewares (list[Middleware] | None): Optional request/response hooks
        **overrides: Field overrides applied on top of ``options`` in the given order,
                     e.g. ``oauth_token=...``, ``api_endpoint=...``, ``transport=...``

    Example:
        from market_sdk import YandexMarketClient
        from market_sdk.logging_middleware import LoggingMiddleware

        client = YandexMarketClient(
            oauth_token="token",
            oauth_client_id="client-id",
            middlewares=[LoggingMiddleware()],
        )
        try:
            regions = await client.find_regions("Казань")
        finally:
            await client.aclose()
    """

    def __init__(
        self,
        options: ClientOptions | None = None,
        middlewares: list[Middleware] | None = None,
        **overrides: Any,
    ):
        if options is None:
            options = ClientOptions(**overrides)
        elif overrides:
            options = options.with_overrides(**overrides)
        self.options = options
        self.middlewares = list(middlewares or [])

    async def _call(
        self,
        method: str,
        path: str,
        response_model: type[CommonResponse],
        action: str,
        query: Sequence[tuple[str, str]] | None = None,
        payload: Any = None,
    ):
        content = encode_body(payload) if payload is not None else None
        request = build_request(self.options, method, path, query, content)
        response = await execute_request(
            self.options, request, response_model, self.middlewares
        )
        if response.is_error:
            self.options.logger.warning(
                "failed to %s: %d error(s) returned", action, len(response.errors)
            )
            raise MarketResponseError(f"failed to {action}", response.errors)
        return response

    # --- Feeds ---

    async def list_feeds(self, campaign_id: int) -> list[Feed]:
        """
        Return the feeds placed for the campaign.

        Raises:
            MarketAPIError: Any build, transport, decode or envelope error
        """
        response = await self._call(
            "GET", f"/v2/campaigns/{campaign_id}/feeds", FeedsResponse, "list feeds"
        )
        return response.feeds

    async def refresh_feed(self, campaign_id: int, feed_id: int) -> None:
        """Tell the marketplace that the feed changed; it then starts re-reading it."""
        await self._call(
            "POST",
            f"/campaigns/{campaign_id}/feeds/{feed_id}/refresh",
            CommonResponse,
            "refresh feed",
        )

    # --- Prices ---

    async def set_offer_prices(self, campaign_id: int, offers: list[Offer]) -> None:
        """
        Override feed prices for the given offers.

        At most 2000 offers can be set or deleted per call; how a partially
        rejected batch is applied is up to the marketplace.

        Raises:
            ValueError: If more than 2000 offers are passed
            MarketAPIError: Any build, transport, decode or envelope error
        """
        if len(offers) > MAX_PRICE_OFFERS_PER_CALL:
            raise ValueError(
                f"at most {MAX_PRICE_OFFERS_PER_CALL} offers per call, got {len(offers)}"
            )
        await self._call(
            "POST",
            f"/v2/campaigns/{campaign_id}/offer-prices/updates",
            CommonResponse,
            "set prices",
            payload=SetPricesRequest(offers=offers).to_dict(),
        )

    async def get_offer_prices(
        self, campaign_id: int, options: OfferPricesOptions | None = None
    ) -> list[PricedOffer]:
        """Return offers whose prices were set through the API."""
        options = options or OfferPricesOptions()
        response = await self._call(
            "GET",
            f"/v2/campaigns/{campaign_id}/offer-prices",
            PricesResponse,
            "get prices",
            query=options.to_query_args(),
        )
        return response.result.offers

    async def delete_all_offer_prices(self, campaign_id: int) -> None:
        """Remove every price set through the API; feed prices apply again."""
        await self._call(
            "POST",
            f"/v2/campaigns/{campaign_id}/offer-prices/removals",
            CommonResponse,
            "delete prices",
            payload={"removeAll": True},
        )

    # --- Hidden offers ---

    async def hide_offers(self, campaign_id: int, offers: list[HiddenOffer]) -> None:
        """
        Hide offers from the storefront. Up to 500 offers per call.

        Raises:
            ValueError: If more than 500 offers are passed
            MarketAPIError: Any build, transport, decode or envelope error
        """
        if len(offers) > MAX_HIDDEN_OFFERS_PER_CALL:
            raise ValueError(
                f"at most {MAX_HIDDEN_OFFERS_PER_CALL} offers per call, got {len(offers)}"
            )
        await self._call(
            "POST",
            f"/v2/campaigns/{campaign_id}/hidden-offers",
            CommonResponse,
            "hide offers",
            payload=HideOffersRequest(hidden_offers=offers).to_dict(),
        )

    async def get_hidden_offers(
        self, campaign_id: int, options: HiddenOffersOptions | None = None
    ) -> HiddenOffersResult:
        options = options or HiddenOffersOptions()
        response = await self._call(
            "GET",
            f"/v2/campaigns/{campaign_id}/hidden-offers",
            HiddenOffersResponse,
            "get hidden offers",
            query=options.to_query_args(),
        )
        return response.result

    async def unhide_offers(self, campaign_id: int, offers: list[OfferToUnhide]) -> None:
        await self._call(
            "DELETE",
            f"/v2/campaigns/{campaign_id}/hidden-offers",
            CommonResponse,
            "unhide offers",
            payload=UnhideOffersRequest(hidden_offers=offers).to_dict(),
        )

    # --- Catalogue ---

    async def explore_offers(
        self, campaign_id: int, options: ExploreOptions | None = None
    ) -> ExploreOffersResponse:
        """Return campaign offers matching ``options`` together with the pager."""
        options = options or ExploreOptions()
        return await self._call(
            "GET",
            f"/v2/campaigns/{campaign_id}/offers",
            ExploreOffersResponse,
            "explore offers",
            query=options.to_query_args(),
        )

    async def find_regions(self, name: str) -> list[Region]:
        """
        Find regions by name.

        When several regions match, up to ten are returned, each with its chain
        of parent regions so the right one can be told apart.
        """
        response = await self._call(
            "GET", "/v2/regions", RegionsResponse, "find region", query=[("name", name)]
        )
        return response.regions

    # --- Points of sale ---

    async def create_point_of_sale(
        self, campaign_id: int, outlet: PointOfSale
    ) -> CreateOutletResult:
        """Create an outlet and return the ID the marketplace assigned to it."""
        response = await self._call(
            "POST",
            f"/v2/campaigns/{campaign_id}/outlets",
            CreateOutletResponse,
            "create point of sale",
            payload=outlet.to_request_body(),
        )
        if response.result is None:
            raise DecodeError(
                "unmarshal json: create point of sale response has no result"
            )
        return response.result

    async def update_point_of_sale(
        self, campaign_id: int, outlet_id: int, outlet: PointOfSale
    ) -> None:
        """Replace every field of the outlet with ``outlet``."""
        await self._call(
            "PUT",
            f"/v2/campaigns/{campaign_id}/outlets/{outlet_id}",
            CommonResponse,
            "update point of sale",
            payload=outlet.to_request_body(),
        )

    async def get_point_of_sale(self, campaign_id: int, outlet_id: int) -> PointOfSale:
        response = await self._call(
            "GET",
            f"/v2/campaigns/{campaign_id}/outlets/{outlet_id}",
            PointOfSaleResponse,
            "get point of sale",
        )
        try:
            return response.point_of_sale()
        except ValidationError as err:
            raise DecodeError(
                f"unmarshal json: {err}", details=response.model_extra
            ) from err

    async def delete_point_of_sale(self, campaign_id: int, outlet_id: int) -> None:
        await self._call(
            "DELETE",
            f"/v2/campaigns/{campaign_id}/outlets/{outlet_id}",
            CommonResponse,
            "delete point of sale",
        )

    async def list_points_of_sale(
        self, campaign_id: int, options: PointsOfSaleOptions | None = None
    ) -> list[PointOfSale]:
        options = options or PointsOfSaleOptions()
        response = await self._call(
            "GET",
            f"/v2/campaigns/{campaign_id}/outlets",
            PointsOfSaleResponse,
            "get points of sale",
            query=options.to_query_args(),
        )
        return response.outlets

    async def aclose(self):
        """
        Close the transport and release its connection pool.

        Example:
            async with YandexMarketClient(options) as client:
                feeds = await client.list_feeds(campaign_id)
        """
        await self.options.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

