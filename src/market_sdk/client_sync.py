"""
Synchronous wrapper for YandexMarketClient.

This module provides a synchronous interface on top of the async YandexMarketClient
to support users who need sync operations.
"""

import asyncio
from typing import Any

from .client import YandexMarketClient
from .config import ClientOptions
from .middleware import Middleware
from .models import CreateOutletResult
from .models import ExploreOffersResponse
from .models import ExploreOptions
from .models import Feed
from .models import HiddenOffer
from .models import HiddenOffersOptions
from .models import HiddenOffersResult
from .models import Offer
from .models import OfferPricesOptions
from .models import OfferToUnhide
from .models import PointOfSale
from .models import PointsOfSaleOptions
from .models import PricedOffer
from .models import Region


class YandexMarketClientSync:
    """
    Synchronous wrapper for YandexMarketClient.

    Calls run on an event loop owned by the wrapper, so the transport's
    connection pool is reused between calls. Do not use it from inside a
    running event loop; use the async client there.

    Example:
        with YandexMarketClientSync(options) as client:
            feeds = client.list_feeds(campaign_id)
            client.refresh_feed(campaign_id, feeds[0].id)
    """

    def __init__(
        self,
        options: ClientOptions | None = None,
        middlewares: list[Middleware] | None = None,
        **overrides: Any,
    ):
        """
        Initialize the synchronous client.

        Args:
            options: Client configuration
            middlewares: Optional request/response hooks
            **overrides: Field overrides applied on top of ``options``
        """
        self._async_client = YandexMarketClient(options, middlewares, **overrides)
        self._loop = asyncio.new_event_loop()

    @property
    def options(self) -> ClientOptions:
        return self._async_client.options

    def _run(self, coro):
        return self._loop.run_until_complete(coro)

    def list_feeds(self, campaign_id: int) -> list[Feed]:
        return self._run(self._async_client.list_feeds(campaign_id))

    def refresh_feed(self, campaign_id: int, feed_id: int) -> None:
        return self._run(self._async_client.refresh_feed(campaign_id, feed_id))

    def set_offer_prices(self, campaign_id: int, offers: list[Offer]) -> None:
        return self._run(self._async_client.set_offer_prices(campaign_id, offers))

    def get_offer_prices(
        self, campaign_id: int, options: OfferPricesOptions | None = None
    ) -> list[PricedOffer]:
        return self._run(self._async_client.get_offer_prices(campaign_id, options))

    def delete_all_offer_prices(self, campaign_id: int) -> None:
        return self._run(self._async_client.delete_all_offer_prices(campaign_id))

    def hide_offers(self, campaign_id: int, offers: list[HiddenOffer]) -> None:
        return self._run(self._async_client.hide_offers(campaign_id, offers))

    def get_hidden_offers(
        self, campaign_id: int, options: HiddenOffersOptions | None = None
    ) -> HiddenOffersResult:
        return self._run(self._async_client.get_hidden_offers(campaign_id, options))

    def unhide_offers(self, campaign_id: int, offers: list[OfferToUnhide]) -> None:
        return self._run(self._async_client.unhide_offers(campaign_id, offers))

    def explore_offers(
        self, campaign_id: int, options: ExploreOptions | None = None
    ) -> ExploreOffersResponse:
        return self._run(self._async_client.explore_offers(campaign_id, options))

    def find_regions(self, name: str) -> list[Region]:
        return self._run(self._async_client.find_regions(name))

    def create_point_of_sale(
        self, campaign_id: int, outlet: PointOfSale
    ) -> CreateOutletResult:
        return self._run(self._async_client.create_point_of_sale(campaign_id, outlet))

    def update_point_of_sale(
        self, campaign_id: int, outlet_id: int, outlet: PointOfSale
    ) -> None:
        return self._run(
            self._async_client.update_point_of_sale(campaign_id, outlet_id, outlet)
        )

    def get_point_of_sale(self, campaign_id: int, outlet_id: int) -> PointOfSale:
        return self._run(self._async_client.get_point_of_sale(campaign_id, outlet_id))

    def delete_point_of_sale(self, campaign_id: int, outlet_id: int) -> None:
        return self._run(
            self._async_client.delete_point_of_sale(campaign_id, outlet_id)
        )

    def list_points_of_sale(
        self, campaign_id: int, options: PointsOfSaleOptions | None = None
    ) -> list[PointOfSale]:
        return self._run(
            self._async_client.list_points_of_sale(campaign_id, options)
        )

    def close(self):
        """
        Synchronous cleanup of client resources.
        """
        if self._loop.is_closed():
            return
        try:
            self._run(self._async_client.aclose())
        finally:
            self._loop.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
