"""
Optional query parameters of the paged and filterable operations.

Each options object is immutable: ``with_*`` methods return an updated copy, so
setters can be chained and a later call for the same field wins::

    options = HiddenOffersOptions().with_page(1, 50).with_feed_id(820450)
    await client.get_hidden_offers(campaign_id, options)

When several pagination strategies are set at once, ``to_query_args`` picks one:
a continuation token beats page number/size, which beats limit/offset.
"""

from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict

from .common import Currency

QueryArgs = list[tuple[str, str]]


class QueryOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    def _replace(self, **fields):
        return self.model_copy(update=fields)

    def to_query_args(self) -> QueryArgs:
        raise NotImplementedError


class OfferPricesOptions(QueryOptions):
    """Pagination of ``get_offer_prices``."""

    limit: int = 0
    offset: int = 0
    page_number: int = 0
    page_size: int = 0

    def with_limit_and_offset(self, limit: int, offset: int) -> "OfferPricesOptions":
        return self._replace(limit=limit, offset=offset)

    def with_page(self, number: int, size: int) -> "OfferPricesOptions":
        return self._replace(page_number=number, page_size=size)

    def to_query_args(self) -> QueryArgs:
        if self.page_number and self.page_size:
            return [("page", str(self.page_number)), ("pageSize", str(self.page_size))]
        query = []
        if self.limit:
            query.append(("limit", str(self.limit)))
        if self.offset:
            query.append(("offset", str(self.offset)))
        return query


class HiddenOffersOptions(QueryOptions):
    """Pagination and filters of ``get_hidden_offers``."""

    limit: int = 0
    offset: int = 0
    page_number: int = 0
    page_size: int = 0
    page_token: str = ""
    feed_id: int = 0
    offer_id: str = ""

    def with_limit(self, limit: int) -> "HiddenOffersOptions":
        return self._replace(limit=limit)

    def with_offset(self, offset: int) -> "HiddenOffersOptions":
        return self._replace(offset=offset)

    def with_page(self, number: int, size: int) -> "HiddenOffersOptions":
        return self._replace(page_number=number, page_size=size)

    def with_page_token(self, token: str) -> "HiddenOffersOptions":
        return self._replace(page_token=token)

    def with_feed_id(self, feed_id: int) -> "HiddenOffersOptions":
        return self._replace(feed_id=feed_id)

    def with_offer_id(self, offer_id: str) -> "HiddenOffersOptions":
        return self._replace(offer_id=offer_id)

    def to_query_args(self) -> QueryArgs:
        query = []
        if self.page_token:
            query.append(("page_token", self.page_token))
            # token pages are sized by limit; offset is not sent alongside a token
            if self.limit:
                query.append(("limit", str(self.limit)))
        elif self.page_number and self.page_size:
            query.append(("page_number", str(self.page_number)))
            query.append(("page_size", str(self.page_size)))
        else:
            if self.limit:
                query.append(("limit", str(self.limit)))
            if self.offset:
                query.append(("offset", str(self.offset)))

        if self.feed_id > 0:
            query.append(("feed_id", str(self.feed_id)))
        if self.offer_id:
            query.append(("offer_id", self.offer_id))
        return query


class ExploreOptions(QueryOptions):
    """Filters and pagination of ``explore_offers``."""

    currency: Optional[Currency] = None
    feed_id: int = 0
    matched: Optional[bool] = None
    query: str = ""
    shop_category_id: str = ""
    page_number: int = 0
    page_size: int = 0

    def with_currency(self, currency: Currency) -> "ExploreOptions":
        return self._replace(currency=Currency(currency))

    def with_feed_id(self, feed_id: int) -> "ExploreOptions":
        return self._replace(feed_id=feed_id)

    def with_matched(self, matched: bool) -> "ExploreOptions":
        return self._replace(matched=matched)

    def with_query(self, query: str) -> "ExploreOptions":
        return self._replace(query=query)

    def with_shop_category_id(self, shop_category_id: str) -> "ExploreOptions":
        return self._replace(shop_category_id=shop_category_id)

    def with_page(self, number: int, size: int) -> "ExploreOptions":
        return self._replace(page_number=number, page_size=size)

    def to_query_args(self) -> QueryArgs:
        query = []
        if self.currency:
            query.append(("currency", self.currency.value))
        if self.shop_category_id:
            query.append(("shopCategoryId", self.shop_category_id))
        if self.query:
            query.append(("query", self.query))
        if self.page_number > 0:
            query.append(("page", str(self.page_number)))
        if self.page_size > 0:
            query.append(("pageSize", str(self.page_size)))
        if self.feed_id > 0:
            query.append(("feedId", str(self.feed_id)))
        if self.matched is not None:
            query.append(("matched", "true" if self.matched else "false"))
        return query


class PointsOfSaleOptions(QueryOptions):
    """Pagination and filters of ``list_points_of_sale``."""

    page_number: int = 0
    page_size: int = 0
    limit: int = 0
    page_token: str = ""
    region_id: int = 0
    shop_outlet_code: str = ""

    def with_page(self, number: int, size: int) -> "PointsOfSaleOptions":
        return self._replace(page_number=number, page_size=size)

    def with_page_token(self, token: str, limit: int = 0) -> "PointsOfSaleOptions":
        return self._replace(page_token=token, limit=limit)

    def with_region_id(self, region_id: int) -> "PointsOfSaleOptions":
        return self._replace(region_id=region_id)

    def with_shop_outlet_code(self, code: str) -> "PointsOfSaleOptions":
        return self._replace(shop_outlet_code=code)

    def to_query_args(self) -> QueryArgs:
        query = []
        if self.page_token:
            query.append(("page_token", self.page_token))
            if self.limit:
                query.append(("limit", str(self.limit)))
        elif self.page_number > 0 and self.page_size > 0:
            query.append(("page", str(self.page_number)))
            query.append(("pageSize", str(self.page_size)))

        if self.region_id > 0:
            query.append(("region_id", str(self.region_id)))
        if self.shop_outlet_code:
            query.append(("shop_outlet_code", self.shop_outlet_code))
        return query
