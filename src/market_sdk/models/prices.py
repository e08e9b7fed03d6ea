from typing import Optional

from pydantic import Field

from .base import MarketModel
from .common import CommonResponse
from .common import Currency

MAX_PRICE_OFFERS_PER_CALL = 2000


class FeedRef(MarketModel):
    id: int


class Price(MarketModel):
    currency_id: Currency = Currency.RUR
    value: float
    discount_base: Optional[float] = None


class Offer(MarketModel):
    """Price override for one offer. Set ``delete`` to drop the override."""

    feed: FeedRef
    id: str
    delete: bool = False
    price: Optional[Price] = None


class SetPricesRequest(MarketModel):
    offers: list[Offer]


class PricedOffer(MarketModel):
    feed: FeedRef
    id: str
    price: Price
    updated_at: str = ""


class PricesResult(MarketModel):
    offers: list[PricedOffer] = Field(default_factory=list)
    total: int = 0


class PricesResponse(CommonResponse):
    result: PricesResult = Field(default_factory=PricesResult)
