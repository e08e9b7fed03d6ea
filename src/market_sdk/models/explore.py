from typing import Optional

from pydantic import ConfigDict
from pydantic import Field

from .base import MarketModel
from .common import CommonResponse
from .common import Pager


class ExploredOffer(MarketModel):
    """Offer as the marketplace sees it after matching against its catalogue."""

    model_config = ConfigDict(protected_namespaces=())

    id: str
    feed_id: int = 0
    name: str = ""
    url: str = ""
    price: float = 0.0
    pre_discount_price: Optional[float] = None
    discount: int = 0
    currency: str = ""
    bid: Optional[float] = None
    cut_price: bool = False
    market_category_id: int = 0
    model_id: int = 0
    shop_category_id: str = ""


class ExploreOffersResponse(CommonResponse):
    offers: list[ExploredOffer] = Field(default_factory=list)
    pager: Pager = Field(default_factory=Pager)
