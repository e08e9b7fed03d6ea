from pydantic import Field

from .base import MarketModel
from .common import CommonResponse
from .common import Paging

MAX_HIDDEN_OFFERS_PER_CALL = 500


class HiddenOffer(MarketModel):
    feed_id: int
    offer_id: str
    comment: str = ""
    ttl_in_hours: int = 0


class OfferToUnhide(MarketModel):
    feed_id: int
    offer_id: str


class HideOffersRequest(MarketModel):
    hidden_offers: list[HiddenOffer]


class UnhideOffersRequest(MarketModel):
    hidden_offers: list[OfferToUnhide]


class HiddenOffersResult(MarketModel):
    hidden_offers: list[HiddenOffer] = Field(default_factory=list)
    total: int = 0
    paging: Paging = Field(default_factory=Paging)


class HiddenOffersResponse(CommonResponse):
    result: HiddenOffersResult = Field(default_factory=HiddenOffersResult)
