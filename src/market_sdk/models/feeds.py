from pydantic import Field

from .base import MarketModel
from .common import CommonResponse
from .common import Status


class Download(MarketModel):
    status: Status = Status.NA


class Content(MarketModel):
    """Offer processing status of a feed."""

    status: Status = Status.NA
    total_offers_count: int = 0
    rejected_offers_count: int = 0


class PublicationTime(MarketModel):
    file_time: str = ""
    published_time: str = ""


class Publication(MarketModel):
    full: PublicationTime = Field(default_factory=PublicationTime)
    price_and_stock_update: PublicationTime = Field(default_factory=PublicationTime)
    status: Status = Status.NA


class Feed(MarketModel):
    """A price list registered for a campaign. Read-only on the client side."""

    id: int
    url: str = ""
    download: Download = Field(default_factory=Download)
    content: Content = Field(default_factory=Content)
    publication: Publication = Field(default_factory=Publication)
    placement: Download = Field(default_factory=Download)


class FeedsResponse(CommonResponse):
    feeds: list[Feed] = Field(default_factory=list)
