"""Wire models and option objects of the marketplace partner API."""

from .base import MarketModel
from .base import OpenEnum
from .common import CommonError
from .common import CommonResponse
from .common import Currency
from .common import Pager
from .common import Paging
from .common import Status
from .explore import ExploredOffer
from .explore import ExploreOffersResponse
from .feeds import Content
from .feeds import Download
from .feeds import Feed
from .feeds import FeedsResponse
from .feeds import Publication
from .feeds import PublicationTime
from .hidden_offers import MAX_HIDDEN_OFFERS_PER_CALL
from .hidden_offers import HiddenOffer
from .hidden_offers import HiddenOffersResponse
from .hidden_offers import HiddenOffersResult
from .hidden_offers import HideOffersRequest
from .hidden_offers import OfferToUnhide
from .hidden_offers import UnhideOffersRequest
from .options import ExploreOptions
from .options import HiddenOffersOptions
from .options import OfferPricesOptions
from .options import PointsOfSaleOptions
from .options import QueryOptions
from .outlets import Address
from .outlets import CreateOutletResponse
from .outlets import CreateOutletResult
from .outlets import Day
from .outlets import DeliveryRule
from .outlets import OutletType
from .outlets import OutletVisibility
from .outlets import PointOfSale
from .outlets import PointOfSaleResponse
from .outlets import PointsOfSaleResponse
from .outlets import ScheduleItem
from .outlets import WorkingSchedule
from .prices import MAX_PRICE_OFFERS_PER_CALL
from .prices import FeedRef
from .prices import Offer
from .prices import Price
from .prices import PricedOffer
from .prices import PricesResponse
from .prices import PricesResult
from .prices import SetPricesRequest
from .regions import Region
from .regions import RegionsResponse
from .regions import RegionType

__all__ = [
    "MarketModel",
    "OpenEnum",
    "CommonError",
    "CommonResponse",
    "Currency",
    "Pager",
    "Paging",
    "Status",
    "ExploredOffer",
    "ExploreOffersResponse",
    "Content",
    "Download",
    "Feed",
    "FeedsResponse",
    "Publication",
    "PublicationTime",
    "MAX_HIDDEN_OFFERS_PER_CALL",
    "HiddenOffer",
    "HiddenOffersResponse",
    "HiddenOffersResult",
    "HideOffersRequest",
    "OfferToUnhide",
    "UnhideOffersRequest",
    "ExploreOptions",
    "HiddenOffersOptions",
    "OfferPricesOptions",
    "PointsOfSaleOptions",
    "QueryOptions",
    "Address",
    "CreateOutletResponse",
    "CreateOutletResult",
    "Day",
    "DeliveryRule",
    "OutletType",
    "OutletVisibility",
    "PointOfSale",
    "PointOfSaleResponse",
    "PointsOfSaleResponse",
    "ScheduleItem",
    "WorkingSchedule",
    "MAX_PRICE_OFFERS_PER_CALL",
    "FeedRef",
    "Offer",
    "Price",
    "PricedOffer",
    "PricesResponse",
    "PricesResult",
    "SetPricesRequest",
    "Region",
    "RegionsResponse",
    "RegionType",
]
