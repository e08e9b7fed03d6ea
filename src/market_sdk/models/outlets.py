from typing import Optional

from pydantic import ConfigDict
from pydantic import Field

from .base import MarketModel
from .base import OpenEnum
from .common import CommonResponse
from .common import Pager
from .common import Paging


class OutletType(OpenEnum):
    DEPOT = "DEPOT"  # pickup point
    MIXED = "MIXED"  # retail space and pickup point
    RETAIL = "RETAIL"


class OutletVisibility(OpenEnum):
    HIDDEN = "HIDDEN"
    VISIBLE = "VISIBLE"


class Day(OpenEnum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class Address(MarketModel):
    region_id: int
    street: str = ""
    number: str = ""


class DeliveryRule(MarketModel):
    cost: int = 0
    min_delivery_days: int = 0
    max_delivery_days: int = 0
    delivery_service_id: Optional[int] = None
    order_before: Optional[int] = None
    price_free_pickup: Optional[int] = None


class ScheduleItem(MarketModel):
    start_day: Day
    end_day: Day
    start_time: str  # HH:MM
    end_time: str


class WorkingSchedule(MarketModel):
    work_in_holiday: bool = False
    schedule_items: list[ScheduleItem] = Field(default_factory=list)


class PointOfSale(MarketModel):
    """
    A physical or logical fulfillment location of the shop.

    ``id`` is assigned by the marketplace and is only present on outlets read
    back from the API. ``coords`` is "longitude, latitude", e.g.
    "20.4522144, 54.7104264".
    """

    id: Optional[int] = None
    name: str
    type: OutletType
    coords: Optional[str] = None
    is_main: bool = False
    shop_outlet_code: Optional[str] = None
    visibility: OutletVisibility = OutletVisibility.VISIBLE
    address: Address
    phones: list[str] = Field(default_factory=list)
    emails: list[str] = Field(default_factory=list)
    working_schedule: WorkingSchedule = Field(default_factory=WorkingSchedule)
    delivery_rules: list[DeliveryRule] = Field(default_factory=list)

    def to_request_body(self) -> dict:
        body = self.to_dict()
        body.pop("id", None)
        return body


class CreateOutletResult(MarketModel):
    outlet_id: int = Field(alias="id")


class CreateOutletResponse(CommonResponse):
    result: Optional[CreateOutletResult] = None


class PointOfSaleResponse(CommonResponse):
    """
    The get-outlet response carries the outlet fields next to the envelope.

    They are kept as extras and validated only once the status is known not
    to be an error, since error responses come without them.
    """

    model_config = ConfigDict(extra="allow")

    def point_of_sale(self) -> PointOfSale:
        return PointOfSale.model_validate(self.model_extra or {})


class PointsOfSaleResponse(CommonResponse):
    outlets: list[PointOfSale] = Field(default_factory=list)
    paging: Paging = Field(default_factory=Paging)
    pager: Pager = Field(default_factory=Pager)
