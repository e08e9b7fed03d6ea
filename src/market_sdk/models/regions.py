from typing import Optional

from pydantic import Field

from .base import MarketModel
from .base import OpenEnum
from .common import CommonResponse


class RegionType(OpenEnum):
    AREA = "AREA"
    CITY = "CITY"
    CONTINENT = "CONTINENT"
    COUNTRY = "COUNTRY"
    DISTRICT = "DISTRICT"
    MONORAIL_STATION = "MONORAIL_STATION"
    OVERSEAS_TERRITORY = "OVERSEAS_TERRITORY"
    REGION = "REGION"
    REPUBLIC = "REPUBLIC"  # subject of the Russian Federation
    REPUBLIC_AREA = "REPUBLIC_AREA"
    SECONDARY_DISTRICT = "SECONDARY_DISTRICT"
    SETTLEMENT = "SETTLEMENT"
    SUB = "SUB"  # suburb
    SUBWAY_STATION = "SUBWAY_STATION"
    TOWN = "TOWN"
    UNKNOWN = "UNKNOWN"


class Region(MarketModel):
    """
    A region with its chain of ancestors.

    ``parent`` links upwards only; siblings and children are never returned.
    """

    id: int
    name: str = ""
    type: RegionType = RegionType.UNKNOWN
    parent: Optional["Region"] = None

    def ancestors(self) -> list["Region"]:
        chain = []
        node = self.parent
        while node is not None:
            chain.append(node)
            node = node.parent
        return chain


class RegionsResponse(CommonResponse):
    regions: list[Region] = Field(default_factory=list)
