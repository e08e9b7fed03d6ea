from pydantic import Field

from .base import MarketModel
from .base import OpenEnum


class Status(OpenEnum):
    NA = "NA"
    OK = "OK"
    ERROR = "ERROR"


class Currency(OpenEnum):
    RUR = "RUR"  # russian ruble
    BYN = "BYN"  # belarusian ruble
    KZT = "KZT"  # kazakh tenge
    UAH = "UAH"  # ukrainian hryvnia


class CommonError(MarketModel):
    code: str = ""
    message: str = ""

    def __str__(self) -> str:
        return f"{self.message}, code: {self.code}"


class CommonResponse(MarketModel):
    """Envelope shared by nearly every response: a status plus optional errors."""

    status: Status = Status.NA
    errors: list[CommonError] = Field(default_factory=list)

    @property
    def is_error(self) -> bool:
        return self.status == Status.ERROR


class Pager(MarketModel):
    current_page: int = 0
    from_: int = Field(0, alias="from")
    pages_count: int = 0
    page_size: int = 0
    to: int = 0
    total: int = 0


class Paging(MarketModel):
    """Continuation tokens for token-paged endpoints."""

    prev_page_token: str = ""
    next_page_token: str = ""
