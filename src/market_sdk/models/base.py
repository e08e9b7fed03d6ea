from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class MarketModel(BaseModel):
    """Wire model: camelCase on the wire, snake_case in Python, extra fields ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, src: dict[str, Any]):
        return cls.model_validate(src)


class OpenEnum(str, Enum):
    """
    String enumeration that keeps tokens it does not know.

    ``Status("PAUSED")`` returns a pseudo-member whose value is ``"PAUSED"``
    instead of raising, so new platform values do not break decoding.
    """

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = value
        member._value_ = value
        return member

    @property
    def is_known(self) -> bool:
        return self._name_ in type(self).__members__

    def __str__(self) -> str:
        return self.value
