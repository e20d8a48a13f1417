from decimal import Decimal
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

T = TypeVar("T")


def _decimal_from_float(value: Any) -> Any:
    # repr() is the shortest round-tripping form: -42.5, not -42.5000000001...
    if isinstance(value, float):
        return Decimal(repr(value))
    return value


# Decimal amounts go out as JSON numbers, the front-end does its own formatting.
JsonDecimal = Annotated[
    Decimal,
    BeforeValidator(_decimal_from_float),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ResourceListSchema(BaseSchema, Generic[T]):
    resources: list[T]
