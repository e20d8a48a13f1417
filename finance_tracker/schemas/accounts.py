from pydantic import ConfigDict, field_validator

from finance_tracker.schemas.base import BaseSchema, JsonDecimal


class AccountSchema(BaseSchema):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    balance: JsonDecimal | None = None
    currency_code: str | None = None
    type: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v):
        if isinstance(v, int):
            return str(v)
        return v
