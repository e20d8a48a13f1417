from typing import Any

from pydantic import AliasChoices, ConfigDict, Field, field_validator

from finance_tracker.schemas.base import BaseSchema, JsonDecimal


class TransactionSchema(BaseSchema):
    """A transaction as fetched from the aggregator, read-only afterwards."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    description: str = Field(
        default="",
        validation_alias=AliasChoices(
            "description", "clean_description", "provider_description"
        ),
    )
    amount: JsonDecimal
    date: str
    category_name: str | None = None
    account_id: str | None = None
    currency_code: str | None = None

    @field_validator("id", "account_id", mode="before")
    @classmethod
    def validate_identifier(cls, v: Any):
        if isinstance(v, int):
            return str(v)
        return v
