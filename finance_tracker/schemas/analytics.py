from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from finance_tracker.schemas.base import BaseSchema, JsonDecimal


class CategoryBucketSchema(BaseSchema):
    name: str
    total: JsonDecimal = Field(ge=0)
    count: int
    percentage: str


class SummarySchema(BaseSchema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_expenses: str
    total_income: str
    balance: str
    transaction_count: int


class CategoryAnalyticsSchema(BaseSchema):
    categories: list[CategoryBucketSchema]
    summary: SummarySchema
