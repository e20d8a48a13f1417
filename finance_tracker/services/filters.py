from datetime import date
from typing import Annotated, Any

from annotated_types import Ge, Le
from fastapi.params import Depends, Query

from finance_tracker.schemas.base import BaseSchema

MAX_TRANSACTIONS_LIMIT = 500


class PeriodSchema(BaseSchema):
    since: date | None = None
    until: date | None = None


class TransactionFilterSchema(PeriodSchema):
    limit: Annotated[int, Ge(ge=1), Le(le=MAX_TRANSACTIONS_LIMIT)] = 100
    account_id: str | None = None

    def as_query_params(self) -> dict[str, Any]:
        """Query string for the aggregator, unset filters are left out."""
        params: dict[str, Any] = {"limit": self.limit}
        if self.account_id:
            params["account_id"] = self.account_id
        if self.since:
            params["since"] = self.since.isoformat()
        if self.until:
            params["until"] = self.until.isoformat()
        return params


def get_period(
    since: Annotated[date | None, Query()] = None,
    until: Annotated[date | None, Query()] = None,
) -> PeriodSchema:
    return PeriodSchema(since=since, until=until)


def get_transaction_filters(
    limit: Annotated[int, Query(ge=1, le=MAX_TRANSACTIONS_LIMIT)] = 100,
    account_id: Annotated[str | None, Query()] = None,
    since: Annotated[date | None, Query()] = None,
    until: Annotated[date | None, Query()] = None,
) -> TransactionFilterSchema:
    return TransactionFilterSchema(
        limit=limit,
        account_id=account_id,
        since=since,
        until=until,
    )


Period = Annotated[PeriodSchema, Depends(get_period)]
TransactionFilters = Annotated[TransactionFilterSchema, Depends(get_transaction_filters)]
