import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from dishka import Provider, Scope, provide

from finance_tracker.schemas.analytics import (
    CategoryAnalyticsSchema,
    CategoryBucketSchema,
    SummarySchema,
)
from finance_tracker.schemas.transactions import TransactionSchema
from finance_tracker.services.errors import upstream_action
from finance_tracker.services.filters import PeriodSchema, TransactionFilterSchema
from finance_tracker.services.providers.protocols.aggregator import IAggregatorClient
from finance_tracker.settings.bridge import BridgeSettings

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"

_CENTS = Decimal("0.01")
_TENTHS = Decimal("0.1")


def format_amount(value: Decimal) -> str:
    return str(value.quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_percentage(part: Decimal, whole: Decimal) -> str:
    if whole == 0:
        return "0.0"
    return str((part / whole * 100).quantize(_TENTHS, rounding=ROUND_HALF_UP))


@dataclass
class _Bucket:
    total: Decimal = Decimal(0)
    count: int = 0


def analyze_by_category(
    transactions: Sequence[TransactionSchema],
) -> CategoryAnalyticsSchema:
    """Group expenses by category and total up income and expenses.

    Negative amounts are expenses and land in the bucket of their category
    (``Uncategorized`` when the category is missing or empty). Zero and
    positive amounts count as income and never touch a bucket. Buckets are
    ordered by total, largest first; equal totals keep the order in which
    the category was first seen.
    """
    buckets: dict[str, _Bucket] = {}
    total_expenses = Decimal(0)
    total_income = Decimal(0)

    for transaction in transactions:
        if transaction.amount < 0:
            expense = -transaction.amount
            total_expenses += expense
            bucket = buckets.setdefault(
                transaction.category_name or UNCATEGORIZED, _Bucket()
            )
            bucket.total += expense
            bucket.count += 1
        else:
            total_income += transaction.amount

    # sorted() is stable, reverse included, so ties stay in first-seen order
    ranked = sorted(buckets.items(), key=lambda item: item[1].total, reverse=True)
    categories = [
        CategoryBucketSchema(
            name=name,
            total=bucket.total,
            count=bucket.count,
            percentage=format_percentage(bucket.total, total_expenses),
        )
        for name, bucket in ranked
    ]

    return CategoryAnalyticsSchema(
        categories=categories,
        summary=SummarySchema(
            total_expenses=format_amount(total_expenses),
            total_income=format_amount(total_income),
            balance=format_amount(total_income - total_expenses),
            transaction_count=len(transactions),
        ),
    )


class CategoryAnalyticsInteractor:
    def __init__(self, aggregator: IAggregatorClient, settings: BridgeSettings):
        self.aggregator = aggregator
        self.settings = settings

    async def __call__(self, period: PeriodSchema) -> CategoryAnalyticsSchema:
        filters = TransactionFilterSchema(
            limit=self.settings.analytics_limit,
            since=period.since,
            until=period.until,
        )
        with upstream_action("Unable to analyze categories"):
            transactions = await self.aggregator.get_transactions(filters)
        analysis = analyze_by_category(transactions)
        logger.info(
            "Analyzed %d transactions into %d categories",
            analysis.summary.transaction_count,
            len(analysis.categories),
        )
        return analysis


class AnalyticsServicesProvider(Provider):
    scope = Scope.REQUEST

    categories = provide(CategoryAnalyticsInteractor)
