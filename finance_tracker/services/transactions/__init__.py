import logging

from dishka import Provider, Scope, provide

from finance_tracker.schemas.transactions import TransactionSchema
from finance_tracker.services.errors import upstream_action
from finance_tracker.services.filters import TransactionFilterSchema
from finance_tracker.services.providers.protocols.aggregator import IAggregatorClient

logger = logging.getLogger(__name__)


class TransactionRetrieveInteractor:
    def __init__(self, aggregator: IAggregatorClient):
        self.aggregator = aggregator

    async def all(self, filters: TransactionFilterSchema) -> list[TransactionSchema]:
        with upstream_action("Unable to fetch transactions"):
            transactions = await self.aggregator.get_transactions(filters)
        logger.info("Fetched %d transactions", len(transactions))
        return transactions


class TransactionServicesProvider(Provider):
    scope = Scope.REQUEST

    retrieve = provide(TransactionRetrieveInteractor)
