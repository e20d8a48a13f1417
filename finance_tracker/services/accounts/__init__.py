from dishka import Provider, Scope, provide

from finance_tracker.schemas.accounts import AccountSchema
from finance_tracker.services.errors import upstream_action
from finance_tracker.services.providers.protocols.aggregator import IAggregatorClient


class AccountRetrieveInteractor:
    def __init__(self, aggregator: IAggregatorClient):
        self.aggregator = aggregator

    async def all(self) -> list[AccountSchema]:
        with upstream_action("Unable to fetch accounts"):
            return await self.aggregator.get_accounts()


class AccountServicesProvider(Provider):
    scope = Scope.REQUEST

    retrieve = provide(AccountRetrieveInteractor)
