from typing import AsyncIterable

import httpx
from dishka import Provider, Scope, provide

from finance_tracker.core.http import new_http_client
from finance_tracker.services.providers.bridge import BridgeAggregatorClient
from finance_tracker.services.providers.protocols.aggregator import IAggregatorClient
from finance_tracker.settings.bridge import BridgeSettings


class HttpClientProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_http_client(
        self, settings: BridgeSettings
    ) -> AsyncIterable[httpx.AsyncClient]:
        async with new_http_client(settings) as client:
            yield client

    @provide(scope=Scope.APP)
    def get_aggregator(
        self, client: httpx.AsyncClient, settings: BridgeSettings
    ) -> IAggregatorClient:
        return BridgeAggregatorClient(client, settings)
