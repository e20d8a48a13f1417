"""Shared fixtures: a fake aggregator and a test client wired through dishka."""

from collections.abc import AsyncIterable, Iterator

import httpx
import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient
from pydantic import SecretStr

from finance_tracker.core.app import create_app
from finance_tracker.schemas.accounts import AccountSchema
from finance_tracker.schemas.transactions import TransactionSchema
from finance_tracker.services.filters import TransactionFilterSchema
from finance_tracker.services.providers.protocols.aggregator import IAggregatorClient
from finance_tracker.settings.bridge import BridgeSettings


class FakeAggregator(IAggregatorClient):
    """In-memory aggregator recording every call it receives."""

    def __init__(self) -> None:
        self.transactions: list[TransactionSchema] = []
        self.accounts: list[AccountSchema] = []
        self.error: Exception | None = None
        self.calls: list[tuple[str, tuple]] = []

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error

    async def create_user(self) -> str:
        self._record("create_user")
        return "user-uuid"

    async def authenticate_user(self, user_uuid: str) -> str:
        self._record("authenticate_user", user_uuid)
        return "access-token"

    async def create_connect_session(
        self, access_token: str, email: str | None = None
    ) -> str:
        self._record("create_connect_session", access_token, email)
        return "https://connect.bridgeapi.io/session/abc"

    async def get_transactions(
        self, filters: TransactionFilterSchema
    ) -> list[TransactionSchema]:
        self._record("get_transactions", filters)
        return self.transactions

    async def get_accounts(self) -> list[AccountSchema]:
        self._record("get_accounts")
        return self.accounts


class FakeAggregatorProvider(Provider):
    def __init__(self, aggregator: FakeAggregator, settings: BridgeSettings):
        super().__init__()
        self.aggregator = aggregator
        self.settings = settings

    @provide(scope=Scope.APP)
    def get_settings(self) -> BridgeSettings:
        return self.settings

    @provide(scope=Scope.APP)
    def get_aggregator(self) -> IAggregatorClient:
        return self.aggregator


@pytest.fixture
def bridge_settings() -> BridgeSettings:
    return BridgeSettings(
        client_id="client-id",
        client_secret=SecretStr("client-secret"),
        environment="sandbox",
        api_url="https://bridge.test/v3",
    )


@pytest.fixture
def aggregator() -> FakeAggregator:
    return FakeAggregator()


@pytest.fixture
def client(
    aggregator: FakeAggregator, bridge_settings: BridgeSettings
) -> Iterator[TestClient]:
    app = create_app(FakeAggregatorProvider(aggregator, bridge_settings))
    with TestClient(app) as test_client:
        yield test_client


class MockTransportProvider(Provider):
    """Keeps the real Bridge client but routes its HTTP calls to ``handler``."""

    def __init__(self, handler, settings: BridgeSettings):
        super().__init__()
        self.handler = handler
        self.settings = settings

    @provide(scope=Scope.APP)
    def get_settings(self) -> BridgeSettings:
        return self.settings

    @provide(scope=Scope.APP)
    async def get_http_client(self) -> AsyncIterable[httpx.AsyncClient]:
        async with httpx.AsyncClient(
            base_url=self.settings.api_url,
            transport=httpx.MockTransport(self.handler),
        ) as client:
            yield client
