from typing import Protocol

from finance_tracker.schemas.accounts import AccountSchema
from finance_tracker.schemas.transactions import TransactionSchema
from finance_tracker.services.filters import TransactionFilterSchema


class IAggregatorClient(Protocol):
    async def create_user(self) -> str: ...

    async def authenticate_user(self, user_uuid: str) -> str: ...

    async def create_connect_session(
        self, access_token: str, email: str | None = None
    ) -> str: ...

    async def get_transactions(
        self, filters: TransactionFilterSchema
    ) -> list[TransactionSchema]: ...

    async def get_accounts(self) -> list[AccountSchema]: ...
