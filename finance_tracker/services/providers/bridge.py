"""Client for the Bridge bank-aggregation API (https://docs.bridgeapi.io/)."""

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from finance_tracker.schemas.accounts import AccountSchema
from finance_tracker.schemas.transactions import TransactionSchema
from finance_tracker.services.errors import AggregatorError, NotConfiguredError
from finance_tracker.services.filters import TransactionFilterSchema
from finance_tracker.services.providers.protocols.aggregator import IAggregatorClient
from finance_tracker.settings.bridge import BridgeSettings

logger = logging.getLogger(__name__)

_transactions_adapter = TypeAdapter(list[TransactionSchema])
_accounts_adapter = TypeAdapter(list[AccountSchema])


class BridgeAggregatorClient(IAggregatorClient):
    def __init__(self, client: httpx.AsyncClient, settings: BridgeSettings) -> None:
        self.client = client
        self.settings = settings

    def get_headers(self, access_token: str | None = None) -> dict[str, str]:
        if not self.settings.is_configured:
            raise NotConfiguredError()
        headers = {
            "Bridge-Version": self.settings.version,
            "Client-Id": self.settings.client_id,
            "Client-Secret": self.settings.client_secret.get_secret_value(),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        access_token: str | None = None,
    ) -> dict[str, Any]:
        headers = self.get_headers(access_token)
        logger.info("Bridge request %s %s", method, path)
        try:
            response = await self.client.request(
                method, path, json=json, params=params, headers=headers
            )
        except httpx.HTTPError as exc:
            raise AggregatorError(f"HTTP error during {method} {path}: {exc}") from exc

        if not response.is_success:
            # Upstream bodies can echo credentials, keep them out of info logs.
            logger.debug("Bridge error body for %s %s: %s", method, path, response.text)
            raise AggregatorError(
                f"{method} {path} returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise AggregatorError(f"Invalid JSON response from {path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise AggregatorError(
                f"Malformed Bridge response from {path}: "
                f"expected an object, got {type(payload).__name__}"
            )
        return payload

    @staticmethod
    def _field(payload: dict[str, Any], key: str) -> Any:
        value = payload.get(key)
        if value is None:
            raise AggregatorError(f"Malformed Bridge response: missing {key!r}")
        return value

    async def create_user(self) -> str:
        payload = await self._request("POST", "/aggregation/users", json={})
        return str(self._field(payload, "uuid"))

    async def authenticate_user(self, user_uuid: str) -> str:
        payload = await self._request(
            "POST",
            "/aggregation/authorization/token",
            json={"user_uuid": user_uuid},
        )
        return self._field(payload, "access_token")

    async def create_connect_session(
        self, access_token: str, email: str | None = None
    ) -> str:
        payload = await self._request(
            "POST",
            "/aggregation/connect-sessions",
            json={"user_email": email or self.settings.default_email},
            access_token=access_token,
        )
        return self._field(payload, "url")

    async def get_transactions(
        self, filters: TransactionFilterSchema
    ) -> list[TransactionSchema]:
        payload = await self._request(
            "GET", "/transactions", params=filters.as_query_params()
        )
        try:
            return _transactions_adapter.validate_python(payload.get("resources") or [])
        except ValidationError as exc:
            raise AggregatorError(f"Malformed Bridge transactions: {exc}") from exc

    async def get_accounts(self) -> list[AccountSchema]:
        payload = await self._request("GET", "/accounts")
        try:
            return _accounts_adapter.validate_python(payload.get("resources") or [])
        except ValidationError as exc:
            raise AggregatorError(f"Malformed Bridge accounts: {exc}") from exc
