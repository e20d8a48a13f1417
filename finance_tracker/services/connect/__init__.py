import logging

from dishka import Provider, Scope, provide

from finance_tracker.schemas.connect import ConnectUrlRequestSchema, ConnectUrlSchema
from finance_tracker.services.errors import upstream_action
from finance_tracker.services.providers.protocols.aggregator import IAggregatorClient

logger = logging.getLogger(__name__)


class ConnectUrlInteractor:
    """Create an aggregator user and a connect session to link a bank."""

    def __init__(self, aggregator: IAggregatorClient):
        self.aggregator = aggregator

    async def __call__(self, data: ConnectUrlRequestSchema) -> ConnectUrlSchema:
        with upstream_action("Unable to create connect URL"):
            user_uuid = await self.aggregator.create_user()
            access_token = await self.aggregator.authenticate_user(user_uuid)
            connect_url = await self.aggregator.create_connect_session(
                access_token, data.email
            )
        logger.info("Connect session created (user_uuid: %s)", user_uuid)
        return ConnectUrlSchema(connect_url=connect_url, user_uuid=user_uuid)


class ConnectServicesProvider(Provider):
    scope = Scope.REQUEST

    connect_url = provide(ConnectUrlInteractor)
