from dishka import AsyncContainer, Provider, Scope, make_async_container
from dishka.integrations.fastapi import FastapiProvider
from pydantic_settings import BaseSettings

from finance_tracker.deps.http import HttpClientProvider
from finance_tracker.services.accounts import AccountServicesProvider
from finance_tracker.services.analytics import AnalyticsServicesProvider
from finance_tracker.services.connect import ConnectServicesProvider
from finance_tracker.services.transactions import TransactionServicesProvider
from finance_tracker.settings.app import AppSettings
from finance_tracker.settings.bridge import BridgeSettings


class AppProvider(Provider):
    def register_settings(self, settings: type[BaseSettings]):
        self.provide(lambda: settings(), scope=Scope.APP, provides=settings)


def create_container(*overrides: Provider) -> AsyncContainer:
    """Build the application container.

    Providers passed in ``overrides`` are registered last and win over the
    defaults, which is how tests swap the aggregator client out.
    """
    provider = AppProvider()
    provider.register_settings(AppSettings)
    provider.register_settings(BridgeSettings)

    container = make_async_container(
        provider,
        HttpClientProvider(),
        ConnectServicesProvider(),
        AccountServicesProvider(),
        TransactionServicesProvider(),
        AnalyticsServicesProvider(),
        FastapiProvider(),
        *overrides,
    )
    return container
