import asyncio
import contextlib
import logging

from dishka import AsyncContainer, Provider
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finance_tracker.deps import create_container
from finance_tracker.routes import router as api_router
from finance_tracker.services.exception_handler import register_exception_handlers
from finance_tracker.settings.app import AppSettings
from finance_tracker.settings.bridge import BridgeSettings

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    container: AsyncContainer = app.state.dishka_container
    bridge_settings = await container.get(BridgeSettings)
    if not bridge_settings.is_configured:
        logger.warning(
            "BRIDGE_CLIENT_ID / BRIDGE_CLIENT_SECRET are not set, "
            "aggregator calls will fail"
        )
    logger.info("Using Bridge %s environment", bridge_settings.environment)
    yield
    await container.close()


def create_app(*overrides: Provider) -> FastAPI:
    container = create_container(*overrides)
    settings = asyncio.run(container.get(AppSettings))
    app = FastAPI(lifespan=lifespan, title=settings.app_name)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    setup_dishka(container, app=app)
    app.include_router(api_router)
    return app
