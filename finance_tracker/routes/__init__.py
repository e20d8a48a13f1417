from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from finance_tracker.routes.accounts import router as accounts_router
from finance_tracker.routes.analytics import router as analytics_router
from finance_tracker.routes.connect import router as connect_router
from finance_tracker.routes.transactions import router as transactions_router
from finance_tracker.schemas.health import HealthSchema
from finance_tracker.settings.app import AppSettings
from finance_tracker.settings.bridge import BridgeSettings

router = APIRouter(prefix="/api", route_class=DishkaRoute)
router.include_router(connect_router)
router.include_router(accounts_router)
router.include_router(transactions_router)
router.include_router(analytics_router)


@router.get("/health")
async def health(
    app_settings: FromDishka[AppSettings],
    bridge_settings: FromDishka[BridgeSettings],
) -> HealthSchema:
    return HealthSchema(
        status="ok",
        message=f"{app_settings.app_name} is up",
        environment=bridge_settings.environment,
    )
