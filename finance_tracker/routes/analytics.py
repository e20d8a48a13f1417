from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from finance_tracker.schemas.analytics import CategoryAnalyticsSchema
from finance_tracker.services.analytics import CategoryAnalyticsInteractor
from finance_tracker.services.filters import Period

router = APIRouter(prefix="/analytics", tags=["analytics"], route_class=DishkaRoute)


@router.get("/categories", summary="Expenses grouped by category")
async def categories_analytics(
    analytics: FromDishka[CategoryAnalyticsInteractor],
    period: Period,
) -> CategoryAnalyticsSchema:
    return await analytics(period)
