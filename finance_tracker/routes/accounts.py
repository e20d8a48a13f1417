from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from finance_tracker.schemas.accounts import AccountSchema
from finance_tracker.schemas.base import ResourceListSchema
from finance_tracker.services.accounts import AccountRetrieveInteractor

router = APIRouter(prefix="/accounts", tags=["accounts"], route_class=DishkaRoute)


@router.get("")
async def list_accounts(
    service: FromDishka[AccountRetrieveInteractor],
) -> ResourceListSchema[AccountSchema]:
    return ResourceListSchema[AccountSchema](resources=await service.all())
