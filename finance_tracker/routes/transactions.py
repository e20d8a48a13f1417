from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from finance_tracker.schemas.base import ResourceListSchema
from finance_tracker.schemas.transactions import TransactionSchema
from finance_tracker.services.filters import TransactionFilters
from finance_tracker.services.transactions import TransactionRetrieveInteractor

router = APIRouter(
    prefix="/transactions", tags=["transactions"], route_class=DishkaRoute
)


@router.get("")
async def list_transactions(
    service: FromDishka[TransactionRetrieveInteractor],
    filters: TransactionFilters,
) -> ResourceListSchema[TransactionSchema]:
    return ResourceListSchema[TransactionSchema](resources=await service.all(filters))
