from typing import Annotated

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter
from fastapi.params import Body

from finance_tracker.schemas.connect import ConnectUrlRequestSchema, ConnectUrlSchema
from finance_tracker.services.connect import ConnectUrlInteractor

router = APIRouter(prefix="/bridge", tags=["bridge"], route_class=DishkaRoute)


@router.post("/connect-url")
async def create_connect_url(
    service: FromDishka[ConnectUrlInteractor],
    data: Annotated[ConnectUrlRequestSchema | None, Body()] = None,
) -> ConnectUrlSchema:
    return await service(data or ConnectUrlRequestSchema())
