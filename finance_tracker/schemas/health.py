from typing import Literal

from finance_tracker.schemas.base import BaseSchema


class HealthSchema(BaseSchema):
    status: Literal["ok", "error"]
    message: str
    environment: str
