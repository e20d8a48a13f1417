from pydantic import EmailStr, field_validator

from finance_tracker.schemas.base import BaseSchema


class ConnectUrlRequestSchema(BaseSchema):
    email: EmailStr | None = None

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ConnectUrlSchema(BaseSchema):
    connect_url: str
    user_uuid: str
