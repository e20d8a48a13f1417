import json
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="app_")

    app_name: str = "Finance Tracker API"
    # APP_CORS_ORIGINS accepts a JSON array or a comma-separated list
    cors_origins: Annotated[list[str], NoDecode] = ["*"]
    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_cors_origins(cls, v: Any):
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
