from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class BridgeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BRIDGE_")

    client_id: str = ""
    client_secret: SecretStr = SecretStr("")
    environment: str = "sandbox"

    api_url: str = "https://api.bridgeapi.io/v3"
    version: str = "2025-01-15"
    timeout: float = 30.0

    default_email: str = "user@example.com"
    analytics_limit: int = 500

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret.get_secret_value())
