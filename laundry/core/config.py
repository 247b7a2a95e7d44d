from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    DELIVERY_FEE: Decimal = Decimal("3.99")
    EXTRA_ITEM_RATE: Decimal = Decimal("0.5")
    DEFAULT_SERVICE_RATE: Decimal = Decimal("14.99")

    PICKUP_WINDOW_DAYS: int = 7
    DELIVERY_LEAD_DAYS: int = 2

    ORDER_API_BASE_URL: str | None = None
    ORDER_API_KEY: str | None = None
    ORDER_API_TIMEOUT: float = 10.0


settings = Settings()
