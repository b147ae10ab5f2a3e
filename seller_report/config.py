"""Service settings, read from ``SELLER_REPORT_*`` environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SELLER_REPORT_", extra="ignore")

    top_products_limit: int = Field(default=10, ge=1)
    seed_on_startup: bool = True
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
