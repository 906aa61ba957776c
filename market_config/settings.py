"""Runtime configuration read from the environment and an optional .env file."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MarketSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Upper bound and default for daysRetention of paid messages.
    paid_message_retention_days: int = Field(default=90, ge=1)
    max_paid_message_size: int = Field(default=524_288, ge=1)
    max_free_message_size: int = Field(default=24_000, ge=1)
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> MarketSettings:
    return MarketSettings()
