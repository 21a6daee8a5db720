"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from ``FIELDCHECK_*`` environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Messages
    ALLOWABLE_VALUES_SEPARATOR: str = ","

    model_config = SettingsConfigDict(
        env_prefix="FIELDCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
