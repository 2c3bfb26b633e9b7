"""Command-line configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from SWAGGER_MODEL_* environment variables or a .env file."""

    LOG_LEVEL: str = "warning"
    LOG_FORMAT: Literal["console", "json"] = "console"

    model_config = SettingsConfigDict(
        env_prefix="SWAGGER_MODEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
