"""Application configuration loading via Pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_STAT_KEY_LENGTH = 256


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    stat_key_length: int = Field(default=DEFAULT_STAT_KEY_LENGTH, ge=2, alias="STAT_KEY_LENGTH")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()
