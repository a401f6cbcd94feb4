"""
Application settings.
Loaded from environment variables prefixed with ASB_ (or a local .env file).
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from asb_dividend.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES


class Settings(BaseSettings):
    """Application settings from environment"""

    model_config = SettingsConfigDict(
        env_prefix="ASB_",
        env_file=".env",
        extra="ignore",
    )

    APP_NAME: str = "asb-dividend-calculator"
    VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    DEFAULT_LANGUAGE: str = DEFAULT_LANGUAGE

    # Sanity cap on the horizon accepted over HTTP; the simulator itself has none.
    MAX_INVESTMENT_PERIOD_YEARS: int = Field(500, ge=1)

    @field_validator("DEFAULT_LANGUAGE")
    @classmethod
    def check_language(cls, v: str) -> str:
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"DEFAULT_LANGUAGE must be one of {', '.join(SUPPORTED_LANGUAGES)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
