from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Ignore unrelated env keys so a shared .env can carry frontend settings too.
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Rental Insights Backend"
    environment: str = "development"
    api_prefix: str = "/api/v1"
    proxy_prefix: str = "/api"
    cors_allow_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    lodgify_api_key: Optional[str] = Field(default=None, alias="LODGIFY_API_KEY")
    lodgify_api_url: str = Field(
        default="https://api.lodgify.com/v2/reservations/bookings?include=financials",
        alias="LODGIFY_API_URL",
    )
    lodgify_timeout_seconds: float = Field(default=30.0, alias="LODGIFY_TIMEOUT_SECONDS")
    bookings_sample_fallback: bool = Field(default=True, alias="BOOKINGS_SAMPLE_FALLBACK")

    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    gemini_api_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        alias="GEMINI_API_BASE_URL",
    )
    gemini_model: str = Field(default="gemini-2.5-flash-preview-05-20", alias="GEMINI_MODEL")
    gemini_timeout_seconds: float = Field(default=60.0, alias="GEMINI_TIMEOUT_SECONDS")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_cors_origins() -> list[str]:
    settings = get_settings()
    return [origin.strip() for origin in settings.cors_allow_origins.split(",") if origin.strip()]
