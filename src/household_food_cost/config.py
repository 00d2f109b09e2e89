"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

WASTE_MODELS = {"percentage", "leftovers"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    bls_api_key: str | None = None
    bls_base_url: str = "https://api.bls.gov/publicAPI/v2"
    price_refresh_timeout_seconds: float = 10.0
    price_stale_after_hours: float = 24.0
    waste_model: str = "percentage"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_waste_model(raw: str | None) -> str:
    """Normalize the configured waste model name, defaulting to percentage."""
    if raw is None:
        return "percentage"
    cleaned = raw.strip().lower()
    if cleaned in WASTE_MODELS:
        return cleaned
    return "percentage"
