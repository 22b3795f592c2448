"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from food_scanner.domain.products import ZeroValuePolicy

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_key: str
    products_table: str = "products"
    alternatives_limit: int = 3
    zero_value_policy: ZeroValuePolicy = ZeroValuePolicy.DEFAULT_CREDIT
    trace_ranking: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
