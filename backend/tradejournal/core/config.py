"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "Trade Journal Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # SQLite (local trade store)
    sqlite_path: Optional[str] = None  # Defaults to ./data/tradejournal.db

    # CORS - single origin allowed to call the analysis endpoint
    allowed_origin: str = "http://localhost:5173"

    # AI gateway (OpenAI-compatible chat completions)
    ai_gateway_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("ai_gateway_api_key", "lovable_api_key"),
    )
    ai_gateway_base_url: str = "https://ai.gateway.lovable.dev/v1"
    ai_gateway_model: str = "google/gemini-2.5-flash"
    ai_gateway_timeout_seconds: float = 60.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
