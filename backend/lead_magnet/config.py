"""Application configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Integration Scenario Generator"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # LLM API Keys
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None
    llm_provider: Literal["openai", "anthropic"] = "openai"
    llm_model: str = "gpt-4.1"
    llm_temperature: float = 0.7
    llm_timeout_seconds: float = 120.0

    # Scenario matching
    min_confidence: int = 30  # Below this a classifier match is unusable
    shortlist_limit: int = 30  # Scenarios handed to the classifier after keyword scoring

    # Firecrawl API
    firecrawl_api_key: str | None = None
    scrape_timeout_ms: int = 15000
    scrape_max_attempts: int = 2  # First try plus one retry

    # Redis (company metadata cache)
    redis_url: str = "redis://localhost:6379/0"
    company_cache_enabled: bool = True
    company_cache_ttl_days: int = 7

    # logo.dev
    logo_dev_api_key: str | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
