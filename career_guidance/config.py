"""Configuration management using Pydantic Settings."""
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Career Guidance Engine"
    app_version: str = "1.0.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Wellness windows (days)
    analytics_period_days: int = Field(default=30, ge=1)
    dashboard_recent_days: int = Field(default=7, ge=1)
    dashboard_trend_days: int = Field(default=30, ge=1)

    # Number of recent check-ins handed to the insight rules
    insight_history_size: int = Field(default=10, ge=1)
    recent_insight_limit: int = Field(default=5, ge=1)
    recent_assessment_limit: int = Field(default=5, ge=1)

    # Callers bound the external narrative call with this timeout
    narrative_timeout_seconds: float = Field(default=30.0, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
