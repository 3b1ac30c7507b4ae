"""
Settings for the analysis backend, loaded with Pydantic Settings.

Later sources win: `.env.base` (shared defaults), then `.env.{ENVIRONMENT}`,
then process environment variables. Engine parameters are validated here so a
bad deployment fails at startup instead of producing odd zones at request time.
"""

import os
from functools import lru_cache
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

# Selects which override file is layered over .env.base
ENV = os.getenv("ENVIRONMENT", "development")


class Settings(BaseSettings):
    """Analysis backend settings."""

    model_config = SettingsConfigDict(
        env_file=[".env.base", f".env.{ENV}"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "test", "production"] = "development"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # HTTP
    allowed_hosts: list[str] = ["*"]
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Rate limiting
    rate_limit_default: str = "120/minute"
    rate_limit_storage_uri: str = "memory://"  # e.g. redis://redis:6379 when scaled out

    # Technical analysis engine
    prz_tolerance: float = 0.02  # PRZ confluence window (2% of anchor price)
    trend_neutral_band: float = 0.1  # Neutral band around swing midpoint (10% of range)

    # Price history window (days) accepted by the analysis endpoints
    analysis_default_days: int = 30
    analysis_min_days: int = 2
    analysis_max_days: int = 365
    mock_history_seed: int | None = None  # Fixed seed for reproducible mock history

    @model_validator(mode="after")
    def _check_analysis_bounds(self) -> "Settings":
        if not 0 <= self.prz_tolerance < 1:
            raise ConfigurationError(
                "prz_tolerance must be in [0, 1)", prz_tolerance=self.prz_tolerance
            )
        if self.analysis_min_days < 1 or self.analysis_min_days > self.analysis_max_days:
            raise ConfigurationError(
                "Invalid analysis day bounds",
                analysis_min_days=self.analysis_min_days,
                analysis_max_days=self.analysis_max_days,
            )
        return self

    @property
    def is_development(self) -> bool:
        """Docs endpoints and auto-reload are enabled."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Trusted-host checks are enforced."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Settings singleton shared by dependencies and the app factory."""
    return Settings()
