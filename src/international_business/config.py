"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Override via environment variables (prefixed with IB_) or .env file.

    Examples:
        IB_RATES_FILE=/srv/data/rates.json
        IB_TRANSACTIONS_FILE=/srv/data/transactions.json
        IB_LOG_LEVEL=DEBUG
        IB_ENVIRONMENT=production
    """

    model_config = SettingsConfigDict(
        env_prefix="IB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "International Business"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool | None = Field(
        default=None, description="Enable debug mode; on by default in development"
    )

    # Data sources
    rates_file: Path = Field(
        default=Path("data/rates.json"),
        description="JSON file holding the exchange rate table",
    )
    transactions_file: Path = Field(
        default=Path("data/transactions.json"),
        description="JSON file holding the sales transactions",
    )

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        description="Log output format; JSON in production, console elsewhere when unset",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @model_validator(mode="after")
    def apply_environment_defaults(self) -> "Settings":
        """Fill debug and log_format from the environment when not given."""
        if self.debug is None:
            self.debug = self.environment == Environment.DEVELOPMENT
        if self.log_format is None:
            self.log_format = (
                "json" if self.environment == Environment.PRODUCTION else "console"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
