"""Configuration management using Pydantic Settings.

Loads configuration from RESULTFLOW_* environment variables with validation.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_prefix="RESULTFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get library settings (singleton).

    Cached so the environment and .env file are read once.

    Returns:
        Library settings
    """
    return Settings()
