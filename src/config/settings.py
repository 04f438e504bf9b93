"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Registration settings
    min_password_length: int = 6  # Shorter passwords are rejected

    # Logging settings
    log_level: str = "WARNING"  # Logs go to stderr, demo output to stdout


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
