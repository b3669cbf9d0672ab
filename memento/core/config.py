"""
Application configuration using Pydantic Settings.

Centralizes policy constants (anchor date, expectancy table, birth-date
bounds) with environment variable support.
"""

from datetime import date
from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support (MEMENTO_*)."""

    model_config = SettingsConfigDict(
        env_prefix="MEMENTO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False

    # Calendar
    timezone: str = "UTC"
    rotation_anchor_date: date = date(2024, 1, 1)
    birth_date_min: date = date(1940, 1, 1)

    # Life expectancy (CDC 2022, years)
    male_expectancy_years: float = 73.5
    female_expectancy_years: float = 79.3
    default_expectancy_years: float = 76.0

    # Reminders
    reminder_identifier: str = "daily.reminder.notification"
    default_reminder_hour: int = 10
    default_reminder_minute: int = 0


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_timezone() -> ZoneInfo:
    """Get the configured calendar timezone."""
    return ZoneInfo(get_settings().timezone)
