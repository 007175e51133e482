"""
Configuration Management for Expense Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

All configuration is centralized here. Settings are loaded once at startup
and handed to the components that need them.
"""

import re
from functools import lru_cache
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_HEX_COLOR = re.compile(r"^#?[0-9a-fA-F]{6}$")


class ThemeSettings(BaseSettings):
    """Colour theme configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_THEME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # ARGB 255/96/59/181
    seed_color: str = Field(
        default="#603BB5",
        description="Seed colour the colour scheme is derived from"
    )

    @field_validator('seed_color')
    @classmethod
    def validate_seed_color(cls, v: str) -> str:
        """Accept RRGGBB with or without a leading '#'."""
        if not _HEX_COLOR.match(v):
            raise ValueError(f"Seed colour must be a hex RGB value, got {v!r}")
        return v if v.startswith("#") else f"#{v}"


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Display
    currency_symbol: str = Field(
        default="$",
        max_length=3,
        description="Symbol shown in front of amounts"
    )
    date_format: str = Field(
        default="%d/%m/%Y",
        description="strftime format used to display expense dates"
    )
    default_category: str = Field(
        default="leisure",
        description="Category preselected in the form"
    )

    # Input limits
    max_title_length: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Maximum characters accepted by the title input"
    )

    # Audit
    audit_history_size: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="How many recent audit events are kept in memory"
    )

    @field_validator('default_category')
    @classmethod
    def validate_default_category(cls, v: str) -> str:
        """Default category must name an existing category."""
        from expense_tracker.models.expense import Category

        try:
            return Category(v.strip().lower()).value
        except ValueError:
            allowed = ", ".join(c.value for c in Category)
            raise ValueError(f"Unknown category {v!r}. Allowed: {allowed}")


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def app(self) -> AppSettings:
        return AppSettings()

    @property
    def theme(self) -> ThemeSettings:
        return ThemeSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, Union[bool, str]]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    "<name>_error" entry for each failure.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    for name in ("app", "theme"):
        try:
            _ = getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
