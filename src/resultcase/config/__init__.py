"""Configuration management using pydantic-settings."""

from .settings import LoggingSettings, ResultcaseSettings, clear_settings_cache, get_settings

__all__ = [
    "LoggingSettings",
    "ResultcaseSettings",
    "clear_settings_cache",
    "get_settings",
]
