"""Environment-based configuration using pydantic-settings.

Example:
    >>> from resultcase.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # RESULTCASE_DEBUG=true
    # RESULTCASE_LOG_FORMAT=json
    # RESULTCASE_LOG_CAPTURED=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_LOG_",
        extra="ignore",
    )

    level: LogLevel = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class ResultcaseSettings(BaseSettings):
    """Root settings for resultcase.

    Example environment variables:
        RESULTCASE_DEBUG=true
        RESULTCASE_LOG_CAPTURED=false
        RESULTCASE_LOG_RAISED=true
        RESULTCASE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Force DEBUG logging")
    log_captured: bool = Field(default=True, description="Log exceptions captured by try_catch")
    log_raised: bool = Field(default=False, description="Log failures re-raised by get_or_throw")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def effective_level(self) -> LogLevel:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> ResultcaseSettings:
    """Get the global settings instance (cached)."""
    return ResultcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
