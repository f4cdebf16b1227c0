"""Environment-based configuration using pydantic-settings.

Example:
    >>> from outcomes.config import get_settings
    >>> get_settings().logging.level
    'WARNING'

    # Or with environment variables:
    # OUTCOMES_LOG_LEVEL=DEBUG
    # OUTCOMES_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration for the ``outcomes`` logger tree."""

    model_config = SettingsConfigDict(
        env_prefix="OUTCOMES_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"
    include_timestamps: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class OutcomeSettings(BaseSettings):
    """Root settings for the outcomes library.

    Example environment variables:
        OUTCOMES_DEBUG=true
        OUTCOMES_LOG_LEVEL=DEBUG
        OUTCOMES_ATTEMPT_DEFAULT_CODE=UNHANDLED
    """

    model_config = SettingsConfigDict(
        env_prefix="OUTCOMES_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    attempt_default_code: str = Field(
        default="EXCEPTION",
        description="Error code stamped on errors captured by attempt() when no code is given",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> OutcomeSettings:
    """Get the global settings instance (cached)."""
    return OutcomeSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
