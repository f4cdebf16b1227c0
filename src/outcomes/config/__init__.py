"""Configuration for outcomes."""

from .settings import LoggingSettings, OutcomeSettings, clear_settings_cache, get_settings

__all__ = ["OutcomeSettings", "LoggingSettings", "get_settings", "clear_settings_cache"]
