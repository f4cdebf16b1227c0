"""Tests for settings and logging configuration."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import orjson
import pytest

from outcomes import PatternMatchError, ResultClass, configure_logging, error, get_logger, get_settings, with_error
from outcomes.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> object:
    """Reset settings cache and the outcomes logger around each test."""
    for var in ("OUTCOMES_DEBUG", "OUTCOMES_LOG_LEVEL", "OUTCOMES_LOG_FORMAT", "OUTCOMES_LOG_INCLUDE_TIMESTAMPS"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    root = logging.getLogger("outcomes")
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_settings_cache()


def test_default_settings() -> None:
    settings = get_settings()

    assert settings.debug is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "text"
    assert settings.effective_log_level == "WARNING"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTCOMES_LOG_LEVEL", "debug")
    monkeypatch.setenv("OUTCOMES_LOG_FORMAT", "json")
    clear_settings_cache()

    settings = get_settings()

    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTCOMES_DEBUG", "true")
    clear_settings_cache()

    assert get_settings().effective_log_level == "DEBUG"


def test_settings_cached() -> None:
    assert get_settings() is get_settings()


def test_json_logging_of_usage_fault() -> None:
    stream = io.StringIO()
    configure_logging(format="json", level="DEBUG", stream=stream)

    with pytest.raises(PatternMatchError):
        with_error(error("nope", "X"), ResultClass.NOT_FOUND).value()

    line = stream.getvalue().strip().splitlines()[-1]
    payload = orjson.loads(line)
    assert payload["level"] == "debug"
    assert payload["logger"] == "outcomes.outcome"
    assert payload["result_class"] == "NOT_FOUND"
    assert payload["error_count"] == 1
    assert "timestamp" in payload


def test_text_logging() -> None:
    stream = io.StringIO()
    configure_logging(format="text", level="INFO", stream=stream)

    get_logger("app").info("validated", extra={"user_id": 7})

    out = stream.getvalue()
    assert "[info] outcomes.app: validated" in out
    assert "user_id=7" in out


def test_configure_replaces_previous_handler() -> None:
    configure_logging(format="text", stream=io.StringIO())
    configure_logging(format="json", stream=io.StringIO())

    installed = [h for h in logging.getLogger("outcomes").handlers if getattr(h, "_outcomes_handler", False)]
    assert len(installed) == 1


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")


def test_logging_settings_from_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("OUTCOMES_LOG_LEVEL=DEBUG\nOUTCOMES_LOG_FORMAT=json\n")
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()

    settings = get_settings()

    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
