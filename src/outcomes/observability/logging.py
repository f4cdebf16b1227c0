"""Logging for the outcomes library.

Modules log through stdlib loggers under the ``outcomes`` namespace. The
library installs no handlers on import; applications call
``configure_logging`` once (or wire ``outcomes`` into their own setup).

Quick Start:
    >>> from outcomes.observability import configure_logging, get_logger
    >>> configure_logging(format="json", level="DEBUG")
    >>> get_logger("app").debug("validated", extra={"user_id": 123})
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from ..config import get_settings

ROOT_LOGGER = "outcomes"

# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def _extra(record: logging.LogRecord) -> dict[str, object]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}


class TextFormatter(logging.Formatter):
    """Human-readable output. Format: timestamp [level] logger: message key=value ..."""

    def __init__(self, *, include_timestamps: bool = True) -> None:
        super().__init__()
        self.include_timestamps = include_timestamps

    def format(self, record: logging.LogRecord) -> str:
        parts = [datetime.fromtimestamp(record.created, tz=UTC).strftime("%H:%M:%S.%f")[:-3]] if self.include_timestamps else []
        parts += [f"[{record.levelname.lower()}]", f"{record.name}:", record.getMessage()]
        parts += [f"{k}={v!r}" for k, v in sorted(_extra(record).items())]
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def __init__(self, *, include_timestamps: bool = True) -> None:
        super().__init__()
        self.include_timestamps = include_timestamps

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {"level": record.levelname.lower(), "logger": record.name, "event": record.getMessage()}
        if self.include_timestamps:
            payload["timestamp"] = datetime.fromtimestamp(record.created, tz=UTC).isoformat()
        payload.update(_extra(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=repr, option=orjson.OPT_NON_STR_KEYS).decode()


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    level: str | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install a handler on the ``outcomes`` logger. Defaults come from settings.

    Calling again replaces the handler installed by the previous call.
    """
    settings = get_settings()
    fmt = format or settings.logging.format
    lvl = (level or settings.effective_log_level).upper()
    match fmt:
        case "text": formatter: logging.Formatter = TextFormatter(include_timestamps=settings.logging.include_timestamps)
        case "json": formatter = JsonFormatter(include_timestamps=settings.logging.include_timestamps)
        case _: raise ValueError(f"Unknown format: {fmt}. Use 'text' or 'json'")

    root = logging.getLogger(ROOT_LOGGER)
    for existing in [h for h in root.handlers if getattr(h, "_outcomes_handler", False)]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    handler._outcomes_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(getattr(logging, lvl, logging.WARNING))
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the ``outcomes`` namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)
