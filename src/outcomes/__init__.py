"""Outcomes - composable success/failure values with classified domain errors.

An Outcome is either a success holding a value or a failure holding zero or
more ErrorValue records and a ResultClass. It composes through map, apply
and bind, each with an asyncio mirror, and through a do-notation adapter.

Quick Start:
    >>> from outcomes import ResultClass, error, ok, ok_if
    >>>
    >>> def parse_age(raw: str):
    ...     return ok_if(raw.isdigit(), lambda: int(raw),
    ...                  [error("not a number", "NAN", field="age")], ResultClass.BAD_REQUEST)
    >>>
    >>> parse_age("42").map(lambda n: n + 1).value()
    43
    >>> parse_age("x").result_class().http_status
    <HTTPStatus.BAD_REQUEST: 400>

Pipelines:
    >>> from outcomes import do
    >>>
    >>> @do
    ... def both(a: str, b: str):
    ...     x = yield parse_age(a)
    ...     y = yield parse_age(b)
    ...     return x + y
    >>> both("1", "2").value()
    3
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .errors import ErrorValue, PatternMatchError, ResultClass, classify_exception, error

# Contracts
from .category import (
    Applicative,
    AsyncApplicative,
    AsyncFunctor,
    AsyncMonad,
    Functor,
    Monad,
    aggregate_m,
    aggregate_m_async,
    ap_f,
    compose,
    join,
    lift_a2,
    lift_a3,
    tap,
    then,
    then_,
    void,
)

# Outcome
from .monads import (
    Outcome,
    attempt,
    attempt_async,
    do,
    do_async,
    from_exception,
    ok,
    ok_if,
    select,
    select_async,
    select_many,
    select_many_async,
    sequence,
    traverse,
    traverse_async,
    with_error,
    with_errors,
)

# Configuration & logging
from .config import OutcomeSettings, clear_settings_cache, get_settings
from .observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Errors
    "ErrorValue", "error", "ResultClass", "classify_exception", "PatternMatchError",
    # Outcome
    "Outcome", "ok", "with_errors", "with_error", "ok_if",
    "sequence", "traverse", "traverse_async",
    # Comprehension adapter
    "select", "select_many", "select_async", "select_many_async", "do", "do_async",
    # Exception interop
    "attempt", "attempt_async", "from_exception",
    # Contracts & combinators
    "Functor", "Applicative", "Monad", "AsyncFunctor", "AsyncApplicative", "AsyncMonad",
    "then", "then_", "compose", "join", "void", "tap", "ap_f", "lift_a2", "lift_a3",
    "aggregate_m", "aggregate_m_async",
    # Configuration & logging
    "OutcomeSettings", "get_settings", "clear_settings_cache", "configure_logging", "get_logger",
]
