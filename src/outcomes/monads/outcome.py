"""Outcome: success value or classified set of domain errors.

Implements a two-shaped sum type with full composition operations:
- Functor: map
- Applicative: pure, apply
- Monad: bind
- Async mirrors: pure_async, map_async, apply_async, bind_async

Composition rules:
- map/bind never invoke their function on a failure; the failure is
  returned as a new, equal Outcome.
- apply on a double failure returns the *function container's* errors and
  class; the value container's errors are discarded, not accumulated.
- bind is left-biased: a failed receiver short-circuits the continuation.

Performance notes:
- Uses __slots__ and direct attribute access in hot paths
- Errors are stored as a tuple, so failures share nothing mutable
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from ..errors import ErrorValue, PatternMatchError, ResultClass

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable, Iterator

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

logger = logging.getLogger("outcomes.outcome")

_OK = ResultClass.OK
_MISSING: Any = object()  # Value slot of a failure
_NO_ERRORS: tuple[ErrorValue, ...] = ()


class Outcome(Generic[T]):
    """Either ``Success(value)`` or ``Failure(errors, result_class)``.

    A success always carries ResultClass.OK and no errors. A failure carries
    zero or more ErrorValue records and any class other than OK. Instances
    are immutable; every operation returns a new Outcome.

    Examples:
        >>> ok(21).map(lambda x: x * 2).value()
        42
        >>> bad = with_error(error("negative", "RANGE"), ResultClass.BAD_REQUEST)
        >>> bad.map(lambda x: x * 2) == bad
        True
        >>> ok(5).bind(lambda x: ok(x + 1)).value()
        6

        Double failure in apply keeps the function container's errors:
        >>> left = with_error(error("left"), ResultClass.EDIT_CONFLICT)
        >>> right = with_error(error("right"), ResultClass.BAD_REQUEST)
        >>> left.apply(right) == right
        True
    """

    __slots__ = ("_value", "_errors", "_class")

    def __init__(self, value: T, errors: tuple[ErrorValue, ...], result_class: ResultClass) -> None:
        """Private constructor. Use ok(), with_errors(), with_error() or ok_if() instead."""
        if result_class is _OK and value is _MISSING:
            raise ValueError("Cannot create a failed Outcome with ResultClass.OK")
        self._value = value
        self._errors = errors
        self._class = result_class

    # ─── Shape ─────────────────────────────────────────────────────────

    def is_success(self) -> bool:
        """Check if Outcome is a success."""
        return self._class is _OK

    def is_failure(self) -> bool:
        """Check if Outcome is a failure."""
        return self._class is not _OK

    def result_class(self) -> ResultClass:
        """Classification; ResultClass.OK for successes."""
        return self._class

    # ─── Value Extraction ──────────────────────────────────────────────

    def value(self) -> T:
        """Extract the success value. Raises PatternMatchError on a failure."""
        if self._class is _OK:
            return self._value
        logger.debug("value() called on failure", extra={"result_class": str(self._class), "error_count": len(self._errors)})
        raise PatternMatchError(
            f"value() on Failure({self._class}): {', '.join(map(str, self._errors)) or 'no errors'}",
            expected="Success",
            actual="Failure",
        )

    def errors(self) -> tuple[ErrorValue, ...]:
        """Errors of a failure (possibly empty); empty for a success."""
        return self._errors

    def value_or(self, default: T) -> T:
        """Extract success value or return default."""
        return self._value if self._class is _OK else default

    def value_or_else(self, f: Callable[[tuple[ErrorValue, ...], ResultClass], T]) -> T:
        """Extract success value or compute one from the errors and class."""
        return self._value if self._class is _OK else f(self._errors, self._class)

    def has_error(self, exc_type: type[BaseException]) -> ErrorValue | None:
        """First error whose cause is an instance of ``exc_type``."""
        return next((e for e in self._errors if isinstance(e.cause, exc_type)), None)

    def has_error_code(self, code: Any) -> ErrorValue | None:
        """First error carrying ``code`` (enum codes also match their value)."""
        return next((e for e in self._errors if e.has_code(code)), None)

    def match(
        self,
        *,
        ok: Callable[[T], U],
        err: Callable[[tuple[ErrorValue, ...], ResultClass], U],
    ) -> U:
        """Exhaustive case analysis. ``err`` receives the errors and the class."""
        return ok(self._value) if self._class is _OK else err(self._errors, self._class)

    # ─── Functor ───────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Outcome[U]:
        """Apply f to a success value. Signature: Outcome[T] → (T→U) → Outcome[U]"""
        if self._class is _OK:
            return Outcome(f(self._value), _NO_ERRORS, _OK)
        return Outcome(_MISSING, self._errors, self._class)

    # ─── Applicative ───────────────────────────────────────────────────

    def pure(self, x: U) -> Outcome[U]:
        """Wrap x as a success."""
        return Outcome(x, _NO_ERRORS, _OK)

    def apply(self, f_outcome: Outcome[Callable[[T], U]]) -> Outcome[U]:
        """Apply a wrapped function to the wrapped value (Applicative).

        If the function container failed, its errors and class win, even when
        self failed as well. Otherwise a failed self is returned unchanged.
        """
        if not isinstance(f_outcome, Outcome):
            raise _mismatch("apply", f_outcome)
        if f_outcome._class is not _OK:
            return Outcome(_MISSING, f_outcome._errors, f_outcome._class)
        if self._class is not _OK:
            return Outcome(_MISSING, self._errors, self._class)
        return Outcome(f_outcome._value(self._value), _NO_ERRORS, _OK)

    # ─── Monad ─────────────────────────────────────────────────────────

    def bind(self, f: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Monadic bind (>>=). Returns f's Outcome verbatim; short-circuits on failure.

        Example:
            >>> def parse(s: str) -> Outcome[int]:
            ...     return ok_if(s.isdigit(), lambda: int(s), [error("NaN")], ResultClass.BAD_REQUEST)
            >>> ok("42").bind(parse).value()
            42
        """
        if self._class is not _OK:
            return Outcome(_MISSING, self._errors, self._class)
        result = f(self._value)
        if not isinstance(result, Outcome):
            raise _mismatch("bind", result)
        return result

    # ─── Async Mirror ──────────────────────────────────────────────────

    async def pure_async(self, producer: Callable[[], Awaitable[U]]) -> Outcome[U]:
        """Await producer and wrap its value as a success."""
        return Outcome(await producer(), _NO_ERRORS, _OK)

    async def map_async(self, f: Callable[[T], Awaitable[U]]) -> Outcome[U]:
        """Async map. f is only invoked (and awaited) on a success."""
        if self._class is _OK:
            return Outcome(await f(self._value), _NO_ERRORS, _OK)
        return Outcome(_MISSING, self._errors, self._class)

    async def apply_async(self, f_outcome: Outcome[Callable[[T], Awaitable[U]]]) -> Outcome[U]:
        """Async apply with the same tie-break as apply: a failed function container wins."""
        if not isinstance(f_outcome, Outcome):
            raise _mismatch("apply_async", f_outcome)
        if f_outcome._class is not _OK:
            return Outcome(_MISSING, f_outcome._errors, f_outcome._class)
        if self._class is not _OK:
            return Outcome(_MISSING, self._errors, self._class)
        return Outcome(await f_outcome._value(self._value), _NO_ERRORS, _OK)

    async def bind_async(self, f: Callable[[T], Awaitable[Outcome[U]]]) -> Outcome[U]:
        """Async bind. f runs only after self is known to be a success."""
        if self._class is not _OK:
            return Outcome(_MISSING, self._errors, self._class)
        result = await f(self._value)
        if not isinstance(result, Outcome):
            raise _mismatch("bind_async", result)
        return result

    # ─── Dunder Methods ────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._class is _OK

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._class is other._class and self._errors == other._errors and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._class, self._errors, self._value))

    def __repr__(self) -> str:
        if self._class is _OK:
            return f"Success({self._value!r})"
        return f"Failure({list(self._errors)!r}, ResultClass.{self._class.name})"

    __str__ = __repr__

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if success, nothing if failure."""
        if self._class is _OK:
            yield self._value


def _mismatch(operation: str, got: object) -> PatternMatchError:
    logger.debug("%s received a non-Outcome", operation, extra={"actual": type(got).__name__})
    return PatternMatchError(
        f"{operation}() expected an Outcome, got {type(got).__name__}",
        expected="Outcome",
        actual=type(got).__name__,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def ok(value: T) -> Outcome[T]:
    """Construct a success."""
    return Outcome(value, _NO_ERRORS, _OK)


def with_errors(errors: Iterable[ErrorValue], result_class: ResultClass) -> Outcome[Any]:
    """Construct a failure with the given errors (may be empty) and class.

    Raises:
        ValueError: If result_class is ResultClass.OK
    """
    return Outcome(_MISSING, tuple(errors), ResultClass(result_class))


def with_error(error: ErrorValue, result_class: ResultClass) -> Outcome[Any]:
    """Construct a failure carrying a single error."""
    return Outcome(_MISSING, (error,), ResultClass(result_class))


def ok_if(
    condition: bool,
    value_thunk: Callable[[], T],
    errors: Iterable[ErrorValue],
    result_class: ResultClass,
) -> Outcome[T]:
    """Success of ``value_thunk()`` if condition holds, else the given failure.

    The thunk is never called when condition is false.
    """
    if condition:
        return Outcome(value_thunk(), _NO_ERRORS, _OK)
    return Outcome(_MISSING, tuple(errors), ResultClass(result_class))


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(outcomes: Iterable[Outcome[T]]) -> Outcome[list[T]]:
    """Iterable[Outcome[T]] → Outcome[list[T]]. First failure wins."""
    values: list[T] = []
    for o in outcomes:
        if not isinstance(o, Outcome):
            raise _mismatch("sequence", o)
        if o._class is not _OK:
            return Outcome(_MISSING, o._errors, o._class)
        values.append(o._value)
    return Outcome(values, _NO_ERRORS, _OK)


def traverse(items: Iterable[T], f: Callable[[T], Outcome[U]]) -> Outcome[list[U]]:
    """Map f over items and sequence. f is not called past the first failure."""
    values: list[U] = []
    for item in items:
        o = f(item)
        if not isinstance(o, Outcome):
            raise _mismatch("traverse", o)
        if o._class is not _OK:
            return Outcome(_MISSING, o._errors, o._class)
        values.append(o._value)
    return Outcome(values, _NO_ERRORS, _OK)


async def traverse_async(items: Iterable[T], f: Callable[[T], Awaitable[Outcome[U]]]) -> Outcome[list[U]]:
    """Async traverse. Items are processed one at a time, in order."""
    values: list[U] = []
    for item in items:
        o = await f(item)
        if not isinstance(o, Outcome):
            raise _mismatch("traverse_async", o)
        if o._class is not _OK:
            return Outcome(_MISSING, o._errors, o._class)
        values.append(o._value)
    return Outcome(values, _NO_ERRORS, _OK)
