"""The Outcome type and everything composed from it.

Example:
    >>> from outcomes.monads import ok, with_error
    >>> from outcomes.errors import ResultClass, error
    >>>
    >>> def positive(n: int) -> Outcome[int]:
    ...     if n > 0:
    ...         return ok(n)
    ...     return with_error(error("must be positive", "RANGE"), ResultClass.BAD_REQUEST)
    >>>
    >>> ok(5).bind(positive).map(lambda n: n * 2).value()
    10
"""

from .comprehension import do, do_async, select, select_async, select_many, select_many_async
from .interop import attempt, attempt_async, from_exception
from .outcome import (
    Outcome,
    ok,
    ok_if,
    sequence,
    traverse,
    traverse_async,
    with_error,
    with_errors,
)

__all__ = [
    # Core type
    "Outcome",
    # Constructors
    "ok", "with_errors", "with_error", "ok_if",
    # Comprehension adapter
    "select", "select_many", "select_async", "select_many_async", "do", "do_async",
    # Exception interop
    "attempt", "attempt_async", "from_exception",
    # Collection operations
    "sequence", "traverse", "traverse_async",
]
