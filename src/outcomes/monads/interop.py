"""Explicit conversion of raised exceptions into classified failures.

The core never absorbs exceptions on its own: a producer that raises inside
``map_async`` or ``bind`` propagates to the caller. Callers that want a
failed Outcome instead wrap the risky call with ``attempt``.

Example:
    >>> attempt(lambda: int("42")) == ok(42)
    True
    >>> attempt(lambda: int("x")).result_class()
    <ResultClass.BAD_REQUEST: 'BAD_REQUEST'>
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from ..config import get_settings
from ..errors import ErrorValue, ResultClass, classify_exception
from .outcome import Outcome, ok, with_error

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger = logging.getLogger("outcomes.interop")


def from_exception(
    exc: Exception,
    *,
    context: str = "",
    code: Any = None,
    field: str | None = None,
    result_class: ResultClass | None = None,
) -> Outcome[Any]:
    """Failure with one error whose cause is ``exc``.

    The class defaults to ``classify_exception(exc)`` and the code to the
    configured ``attempt_default_code``.
    """
    resolved = result_class or classify_exception(exc)
    err = ErrorValue(
        message=f"{context}: {exc}" if context else str(exc),
        code=get_settings().attempt_default_code if code is None else code,
        field=field,
        cause=exc,
    )
    logger.debug(
        "captured %s as failure", type(exc).__name__,
        extra={"result_class": str(resolved), "context": context or None},
    )
    return with_error(err, resolved)


def attempt(
    operation: Callable[[], T],
    *,
    context: str = "",
    code: Any = None,
    field: str | None = None,
    result_class: ResultClass | None = None,
) -> Outcome[T]:
    """Run operation, returning ok(result) or a failure built from the raised exception."""
    try:
        return ok(operation())
    except Exception as e:
        return from_exception(e, context=context, code=code, field=field, result_class=result_class)


async def attempt_async(
    operation: Callable[[], Awaitable[T]] | Callable[[], T],
    *,
    context: str = "",
    code: Any = None,
    field: str | None = None,
    result_class: ResultClass | None = None,
) -> Outcome[T]:
    """Async version of attempt.

    Coroutine functions are awaited, plain callables run in a worker thread.
    A plain callable that returns an awaitable (``lambda: fetch(1)``) has that
    awaitable awaited too. Cancellation is not an Exception and always
    propagates.
    """
    try:
        if inspect.iscoroutinefunction(operation):
            result = await operation()
        else:
            result = await asyncio.to_thread(operation)
            if inspect.isawaitable(result):
                result = await result
        return ok(result)  # type: ignore[arg-type]
    except Exception as e:
        return from_exception(e, context=context, code=code, field=field, result_class=result_class)
