"""Comprehension adapter: multi-step pipelines built only from map and bind.

Two layers:
- ``select`` / ``select_many`` (and async forms): the primitive translation
  of "for each intermediate value, continue" into map/bind.
- ``@do`` / ``@do_async``: Python's sequential notation for the same thing.
  The decorated generator yields monadic values and receives their
  contents; its return value is wrapped with ``pure``.

Because every step goes through bind, the first failing step surfaces and no
later step is evaluated.

Example:
    >>> @do
    ... def total(a: int, b: int):
    ...     x = yield ok(a)
    ...     y = yield ok(b)
    ...     return x + y
    >>> total(2, 3) == ok(5)
    True
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar

from .outcome import Outcome, ok

if TYPE_CHECKING:
    from collections.abc import Awaitable, Generator

    from ..category import AsyncMonad, Functor, Monad

P = ParamSpec("P")
T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def _second(_: Any, y: V) -> V:
    return y


# ─── select / select_many ──────────────────────────────────────────────


def select(source: Functor[T], f: Callable[[T], U]) -> Functor[U]:
    """``source.map(f)``."""
    return source.map(f)


def select_many(
    source: Monad[T],
    f: Callable[[T], Monad[U]],
    combine: Callable[[T, U], V] = _second,
) -> Monad[V]:
    """``source.bind(lambda x: f(x).map(lambda y: combine(x, y)))``."""
    return source.bind(lambda x: f(x).map(lambda y: combine(x, y)))


async def _resolve(source: Any) -> Any:
    return await source if inspect.isawaitable(source) else source


async def select_async(source: Outcome[T] | Awaitable[Outcome[T]], f: Callable[[T], U]) -> Outcome[U]:
    """``select`` over an Outcome or an awaitable of one."""
    return (await _resolve(source)).map(f)


async def select_many_async(
    source: AsyncMonad[T] | Awaitable[AsyncMonad[T]],
    f: Callable[[T], Awaitable[AsyncMonad[U]]],
    combine: Callable[[T, U], V] = _second,
) -> AsyncMonad[V]:
    """``select_many`` with an asynchronous continuation.

    ``f`` is awaited only after the source resolved to a success.
    """
    m = await _resolve(source)

    async def _step(x: T) -> Any:
        return (await f(x)).map(lambda y: combine(x, y))

    return await m.bind_async(_step)


# ─── do-notation ───────────────────────────────────────────────────────


def _finish(current: Any, value: Any) -> Any:
    return current.pure(value) if current is not None else ok(value)


def _drive(gen: Generator[Any, Any, Any], sent: Any, current: Any) -> Any:
    # Outcome steps unpack in a loop; other monads fall back to a nested bind.
    while True:
        try:
            m = gen.send(sent)
        except StopIteration as stop:
            return _finish(current, stop.value)
        if not isinstance(m, Outcome):
            return m.bind(lambda x, m=m: _drive(gen, x, m))
        captured: list[Any] = []

        def keep(x: Any, m: Outcome[Any] = m) -> Outcome[Any]:
            captured.append(x)
            return m

        result = m.bind(keep)
        if not captured:
            return result
        sent, current = captured[0], m


async def _drive_async(gen: Generator[Any, Any, Any], sent: Any, current: Any) -> Any:
    while True:
        try:
            step = gen.send(sent)
        except StopIteration as stop:
            return _finish(current, stop.value)
        m = await _resolve(step)
        if not isinstance(m, Outcome):
            return await m.bind_async(lambda x, m=m: _drive_async(gen, x, m))
        captured: list[Any] = []

        async def keep(x: Any, m: Outcome[Any] = m) -> Outcome[Any]:
            captured.append(x)
            return m

        result = await m.bind_async(keep)
        if not captured:
            return result
        sent, current = captured[0], m


def do(func: Callable[P, Generator[Any, Any, T]]) -> Callable[P, Outcome[T]]:
    """Run a generator as a chain of binds.

    Each ``yield m`` binds ``m``; the generator resumes with its value. A
    generator that returns without yielding produces ``ok(value)``.
    Generators resume at most once per step, so only monads that call their
    continuation at most once (like Outcome) are supported. Outcome steps
    run in constant stack depth, so a pipeline may yield any number of times.
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T]:
        gen = func(*args, **kwargs)
        try:
            return _drive(gen, None, None)
        finally:
            gen.close()

    return wrapper


def do_async(func: Callable[P, Generator[Any, Any, T]]) -> Callable[P, Awaitable[Outcome[T]]]:
    """Coroutine form of ``do``.

    The generator may yield Outcomes or awaitables of Outcomes (e.g. the
    coroutine returned by calling an ``async def``). A yielded awaitable is
    only awaited once every earlier step succeeded.
    """
    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T]:
        gen = func(*args, **kwargs)
        try:
            return await _drive_async(gen, None, None)
        finally:
            gen.close()

    return wrapper
