"""Free-function combinators over the composition contracts.

Everything here is written against the protocols, so it works for any
conforming effect type, not only Outcome. None of it holds state.

Example:
    >>> from outcomes import ok
    >>> add = lift_a2(lambda a, b: a + b)
    >>> add(ok(1), ok(2)) == ok(3)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from .protocols import Applicative, Functor, Monad

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
A = TypeVar("A")


# ─── Monad ─────────────────────────────────────────────────────────────


def then(m: Monad[T], f: Callable[[T], Monad[U]]) -> Monad[U]:
    """Alias for ``m.bind(f)``."""
    return m.bind(f)


def then_(m: Monad[T], other: Monad[U]) -> Monad[U]:
    """Sequence two computations, discarding the first value. Short-circuits on m."""
    return m.bind(lambda _: other)


def compose(f: Callable[[T], Monad[U]], g: Callable[[U], Monad[V]]) -> Callable[[T], Monad[V]]:
    """Kleisli composition: ``compose(f, g)(x) == f(x).bind(g)``."""
    return lambda x: f(x).bind(g)


def join(mm: Monad[Monad[T]]) -> Monad[T]:
    """Flatten one level of nesting."""
    return mm.bind(lambda inner: inner)


# ─── Functor ───────────────────────────────────────────────────────────


def void(m: Functor[T]) -> Functor[None]:
    """Forget the contained value."""
    return m.map(lambda _: None)


def tap(m: Functor[T], action: Callable[[T], object]) -> Functor[T]:
    """Run ``action`` on the contained value for its side effect, keep the value."""
    def _run(x: T) -> T:
        action(x)
        return x
    return m.map(_run)


# ─── Applicative ───────────────────────────────────────────────────────


def ap_f(fn: Applicative[Callable[[T], U]], x: Applicative[T]) -> Applicative[U]:
    """Flipped apply: function container first. ``ap_f(fn, x) == x.apply(fn)``."""
    return x.apply(fn)


def lift_a2(f: Callable[[T, U], V]) -> Callable[[Applicative[T], Applicative[U]], Applicative[V]]:
    """Lift a binary function into applicative containers.

    The first argument is mapped into a curried function container and then
    applied to the second, so on a double failure the first argument's
    failure surfaces (it is the function container).
    """
    return lambda x, y: ap_f(x.map(lambda a: lambda b: f(a, b)), y)


def lift_a3(
    f: Callable[[T, U, V], A],
) -> Callable[[Applicative[T], Applicative[U], Applicative[V]], Applicative[A]]:
    """Lift a ternary function into applicative containers."""
    return lambda x, y, z: ap_f(ap_f(x.map(lambda a: lambda b: lambda c: f(a, b, c)), y), z)


# ─── Folds ─────────────────────────────────────────────────────────────


def aggregate_m(
    xs: Iterable[T],
    acc: A,
    f: Callable[[T, A], Monad[A]],
    *,
    pure: Callable[[A], Monad[A]],
) -> Monad[A]:
    """Monadic left fold. Stops invoking ``f`` after the first short-circuit."""
    result = pure(acc)
    for x in xs:
        result = result.bind(lambda a, x=x: f(x, a))
    return result


async def aggregate_m_async(
    xs: Iterable[T],
    acc: A,
    f: Callable[[T, A], Awaitable[Any]],
    *,
    pure: Callable[[A], Any],
) -> Any:
    """Asynchronous monadic left fold; each step awaits the previous one."""
    result = pure(acc)
    for x in xs:
        result = await result.bind_async(lambda a, x=x: f(x, a))
    return result
