"""Composition contracts: Functor, Applicative, Monad and their async mirrors.

These protocols are the runtime boundary used by the comprehension adapter
and the combinators. Outcome satisfies all of them directly; any other
effect type that provides the same methods interoperates.

Laws every implementation must obey (``==`` is structural equality):

- Functor identity:        ``m.map(lambda x: x) == m``
- Functor composition:     ``m.map(lambda x: g(f(x))) == m.map(f).map(g)``
- Applicative identity:    ``m.pure(a).apply(m.pure(f)) == m.pure(f(a))``
- Monad left identity:     ``m.pure(a).bind(f) == f(a)``
- Monad associativity:     ``m.bind(lambda x: f(x).bind(g)) == m.bind(f).bind(g)``

The async forms must agree with the sync ones once awaited.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")


@runtime_checkable
class Functor(Protocol[T_co]):
    """Container whose value can be transformed with ``map``."""

    def map(self, f: Callable[[Any], U]) -> Functor[U]: ...


@runtime_checkable
class Applicative(Functor[T_co], Protocol[T_co]):
    """Functor with ``pure`` and application of a wrapped function."""

    def pure(self, x: U) -> Applicative[U]: ...

    def apply(self, f: Any) -> Applicative[Any]: ...


@runtime_checkable
class Monad(Applicative[T_co], Protocol[T_co]):
    """Applicative supporting dependent chaining with ``bind``."""

    def bind(self, f: Callable[[Any], Any]) -> Monad[Any]: ...


@runtime_checkable
class AsyncFunctor(Protocol[T_co]):
    """Functor accepting an asynchronous mapping function."""

    async def map_async(self, f: Callable[[Any], Awaitable[U]]) -> AsyncFunctor[U]: ...


@runtime_checkable
class AsyncApplicative(Applicative[T_co], AsyncFunctor[T_co], Protocol[T_co]):
    """Applicative with asynchronous pure and apply."""

    async def pure_async(self, x: Callable[[], Awaitable[U]]) -> Applicative[U]: ...

    async def apply_async(self, f: Any) -> AsyncApplicative[Any]: ...


@runtime_checkable
class AsyncMonad(Monad[T_co], AsyncApplicative[T_co], Protocol[T_co]):
    """Monad whose continuation may be a coroutine function."""

    async def bind_async(self, f: Callable[[Any], Awaitable[Any]]) -> AsyncMonad[Any]: ...
