"""Composition contracts and combinators written against them."""

from .combinators import (
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
from .protocols import Applicative, AsyncApplicative, AsyncFunctor, AsyncMonad, Functor, Monad

__all__ = [
    # Contracts
    "Functor", "Applicative", "Monad",
    "AsyncFunctor", "AsyncApplicative", "AsyncMonad",
    # Combinators
    "then", "then_", "compose", "join", "void", "tap",
    "ap_f", "lift_a2", "lift_a3",
    "aggregate_m", "aggregate_m_async",
]
