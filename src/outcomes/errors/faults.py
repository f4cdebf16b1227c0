"""Usage faults: programming errors raised, never returned as data."""

from __future__ import annotations


class PatternMatchError(RuntimeError):
    """Raised when an Outcome is used as a shape it does not have.

    Examples: ``value()`` on a failure, ``apply`` with a non-Outcome function
    container, or a ``bind`` continuation returning something other than an
    Outcome. Never caught inside the library.
    """

    __slots__ = ("expected", "actual")

    def __init__(self, message: str, *, expected: str = "", actual: str = "") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)
