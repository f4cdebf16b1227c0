"""Immutable error records carried by failed outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Any, Self

from pydantic import BaseModel


def _code_key(code: Any) -> Any:
    """Comparable key for a code; enum members compare by their value."""
    return code.value if isinstance(code, Enum) else code


class ErrorValue(BaseModel):
    """A single domain error: message, opaque code, optional field locator and cause.

    Equality and hashing run over the four fields explicitly, the code by its
    own ``==`` (members of different enums never match). The cause is
    compared with its own ``==`` (identity for plain exceptions).

    Example:
        >>> e = ErrorValue.create("must be positive", "RANGE", field="age")
        >>> str(e)
        'RANGE (field: age): must be positive.'
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    message: str
    code: Any = ""
    field: str | None = None
    cause: BaseException | None = None

    @classmethod
    def create(
        cls,
        message: str,
        code: Any = "",
        field: str | None = None,
        cause: BaseException | None = None,
    ) -> Self:
        """Factory method for positional construction."""
        return cls(message=message, code=code, field=field, cause=cause)

    def has_code(self, code: Any) -> bool:
        """Whether this error carries ``code``; enum members match their value."""
        return _code_key(self.code) == _code_key(code)

    def with_field(self, field: str) -> Self:
        """Return a copy located at ``field``."""
        return self.model_copy(update={"field": field})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorValue):
            return NotImplemented
        return (
            self.message == other.message
            and self.code == other.code
            and self.field == other.field
            and self.cause == other.cause
        )

    def __hash__(self) -> int:
        return hash((self.message, self.code, self.field, self.cause))

    def __str__(self) -> str:
        target = f" (field: {self.field})" if self.field is not None else ""
        return f"{_code_key(self.code)}{target}: {self.message}."


def error(
    message: str,
    code: Any = "",
    field: str | None = None,
    cause: BaseException | None = None,
) -> ErrorValue:
    """Create ErrorValue concisely."""
    return ErrorValue(message=message, code=code, field=field, cause=cause)
