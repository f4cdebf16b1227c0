"""Failure classification for outcomes.

ResultClass is a closed set of categories attached to every failed Outcome.
The core never interprets it beyond treating OK as the success marker.
"""

from __future__ import annotations

import asyncio
from enum import StrEnum
from functools import lru_cache
from http import HTTPStatus


class ResultClass(StrEnum):
    """Category of an Outcome. OK marks success, everything else a failure."""
    ALREADY_PRESENT = "ALREADY_PRESENT"
    BAD_REQUEST = "BAD_REQUEST"
    DATA_CONFLICT = "DATA_CONFLICT"
    EDIT_CONFLICT = "EDIT_CONFLICT"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_EXCEPTION = "INTERNAL_EXCEPTION"
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    RESOURCE_GONE = "RESOURCE_GONE"
    UNPROCESSABLE_ENTITY = "UNPROCESSABLE_ENTITY"
    CANCELLED = "CANCELLED"
    UNSPECIFIED = "UNSPECIFIED"

    @property
    def http_status(self) -> HTTPStatus:
        """HTTP status code conventionally associated with this class."""
        return _HTTP_STATUS[self]

    @property
    def is_ok(self) -> bool:
        return self is ResultClass.OK


_HTTP_STATUS: dict[ResultClass, HTTPStatus] = {
    ResultClass.ALREADY_PRESENT: HTTPStatus.BAD_REQUEST,
    ResultClass.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    ResultClass.DATA_CONFLICT: HTTPStatus.CONFLICT,
    ResultClass.EDIT_CONFLICT: HTTPStatus.CONFLICT,
    ResultClass.FORBIDDEN: HTTPStatus.FORBIDDEN,
    ResultClass.INTERNAL_EXCEPTION: HTTPStatus.INTERNAL_SERVER_ERROR,
    ResultClass.OK: HTTPStatus.OK,
    ResultClass.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ResultClass.NOT_IMPLEMENTED: HTTPStatus.NOT_IMPLEMENTED,
    ResultClass.RESOURCE_GONE: HTTPStatus.GONE,
    ResultClass.UNPROCESSABLE_ENTITY: HTTPStatus.UNPROCESSABLE_ENTITY,
    ResultClass.CANCELLED: HTTPStatus.SERVICE_UNAVAILABLE,
    ResultClass.UNSPECIFIED: HTTPStatus.INTERNAL_SERVER_ERROR,
}


# Ordered for priority: first matching base wins
_EXCEPTION_CLASSES: tuple[tuple[type[BaseException], ResultClass], ...] = (
    (FileExistsError, ResultClass.ALREADY_PRESENT),
    (PermissionError, ResultClass.FORBIDDEN),
    (FileNotFoundError, ResultClass.NOT_FOUND),
    (LookupError, ResultClass.NOT_FOUND),
    (NotImplementedError, ResultClass.NOT_IMPLEMENTED),
    (asyncio.CancelledError, ResultClass.CANCELLED),
    (TimeoutError, ResultClass.CANCELLED),
    (ValueError, ResultClass.BAD_REQUEST),
    (TypeError, ResultClass.BAD_REQUEST),
)


@lru_cache(maxsize=256)
def _classify_cached(exc_type: type[BaseException]) -> ResultClass:
    """Cached classification by exception type."""
    for base, result_class in _EXCEPTION_CLASSES:
        if issubclass(exc_type, base):
            return result_class
    return ResultClass.INTERNAL_EXCEPTION


def classify_exception(exc: BaseException) -> ResultClass:
    """Map an exception to the ResultClass a caller would most likely pick for it."""
    return _classify_cached(type(exc))
