"""Error data for outcomes.

- ErrorValue: immutable domain error record
- ResultClass: closed failure classification
- PatternMatchError: usage fault raised on shape mismatches
- classify_exception: default exception -> ResultClass mapping
"""

from .classes import ResultClass, classify_exception
from .faults import PatternMatchError
from .types import ErrorValue, error

__all__ = [
    "ErrorValue", "error",
    "ResultClass", "classify_exception",
    "PatternMatchError",
]
