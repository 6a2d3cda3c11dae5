"""Typed Success/Failure results for value-based error handling.

Treats "may fail" operations as values that compose instead of
exceptions that jump:
- Success/Failure variants with a uniform combinator set
- map / map_error / flat_map for railway-oriented chaining
- try_catch and get_or_throw as the two boundaries to raising code

Example:
    >>> from resultcase import Result, failure, success
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return failure("division by zero")
    ...     return success(a / b)
    >>>
    >>> result = (
    ...     divide(10, 2)
    ...     .map(lambda x: x * 2)
    ...     .flat_map(lambda x: success(x + 1))
    ... )
    >>> assert result.get_or_throw() == 11.0
"""

from .errors import FailureError
from .result import (
    Failure,
    Result,
    Success,
    failure,
    result_of,
    success,
    try_catch,
)

__all__ = [
    # Core types
    "Result",
    "Success",
    "Failure",
    # Constructors
    "success",
    "failure",
    "try_catch",
    "result_of",
    # Errors
    "FailureError",
]
