"""Result types for railway-oriented programming.

Every fallible operation in Warden (store calls, hashing, token validation,
notifier delivery) returns a Result instead of raising. Callers pattern-match
on the variant and forward or coarsen the error kind they receive.

Usage:
    def parse_code(raw: str) -> Result[TwoFACode, ValidationError]:
        if not raw.isdigit():
            return Failure(error=ValidationError(...))
        return Success(value=TwoFACode(raw))

    match parse_code("123456"):
        case Success(value=code):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error variant describing the failure.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
