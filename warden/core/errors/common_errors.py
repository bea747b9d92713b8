"""Common error classes used across all layers.

Error Types:
- ValidationError: Input shape failures (user-correctable, no side effects)
- UnexpectedError: Store/transport/hashing failures carrying their cause

Usage:
    from warden.core.errors import ValidationError
    from warden.core.enums import ErrorCode
    from warden.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Invalid email format",
        field="email",
    ))
"""

from dataclasses import dataclass

from warden.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UnexpectedError(DomainError):
    """Infrastructure failure surfaced to the caller.

    Always carries the underlying cause for diagnostics. The cause is for
    logs only and is never rendered to end users.

    Attributes:
        cause: Original exception or lower-level error.
    """

    cause: BaseException | DomainError | None = None
