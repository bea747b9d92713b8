"""Application boundary error for session operations.

Handlers collapse store, token and parsing failures into the small set of
kinds a caller can act on. The presentation layer maps each kind to an HTTP
status.

Kinds (ErrorCode):
    INVALID_CREDENTIALS: Input failed parsing or policy (400)
    INCORRECT_CREDENTIALS: Unknown user, wrong password or wrong code (401)
    USER_ALREADY_EXISTS: Signup for a registered email (409)
    TOKEN_MISSING: Logout without a credential (400)
    TOKEN_INVALID: Credential rejected for any reason (401)
    UNEXPECTED_ERROR: Store, hashing, token or delivery failure (500)
"""

from dataclasses import dataclass
from typing import Any

from warden.core.enums import ErrorCode
from warden.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionError:
    """Session operation failure.

    Attributes:
        code: Error kind (see module docstring).
        message: Human-readable message, safe to show to end users.
        domain_error: Lower-level error that caused this one (logs only).
        details: Additional user-safe context (field, violated rule).
    """

    code: ErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, Any] | None = None

    @classmethod
    def invalid_credentials(
        cls, domain_error: DomainError | None = None
    ) -> "SessionError":
        details = None
        if domain_error is not None:
            details = {"reason": domain_error.message}
        return cls(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid credentials",
            domain_error=domain_error,
            details=details,
        )

    @classmethod
    def incorrect_credentials(
        cls, domain_error: DomainError | None = None
    ) -> "SessionError":
        return cls(
            code=ErrorCode.INCORRECT_CREDENTIALS,
            message="Incorrect credentials",
            domain_error=domain_error,
        )

    @classmethod
    def user_already_exists(
        cls, domain_error: DomainError | None = None
    ) -> "SessionError":
        return cls(
            code=ErrorCode.USER_ALREADY_EXISTS,
            message="User already exists",
            domain_error=domain_error,
        )

    @classmethod
    def token_missing(cls) -> "SessionError":
        return cls(code=ErrorCode.TOKEN_MISSING, message="Missing token")

    @classmethod
    def token_invalid(cls, domain_error: DomainError | None = None) -> "SessionError":
        return cls(
            code=ErrorCode.TOKEN_INVALID,
            message="Invalid token",
            domain_error=domain_error,
        )

    @classmethod
    def unexpected(cls, domain_error: DomainError | None = None) -> "SessionError":
        return cls(
            code=ErrorCode.UNEXPECTED_ERROR,
            message="Unexpected error",
            domain_error=domain_error,
        )
