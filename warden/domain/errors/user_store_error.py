"""User store error variants.

Usage:
    from warden.domain.errors import UserStoreError

    return Failure(error=UserStoreError.not_found())
"""

from dataclasses import dataclass

from warden.core.enums import ErrorCode
from warden.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class UserStoreError(DomainError):
    """User store failure.

    Variants (by code):
        USER_ALREADY_EXISTS: Email already registered.
        USER_NOT_FOUND: No user with this email.
        INVALID_CREDENTIALS: Password does not match the stored hash.
        UNEXPECTED_ERROR: Hashing or persistence failure.

    Attributes:
        cause: Underlying error for UNEXPECTED_ERROR (logs only).
    """

    cause: BaseException | DomainError | None = None

    @classmethod
    def already_exists(cls) -> "UserStoreError":
        return cls(code=ErrorCode.USER_ALREADY_EXISTS, message="User already exists")

    @classmethod
    def not_found(cls) -> "UserStoreError":
        return cls(code=ErrorCode.USER_NOT_FOUND, message="User not found")

    @classmethod
    def invalid_credentials(cls) -> "UserStoreError":
        return cls(code=ErrorCode.INVALID_CREDENTIALS, message="Invalid credentials")

    @classmethod
    def unexpected(
        cls, cause: BaseException | DomainError | None = None
    ) -> "UserStoreError":
        return cls(
            code=ErrorCode.UNEXPECTED_ERROR,
            message="Unexpected user store error",
            cause=cause,
        )
