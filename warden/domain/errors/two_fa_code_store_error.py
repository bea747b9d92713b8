"""Two-factor code store error variants."""

from dataclasses import dataclass

from warden.core.enums import ErrorCode
from warden.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class TwoFACodeStoreError(DomainError):
    """Two-factor code store failure.

    Variants (by code):
        TWO_FA_CODE_NOT_FOUND: No live challenge for this email.
        UNEXPECTED_ERROR: Backend failure.

    Attributes:
        cause: Underlying error for UNEXPECTED_ERROR (logs only).
    """

    cause: BaseException | DomainError | None = None

    @classmethod
    def not_found(cls) -> "TwoFACodeStoreError":
        return cls(
            code=ErrorCode.TWO_FA_CODE_NOT_FOUND,
            message="Login attempt ID not found",
        )

    @classmethod
    def unexpected(
        cls, cause: BaseException | DomainError | None = None
    ) -> "TwoFACodeStoreError":
        return cls(
            code=ErrorCode.UNEXPECTED_ERROR,
            message="Unexpected two-factor code store error",
            cause=cause,
        )
