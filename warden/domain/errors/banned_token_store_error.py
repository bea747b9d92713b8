"""Banned token store error."""

from dataclasses import dataclass

from warden.core.enums import ErrorCode
from warden.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class BannedTokenStoreError(DomainError):
    """Banned token store failure (always UNEXPECTED_ERROR).

    Attributes:
        cause: Underlying backend error (logs only).
    """

    cause: BaseException | DomainError | None = None

    @classmethod
    def unexpected(
        cls, cause: BaseException | DomainError | None = None
    ) -> "BannedTokenStoreError":
        return cls(
            code=ErrorCode.UNEXPECTED_ERROR,
            message="Unexpected banned token store error",
            cause=cause,
        )
