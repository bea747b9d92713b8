"""Token validation error variants.

Validation reports why a token was rejected. Callers that face end users
coarsen every variant to a single "invalid token" outcome.

Usage:
    from warden.domain.errors import TokenError

    match await token_service.validate(token):
        case Success(value=claims):
            ...
        case Failure(error=TokenError(code=ErrorCode.TOKEN_REVOKED)):
            ...
"""

from dataclasses import dataclass

from warden.core.enums import ErrorCode
from warden.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenError(DomainError):
    """Token validation or issuance failure.

    Variants (by code):
        TOKEN_EXPIRED: exp is in the past.
        TOKEN_BAD_SIGNATURE: Signature does not verify under the secret.
        TOKEN_MALFORMED: Not a decodable token or required claims missing.
        TOKEN_REVOKED: Token is on the banned list.
        UNEXPECTED_ERROR: Banned list lookup or encoding failed.

    Attributes:
        cause: Underlying error for UNEXPECTED_ERROR (logs only).
    """

    cause: BaseException | DomainError | None = None

    @classmethod
    def expired(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_EXPIRED, message="Token has expired")

    @classmethod
    def bad_signature(cls) -> "TokenError":
        return cls(
            code=ErrorCode.TOKEN_BAD_SIGNATURE,
            message="Token signature is invalid",
        )

    @classmethod
    def malformed(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_MALFORMED, message="Token is malformed")

    @classmethod
    def revoked(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_REVOKED, message="Token has been revoked")

    @classmethod
    def unexpected(
        cls, cause: BaseException | DomainError | None = None
    ) -> "TokenError":
        return cls(
            code=ErrorCode.UNEXPECTED_ERROR,
            message="Unexpected token error",
            cause=cause,
        )
