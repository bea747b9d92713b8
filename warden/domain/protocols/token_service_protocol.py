"""Token service protocol (port) for bearer token issuance and validation."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from warden.core.errors import UnexpectedError
from warden.core.result import Result
from warden.domain.errors import TokenError
from warden.domain.value_objects import Email


@dataclass(frozen=True, kw_only=True)
class TokenClaims:
    """Decoded claims of a valid token.

    Attributes:
        subject: Email the token was issued for (sub).
        issued_at: Issue time (iat).
        expires_at: Expiry time (exp).
        token_id: Unique token identifier (jti).
    """

    subject: str
    issued_at: datetime
    expires_at: datetime
    token_id: str | None = None


class TokenServiceProtocol(Protocol):
    """Issues signed tokens and validates them against the revocation list."""

    def issue(self, email: Email) -> Result[str, UnexpectedError]:
        """Issue a signed token for ``email``."""
        ...

    async def validate(self, token: str) -> Result[TokenClaims, TokenError]:
        """Validate a serialized token.

        The revocation list is consulted before the signature. Revoked tokens
        fail with TOKEN_REVOKED even if otherwise valid.
        """
        ...
