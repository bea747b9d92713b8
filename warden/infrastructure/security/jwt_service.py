"""JWT token service (adapter).

Issues and validates session tokens with PyJWT using HMAC-SHA256.

Architecture:
    - Implements TokenServiceProtocol (no inheritance required)
    - Consults the banned token store on every validation
    - Injected via dependency container

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Unique JWT ID (jti) per token, so two tokens for the same subject
      issued in the same second are distinct strings
    - Revocation is checked before the signature; a revocation list lookup
      failure rejects the token
"""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    InvalidSignatureError,
    InvalidTokenError,
    MissingRequiredClaimError,
)
from uuid_extensions import uuid7

from warden.core.enums import ErrorCode
from warden.core.errors import UnexpectedError
from warden.core.result import Failure, Result, Success
from warden.domain.errors import TokenError
from warden.domain.protocols import BannedTokenStore, TokenClaims
from warden.domain.value_objects import Email

_REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class JWTService:
    """JWT token issuance and validation service.

    Usage:
        token_service = JWTService(secret_key, banned_token_store, ttl_seconds=600)
        match token_service.issue(email):
            case Success(value=token):
                ...

        result = await token_service.validate(token)
    """

    def __init__(
        self,
        secret_key: str,
        banned_token_store: BannedTokenStore,
        ttl_seconds: int = 600,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing.
                MUST be at least 256 bits (32 bytes) for security.
            banned_token_store: Revocation list consulted on validation.
            ttl_seconds: Token lifetime in seconds (default: 600).

        Raises:
            ValueError: If secret_key is too short or ttl_seconds not positive.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if ttl_seconds <= 0:
            msg = "Token TTL must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._banned_token_store = banned_token_store
        self._ttl_seconds = ttl_seconds
        self._algorithm = "HS256"

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def issue(self, email: Email) -> Result[str, UnexpectedError]:
        """Issue a signed token for ``email``.

        Returns:
            Success(serialized token) or Failure(UnexpectedError) if encoding
            fails.

        Example:
            >>> service.issue(Email("user@example.com"))
            Success(value='eyJhbGciOiJIUzI1NiIs...')
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(seconds=self._ttl_seconds)

        payload = {
            "sub": email.value,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        try:
            token: str = jwt.encode(
                payload, self._secret_key, algorithm=self._algorithm
            )
        except (TypeError, ValueError) as e:
            return Failure(
                error=UnexpectedError(
                    code=ErrorCode.UNEXPECTED_ERROR,
                    message="Failed to encode token",
                    cause=e,
                )
            )
        return Success(value=token)

    async def validate(self, token: str) -> Result[TokenClaims, TokenError]:
        """Validate a serialized token.

        Order of checks:
            1. Revocation list (TOKEN_REVOKED, or UNEXPECTED_ERROR when the
               lookup itself fails)
            2. Signature, expiry and required claims

        Returns:
            Success(TokenClaims) or Failure(TokenError).
        """
        match await self._banned_token_store.is_banned(token):
            case Failure(error=error):
                return Failure(error=TokenError.unexpected(cause=error))
            case Success(value=True):
                return Failure(error=TokenError.revoked())

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(error=TokenError.expired())
        except InvalidSignatureError:
            return Failure(error=TokenError.bad_signature())
        except (DecodeError, MissingRequiredClaimError):
            return Failure(error=TokenError.malformed())
        except InvalidTokenError:
            # Remaining claim failures (iat in the future, non-integer exp)
            return Failure(error=TokenError.malformed())

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            return Failure(error=TokenError.malformed())

        return Success(
            value=TokenClaims(
                subject=subject,
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
                token_id=payload.get("jti"),
            )
        )
