"""Session commands and their outcomes.

Commands carry raw caller input. Handlers parse it into value objects, so a
malformed field surfaces as INVALID_CREDENTIALS rather than an exception.
All commands are immutable (frozen=True) and keyword-only (kw_only=True).
"""

from dataclasses import dataclass

from warden.domain.value_objects import Email, LoginAttemptId


@dataclass(frozen=True, kw_only=True)
class SignupUser:
    """Register a new principal.

    Attributes:
        email: Raw email address.
        password: Raw plaintext password (checked against the policy).
        requires_2fa: Whether login needs an emailed one-time code.

    Example:
        >>> command = SignupUser(
        ...     email="user@example.com",
        ...     password="Passw0rd!",
        ...     requires_2fa=True,
        ... )
        >>> result = await handler.handle(command)
    """

    email: str
    password: str
    requires_2fa: bool = False


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with email and password.

    Attributes:
        email: Raw email address.
        password: Raw plaintext password.
    """

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class VerifyTwoFactor:
    """Complete a pending two-factor challenge.

    Attributes:
        email: Raw email address.
        login_attempt_id: Identifier returned by the login step.
        two_fa_code: Six-digit code delivered to the mailbox.
    """

    email: str
    login_attempt_id: str
    two_fa_code: str


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Revoke the caller's bearer token.

    Attributes:
        token: Serialized token, or None when the caller sent none.
    """

    token: str | None


@dataclass(frozen=True, kw_only=True)
class VerifyToken:
    """Check a bearer token on behalf of a resource server."""

    token: str


@dataclass(frozen=True, kw_only=True)
class Authenticated:
    """Login finished, a bearer token was issued.

    Attributes:
        email: Authenticated principal.
        token: Serialized bearer token.
    """

    email: Email
    token: str

    def __repr__(self) -> str:
        return f"Authenticated(email={self.email!r}, token='<redacted>')"


@dataclass(frozen=True, kw_only=True)
class TwoFactorPending:
    """Password accepted, a one-time code was sent.

    Attributes:
        email: Principal awaiting the second factor.
        login_attempt_id: Identifier the caller must echo back.
    """

    email: Email
    login_attempt_id: LoginAttemptId


type LoginOutcome = Authenticated | TwoFactorPending


@dataclass(frozen=True, kw_only=True)
class LogoutResponse:
    """Logout succeeded; the caller must discard its credential."""

    message: str = "Successfully logged out."
