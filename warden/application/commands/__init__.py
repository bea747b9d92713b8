"""Session commands (CQRS write operations) and outcomes."""

from warden.application.commands.auth_commands import (
    Authenticated,
    LoginOutcome,
    LoginUser,
    LogoutResponse,
    LogoutUser,
    SignupUser,
    TwoFactorPending,
    VerifyToken,
    VerifyTwoFactor,
)

__all__ = [
    "Authenticated",
    "LoginOutcome",
    "LoginUser",
    "LogoutResponse",
    "LogoutUser",
    "SignupUser",
    "TwoFactorPending",
    "VerifyToken",
    "VerifyTwoFactor",
]
