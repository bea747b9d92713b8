"""Session request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain value objects. Field content (email syntax,
password policy, code format) is checked by the handlers, so a well-formed
body with bad values yields 400, while a malformed body yields 422.

Endpoints:
    POST /signup        - Register a principal
    POST /login         - Authenticate (may require 2FA)
    POST /verify-2fa    - Complete the second factor
    POST /logout        - Revoke the cookie credential
    POST /verify-token  - Check a token for a resource server
"""

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Signup
# =============================================================================


class SignupRequest(BaseModel):
    """Request schema for signup.

    POST /signup
    Returns: 201 Created
    """

    email: str = Field(..., description="Email address", examples=["user@example.com"])
    password: str = Field(
        ...,
        description="Password (8+ chars, upper, lower, digit, special char)",
        examples=["Passw0rd!"],
    )
    requires_2fa: bool = Field(
        ...,
        alias="requires2FA",
        description="Require an emailed one-time code at login",
    )

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str = Field(..., description="Human-readable result")


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /login
    Returns: 200 OK (cookie set) or 206 Partial Content (2FA required)
    """

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class TwoFactorRequiredResponse(BaseModel):
    """Response schema for a login that needs the second factor (206)."""

    message: str = Field(default="2FA required")
    login_attempt_id: str = Field(..., alias="loginAttemptId")

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Two-factor verification
# =============================================================================


class VerifyTwoFactorRequest(BaseModel):
    """Request schema for two-factor verification.

    POST /verify-2fa
    Returns: 200 OK (cookie set)
    """

    email: str = Field(..., description="Email address")
    login_attempt_id: str = Field(
        ..., alias="loginAttemptId", description="Identifier from the login step"
    )
    two_fa_code: str = Field(
        ..., alias="2FACode", description="Six-digit code from the email"
    )

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Token verification
# =============================================================================


class VerifyTokenRequest(BaseModel):
    """Request schema for token verification.

    POST /verify-token
    Returns: 200 OK
    """

    token: str = Field(..., description="Serialized bearer token")


class VerifyTokenResponse(BaseModel):
    """Response schema for a valid token."""

    subject: str = Field(..., description="Email the token was issued for")
