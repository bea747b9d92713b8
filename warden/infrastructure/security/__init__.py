"""Security adapters (password hashing, tokens)."""

from warden.infrastructure.security.argon2_password_service import (
    Argon2PasswordService,
)
from warden.infrastructure.security.jwt_service import JWTService

__all__ = ["Argon2PasswordService", "JWTService"]
