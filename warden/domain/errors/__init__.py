"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from warden.domain.errors import UserStoreError, TokenError
"""

from warden.domain.errors.banned_token_store_error import BannedTokenStoreError
from warden.domain.errors.password_policy_error import (
    PasswordPolicyError,
    PasswordRule,
)
from warden.domain.errors.token_error import TokenError
from warden.domain.errors.two_fa_code_store_error import TwoFACodeStoreError
from warden.domain.errors.user_store_error import UserStoreError

__all__ = [
    "BannedTokenStoreError",
    "PasswordPolicyError",
    "PasswordRule",
    "TokenError",
    "TwoFACodeStoreError",
    "UserStoreError",
]
