"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and identify the
KIND of a failure. Error dataclasses carry one of these codes; every
propagation boundary matches on the code it needs and coarsens the rest.

Categories:
- Validation errors (INVALID_*, PASSWORD_TOO_WEAK)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (*_CREDENTIALS)
- Token errors (TOKEN_*)
- Infrastructure failures (UNEXPECTED_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_WEAK = "password_too_weak"
    INVALID_LOGIN_ATTEMPT_ID = "invalid_login_attempt_id"
    INVALID_TWO_FA_CODE = "invalid_two_fa_code"
    INVALID_TOKEN_FORMAT = "invalid_token_format"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    TWO_FA_CODE_NOT_FOUND = "two_fa_code_not_found"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    INCORRECT_CREDENTIALS = "incorrect_credentials"

    # Token errors
    TOKEN_MISSING = "token_missing"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_BAD_SIGNATURE = "token_bad_signature"
    TOKEN_MALFORMED = "token_malformed"
    TOKEN_REVOKED = "token_revoked"

    # Infrastructure failures (store, hashing, transport)
    UNEXPECTED_ERROR = "unexpected_error"
