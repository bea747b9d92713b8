"""Redis key construction for the session stores.

Patterns:
    two_fa_code:{email}
    banned_token:{token}
"""

TWO_FA_CODE_PREFIX = "two_fa_code:"
BANNED_TOKEN_PREFIX = "banned_token:"


def two_fa_code_key(email: str) -> str:
    """Pending two-factor challenge key, e.g. ``two_fa_code:user@example.com``."""
    return f"{TWO_FA_CODE_PREFIX}{email}"


def banned_token_key(token: str) -> str:
    """Revocation entry key."""
    return f"{BANNED_TOKEN_PREFIX}{token}"
