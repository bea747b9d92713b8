"""Redis-backed store implementations."""

from warden.infrastructure.cache.redis_banned_token_store import (
    RedisBannedTokenStore,
)
from warden.infrastructure.cache.redis_two_fa_code_store import (
    RedisTwoFACodeStore,
)

__all__ = ["RedisBannedTokenStore", "RedisTwoFACodeStore"]
