"""In-memory store implementations."""

from warden.infrastructure.persistence.memory.in_memory_banned_token_store import (
    InMemoryBannedTokenStore,
)
from warden.infrastructure.persistence.memory.in_memory_two_fa_code_store import (
    InMemoryTwoFACodeStore,
)
from warden.infrastructure.persistence.memory.in_memory_user_store import (
    InMemoryUserStore,
)

__all__ = [
    "InMemoryBannedTokenStore",
    "InMemoryTwoFACodeStore",
    "InMemoryUserStore",
]
