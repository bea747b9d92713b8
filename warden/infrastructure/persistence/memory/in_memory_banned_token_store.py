"""In-memory banned token store (development and tests).

Maps each revoked token to the moment its entry expires. Expired entries are
dropped on lookup and swept whenever a new token is banned.
"""

import asyncio
from datetime import UTC, datetime, timedelta

from warden.core.result import Result, Success
from warden.domain.errors import BannedTokenStoreError


class InMemoryBannedTokenStore:
    """Process-local BannedTokenStore implementation.

    Args:
        ttl_seconds: Lifetime of a revocation entry.
        min_ttl_seconds: Token lifetime the entries must cover.

    Raises:
        ValueError: If ttl_seconds < min_ttl_seconds.
    """

    def __init__(self, ttl_seconds: int = 600, min_ttl_seconds: int = 0) -> None:
        if ttl_seconds < min_ttl_seconds:
            msg = "Banned token TTL must be at least the token TTL"
            raise ValueError(msg)
        self._ttl = timedelta(seconds=ttl_seconds)
        self._tokens: dict[str, datetime] = {}
        self._lock = asyncio.Lock()

    async def ban_token(self, token: str) -> Result[None, BannedTokenStoreError]:
        now = datetime.now(UTC)
        async with self._lock:
            expired = [t for t, expires_at in self._tokens.items() if expires_at <= now]
            for stale in expired:
                del self._tokens[stale]
            self._tokens[token] = now + self._ttl
        return Success(value=None)

    async def is_banned(self, token: str) -> Result[bool, BannedTokenStoreError]:
        async with self._lock:
            expires_at = self._tokens.get(token)
            if expires_at is None:
                return Success(value=False)
            if expires_at <= datetime.now(UTC):
                del self._tokens[token]
                return Success(value=False)
        return Success(value=True)

    def __len__(self) -> int:
        return len(self._tokens)
