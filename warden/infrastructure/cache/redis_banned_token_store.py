"""Redis implementation of the BannedTokenStore protocol.

A revoked token is a key ``banned_token:{token}`` with value ``true``,
written with ``SET ... EX`` so the entry disappears once the token itself
could no longer be valid.
"""

from redis.asyncio import Redis
from redis.exceptions import RedisError

from warden.core.enums import ErrorCode
from warden.core.result import Failure, Result, Success
from warden.domain.errors import BannedTokenStoreError
from warden.infrastructure.cache.cache_keys import banned_token_key
from warden.infrastructure.enums import InfrastructureErrorCode
from warden.infrastructure.errors import CacheError


class RedisBannedTokenStore:
    """Redis-backed revocation list.

    Args:
        redis_client: Async Redis client instance.
        ttl_seconds: Lifetime of a revocation entry.
        min_ttl_seconds: Token lifetime the entries must cover.

    Raises:
        ValueError: If ttl_seconds < min_ttl_seconds.
    """

    def __init__(
        self, redis_client: Redis, ttl_seconds: int = 600, min_ttl_seconds: int = 0
    ) -> None:
        if ttl_seconds < min_ttl_seconds:
            msg = "Banned token TTL must be at least the token TTL"
            raise ValueError(msg)
        self._redis = redis_client
        self._ttl_seconds = ttl_seconds

    async def ban_token(self, token: str) -> Result[None, BannedTokenStoreError]:
        try:
            await self._redis.set(
                banned_token_key(token), "true", ex=self._ttl_seconds
            )
        except RedisError as e:
            return Failure(
                error=BannedTokenStoreError.unexpected(
                    cause=CacheError(
                        code=ErrorCode.UNEXPECTED_ERROR,
                        infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
                        message="Failed to store banned token",
                        details={"error": str(e)},
                    )
                )
            )
        return Success(value=None)

    async def is_banned(self, token: str) -> Result[bool, BannedTokenStoreError]:
        try:
            exists_count = await self._redis.exists(banned_token_key(token))
        except RedisError as e:
            return Failure(
                error=BannedTokenStoreError.unexpected(
                    cause=CacheError(
                        code=ErrorCode.UNEXPECTED_ERROR,
                        infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
                        message="Failed to check banned token",
                        details={"error": str(e)},
                    )
                )
            )
        return Success(value=exists_count > 0)
