"""Redis implementation of the TwoFACodeStore protocol.

Each challenge is one key holding the JSON array ``[login_attempt_id, code]``
written with ``SET ... EX`` so Redis expires it. A newer login for the same
email overwrites the key. Verification consumes the key with a server-side
script, so compare and delete happen as one step.

Architecture:
- Implements TwoFACodeStore without inheritance (structural typing)
- Maps Redis exceptions to CacheError, wrapped as UNEXPECTED_ERROR
"""

import json

from redis.asyncio import Redis
from redis.exceptions import RedisError

from warden.core.enums import ErrorCode
from warden.core.result import Failure, Result, Success
from warden.domain.errors import TwoFACodeStoreError
from warden.domain.value_objects import Email, LoginAttemptId, TwoFACode
from warden.infrastructure.cache.cache_keys import two_fa_code_key
from warden.infrastructure.enums import InfrastructureErrorCode
from warden.infrastructure.errors import CacheError

# KEYS[1] challenge key; ARGV[1] attempt id; ARGV[2] code.
# Returns -1 when absent, 0 on mismatch, 1 when deleted.
_CONSUME_SCRIPT = """
local raw = redis.call('GET', KEYS[1])
if not raw then
  return -1
end
local entry = cjson.decode(raw)
if entry[1] == ARGV[1] and entry[2] == ARGV[2] then
  redis.call('DEL', KEYS[1])
  return 1
end
return 0
"""


class RedisTwoFACodeStore:
    """Redis-backed two-factor challenge store.

    Attributes:
        _redis: Async Redis client instance.
        _ttl_seconds: Challenge lifetime.
    """

    def __init__(self, redis_client: Redis, ttl_seconds: int = 600) -> None:
        self._redis = redis_client
        self._ttl_seconds = ttl_seconds

    async def add_code(
        self, email: Email, login_attempt_id: LoginAttemptId, code: TwoFACode
    ) -> Result[None, TwoFACodeStoreError]:
        key = two_fa_code_key(email.value)
        payload = json.dumps([login_attempt_id.value, code.value])
        try:
            await self._redis.set(key, payload, ex=self._ttl_seconds)
        except RedisError as e:
            return Failure(
                error=TwoFACodeStoreError.unexpected(
                    cause=self._cache_error(
                        key, e, InfrastructureErrorCode.CACHE_SET_ERROR
                    )
                )
            )
        return Success(value=None)

    async def get_code(
        self, email: Email
    ) -> Result[tuple[LoginAttemptId, TwoFACode], TwoFACodeStoreError]:
        key = two_fa_code_key(email.value)
        try:
            raw = await self._redis.get(key)
        except RedisError as e:
            return Failure(
                error=TwoFACodeStoreError.unexpected(
                    cause=self._cache_error(
                        key, e, InfrastructureErrorCode.CACHE_GET_ERROR
                    )
                )
            )

        if raw is None:
            return Failure(error=TwoFACodeStoreError.not_found())

        decoded = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        try:
            attempt_id, code = json.loads(decoded)
            return Success(value=(LoginAttemptId(attempt_id), TwoFACode(code)))
        except (ValueError, TypeError) as e:
            return Failure(
                error=TwoFACodeStoreError.unexpected(
                    cause=self._cache_error(
                        key, e, InfrastructureErrorCode.CACHE_DECODE_ERROR
                    )
                )
            )

    async def remove_code(self, email: Email) -> Result[None, TwoFACodeStoreError]:
        key = two_fa_code_key(email.value)
        try:
            await self._redis.delete(key)
        except RedisError as e:
            return Failure(
                error=TwoFACodeStoreError.unexpected(
                    cause=self._cache_error(
                        key, e, InfrastructureErrorCode.CACHE_DELETE_ERROR
                    )
                )
            )
        return Success(value=None)

    async def consume_code(
        self, email: Email, login_attempt_id: LoginAttemptId, code: TwoFACode
    ) -> Result[bool, TwoFACodeStoreError]:
        """Compare and delete server-side in one script.

        Redis runs scripts atomically, so two concurrent verifications of the
        same challenge cannot both observe a match.
        """
        key = two_fa_code_key(email.value)
        try:
            outcome = await self._redis.eval(
                _CONSUME_SCRIPT, 1, key, login_attempt_id.value, code.value
            )
        except RedisError as e:
            return Failure(
                error=TwoFACodeStoreError.unexpected(
                    cause=self._cache_error(
                        key, e, InfrastructureErrorCode.CACHE_DELETE_ERROR
                    )
                )
            )

        match int(outcome):
            case 1:
                return Success(value=True)
            case 0:
                return Success(value=False)
            case _:
                return Failure(error=TwoFACodeStoreError.not_found())

    @staticmethod
    def _cache_error(
        key: str, e: Exception, infrastructure_code: InfrastructureErrorCode
    ) -> CacheError:
        # Key contains the email; keep it out of the message.
        return CacheError(
            code=ErrorCode.UNEXPECTED_ERROR,
            infrastructure_code=infrastructure_code,
            message="Two-factor code store operation failed",
            details={"key": key, "error": str(e), "type": type(e).__name__},
        )
