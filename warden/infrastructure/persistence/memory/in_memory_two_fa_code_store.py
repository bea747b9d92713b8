"""In-memory two-factor code store (development and tests).

Each entry records its own expiry. Expired entries are treated as absent,
dropped when read, and swept whenever a new challenge is added.
"""

import asyncio
import hmac
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from warden.core.result import Failure, Result, Success
from warden.domain.errors import TwoFACodeStoreError
from warden.domain.value_objects import Email, LoginAttemptId, TwoFACode


@dataclass(frozen=True)
class _Entry:
    login_attempt_id: LoginAttemptId
    code: TwoFACode
    expires_at: datetime

    def matches(self, login_attempt_id: LoginAttemptId, code: TwoFACode) -> bool:
        attempt_matches = hmac.compare_digest(
            self.login_attempt_id.value.encode(), login_attempt_id.value.encode()
        )
        code_matches = hmac.compare_digest(
            self.code.value.encode(), code.value.encode()
        )
        return attempt_matches and code_matches


class InMemoryTwoFACodeStore:
    """Process-local TwoFACodeStore implementation.

    Args:
        ttl_seconds: Lifetime of a challenge (default 600).
    """

    def __init__(self, ttl_seconds: int = 600) -> None:
        if ttl_seconds <= 0:
            msg = "ttl_seconds must be positive"
            raise ValueError(msg)
        self._ttl = timedelta(seconds=ttl_seconds)
        self._entries: dict[Email, _Entry] = {}
        self._lock = asyncio.Lock()

    async def add_code(
        self, email: Email, login_attempt_id: LoginAttemptId, code: TwoFACode
    ) -> Result[None, TwoFACodeStoreError]:
        now = datetime.now(UTC)
        async with self._lock:
            self._purge_expired(now)
            self._entries[email] = _Entry(
                login_attempt_id=login_attempt_id,
                code=code,
                expires_at=now + self._ttl,
            )
        return Success(value=None)

    async def get_code(
        self, email: Email
    ) -> Result[tuple[LoginAttemptId, TwoFACode], TwoFACodeStoreError]:
        async with self._lock:
            entry = self._live_entry(email)
        if entry is None:
            return Failure(error=TwoFACodeStoreError.not_found())
        return Success(value=(entry.login_attempt_id, entry.code))

    async def remove_code(self, email: Email) -> Result[None, TwoFACodeStoreError]:
        async with self._lock:
            self._entries.pop(email, None)
        return Success(value=None)

    async def consume_code(
        self, email: Email, login_attempt_id: LoginAttemptId, code: TwoFACode
    ) -> Result[bool, TwoFACodeStoreError]:
        async with self._lock:
            entry = self._live_entry(email)
            if entry is None:
                return Failure(error=TwoFACodeStoreError.not_found())
            if not entry.matches(login_attempt_id, code):
                return Success(value=False)
            del self._entries[email]
        return Success(value=True)

    def __len__(self) -> int:
        return len(self._entries)

    def _live_entry(self, email: Email) -> _Entry | None:
        # Caller holds the lock.
        entry = self._entries.get(email)
        if entry is not None and entry.expires_at <= datetime.now(UTC):
            del self._entries[email]
            return None
        return entry

    def _purge_expired(self, now: datetime) -> None:
        expired = [k for k, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]
