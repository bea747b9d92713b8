"""TwoFACodeStore protocol (port) for pending two-factor challenges.

At most one challenge exists per email. Adding a challenge overwrites any
previous one, so only the latest login attempt can be completed. Entries
expire on their own after a fixed TTL.
"""

from typing import Protocol

from warden.core.result import Result
from warden.domain.errors import TwoFACodeStoreError
from warden.domain.value_objects import Email, LoginAttemptId, TwoFACode


class TwoFACodeStore(Protocol):
    """Pending two-factor challenge store keyed by email."""

    async def add_code(
        self, email: Email, login_attempt_id: LoginAttemptId, code: TwoFACode
    ) -> Result[None, TwoFACodeStoreError]:
        """Store (or replace) the challenge for ``email``."""
        ...

    async def get_code(
        self, email: Email
    ) -> Result[tuple[LoginAttemptId, TwoFACode], TwoFACodeStoreError]:
        """Return the live challenge, or TWO_FA_CODE_NOT_FOUND."""
        ...

    async def remove_code(self, email: Email) -> Result[None, TwoFACodeStoreError]:
        """Remove the challenge. Removing an absent entry succeeds."""
        ...

    async def consume_code(
        self, email: Email, login_attempt_id: LoginAttemptId, code: TwoFACode
    ) -> Result[bool, TwoFACodeStoreError]:
        """Remove the challenge only if both attempt id and code match.

        Compare and removal are one atomic step, so a challenge is consumed
        at most once even under concurrent verification.

        Returns:
            Success(True) if this call removed the challenge.
            Success(False) on mismatch (the challenge is kept).
            Failure(TWO_FA_CODE_NOT_FOUND) if no live challenge exists.
        """
        ...
