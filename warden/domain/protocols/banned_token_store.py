"""BannedTokenStore protocol (port) for the revocation list.

Entries live at least as long as the longest token lifetime, after which an
entry is redundant because the token itself has expired.
"""

from typing import Protocol

from warden.core.result import Result
from warden.domain.errors import BannedTokenStoreError


class BannedTokenStore(Protocol):
    """Set of revoked serialized tokens with O(1) membership."""

    async def ban_token(self, token: str) -> Result[None, BannedTokenStoreError]:
        """Add ``token`` to the revocation list. Idempotent."""
        ...

    async def is_banned(self, token: str) -> Result[bool, BannedTokenStoreError]:
        """Check whether ``token`` has been revoked."""
        ...
