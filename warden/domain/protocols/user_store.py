"""UserStore protocol (port) for principal persistence.

Implementations:
    - InMemoryUserStore: dict guarded by an asyncio.Lock (dev/tests)
    - PostgresUserStore: SQLAlchemy async with a unique email constraint
"""

from typing import Protocol

from warden.core.result import Result
from warden.domain.entities import NewUser, User
from warden.domain.errors import UserStoreError
from warden.domain.value_objects import Email, Password


class UserStore(Protocol):
    """Principal store keyed by normalized email.

    Implementations hash the password before persisting it. Plaintext
    passwords never reach the backend.
    """

    async def add_user(self, user: NewUser) -> Result[None, UserStoreError]:
        """Register a new principal.

        Returns:
            Success(None), or Failure with USER_ALREADY_EXISTS when the email
            is taken, or UNEXPECTED_ERROR on hashing/persistence failure.
        """
        ...

    async def get_user(self, email: Email) -> Result[User, UserStoreError]:
        """Fetch a principal by email.

        Returns:
            Success(User) or Failure with USER_NOT_FOUND / UNEXPECTED_ERROR.
        """
        ...

    async def validate_user(
        self, email: Email, password: Password
    ) -> Result[None, UserStoreError]:
        """Check a password against the stored hash.

        Returns:
            Success(None) or Failure with USER_NOT_FOUND, INVALID_CREDENTIALS
            or UNEXPECTED_ERROR.
        """
        ...
