"""In-memory user store (development and tests).

A dict keyed by normalized email, guarded by one asyncio.Lock so that
concurrent signups for the same email serialize and only one wins.
"""

import asyncio

from warden.core.result import Failure, Result, Success
from warden.domain.entities import NewUser, User
from warden.domain.errors import UserStoreError
from warden.domain.protocols import PasswordHashingProtocol
from warden.domain.value_objects import Email, Password


class InMemoryUserStore:
    """Process-local UserStore implementation."""

    def __init__(self, password_service: PasswordHashingProtocol) -> None:
        self._password_service = password_service
        self._users: dict[Email, User] = {}
        self._lock = asyncio.Lock()

    async def add_user(self, user: NewUser) -> Result[None, UserStoreError]:
        async with self._lock:
            if user.email in self._users:
                return Failure(error=UserStoreError.already_exists())

        # Hash outside the lock; the membership check is repeated on insert.
        match await self._password_service.hash_password(user.password.value):
            case Failure(error=error):
                return Failure(error=UserStoreError.unexpected(cause=error))
            case Success(value=password_hash):
                pass

        async with self._lock:
            if user.email in self._users:
                return Failure(error=UserStoreError.already_exists())
            self._users[user.email] = User(
                email=user.email,
                password_hash=password_hash,
                requires_2fa=user.requires_2fa,
            )
        return Success(value=None)

    async def get_user(self, email: Email) -> Result[User, UserStoreError]:
        async with self._lock:
            user = self._users.get(email)
        if user is None:
            return Failure(error=UserStoreError.not_found())
        return Success(value=user)

    async def validate_user(
        self, email: Email, password: Password
    ) -> Result[None, UserStoreError]:
        async with self._lock:
            user = self._users.get(email)
        if user is None:
            return Failure(error=UserStoreError.not_found())

        if not await self._password_service.verify_password(
            password.value, user.password_hash
        ):
            return Failure(error=UserStoreError.invalid_credentials())
        return Success(value=None)
