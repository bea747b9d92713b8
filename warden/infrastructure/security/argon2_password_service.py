"""Argon2id password hashing service (adapter).

This service implements the PasswordHashingProtocol using argon2-cffi.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - Argon2id, memory cost 15000 KiB, 2 iterations, parallelism 1
    - Fresh random salt per hash, PHC string output
    - verify never raises: any failure means "does not match"

Performance:
    - Hashing is deliberately expensive, so both operations run on a bounded
      thread pool and never block the event loop. argon2-cffi releases the
      GIL while hashing.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor

from argon2 import PasswordHasher, Type
from argon2.exceptions import HashingError, InvalidHash, VerificationError

from warden.core.enums import ErrorCode
from warden.core.errors import UnexpectedError
from warden.core.result import Failure, Result, Success
from warden.infrastructure.enums import InfrastructureErrorCode
from warden.infrastructure.errors import InfrastructureError


class Argon2PasswordService:
    """Argon2id password hashing service.

    Usage:
        password_service = Argon2PasswordService(memory_cost=15000, time_cost=2)
        result = await password_service.hash_password("Passw0rd!")
        is_valid = await password_service.verify_password("Passw0rd!", stored)
    """

    def __init__(
        self,
        *,
        memory_cost: int = 15000,
        time_cost: int = 2,
        parallelism: int = 1,
        max_workers: int = 4,
    ) -> None:
        """Initialize argon2id password service.

        Args:
            memory_cost: Memory cost in KiB.
            time_cost: Number of iterations.
            parallelism: Degree of parallelism.
            max_workers: Size of the hashing thread pool.

        Raises:
            ValueError: If max_workers is not positive.
        """
        if max_workers < 1:
            msg = "max_workers must be at least 1"
            raise ValueError(msg)

        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            type=Type.ID,
        )
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="argon2"
        )

    async def hash_password(self, password: str) -> Result[str, UnexpectedError]:
        """Hash a plaintext password on the worker pool.

        Args:
            password: Plaintext password to hash.

        Returns:
            Success(PHC string like "$argon2id$v=19$m=15000,t=2,p=1$...") or
            Failure(UnexpectedError) if the hashing backend fails.
        """
        loop = asyncio.get_running_loop()
        try:
            password_hash = await loop.run_in_executor(
                self._executor, self._hasher.hash, password
            )
        except HashingError as e:
            return Failure(
                error=UnexpectedError(
                    code=ErrorCode.UNEXPECTED_ERROR,
                    message="Failed to hash password",
                    cause=InfrastructureError(
                        code=ErrorCode.UNEXPECTED_ERROR,
                        message=str(e),
                        infrastructure_code=InfrastructureErrorCode.HASHING_ERROR,
                    ),
                )
            )
        return Success(value=password_hash)

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against an argon2 hash.

        Args:
            password: Candidate plaintext password.
            password_hash: Stored PHC string.

        Returns:
            True if password matches hash, False otherwise (including for
            malformed hashes).
        """
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(
                self._executor, self._hasher.verify, password_hash, password
            )
        except (VerificationError, InvalidHash, ValueError, TypeError):
            return False

    def shutdown(self) -> None:
        """Stop the worker pool (application shutdown)."""
        self._executor.shutdown(wait=False)
