"""Password hashing protocol for domain layer.

This protocol defines the interface for password hashing and verification.
Infrastructure layer provides the concrete implementation (argon2id).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (Argon2PasswordService)
    - No framework dependencies in domain
"""

from typing import Protocol

from warden.core.errors import UnexpectedError
from warden.core.result import Result


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Both operations are memory-hard and slow by design of the algorithm, so
    implementations run them off the event loop.

    Usage:
        def __init__(self, password_service: PasswordHashingProtocol):
            self.password_service = password_service

        result = await self.password_service.hash_password("Passw0rd!")
        ok = await self.password_service.verify_password("Passw0rd!", stored_hash)
    """

    async def hash_password(self, password: str) -> Result[str, UnexpectedError]:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Success(PHC-format hash string) or Failure(UnexpectedError).

        Note:
            Same password produces different hashes (random salt).
        """
        ...

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash.

        Args:
            password: Candidate plaintext password.
            password_hash: Stored PHC-format hash.

        Returns:
            True if password matches hash, False otherwise. Never raises:
            malformed hashes and verification failures both yield False.
        """
        ...
