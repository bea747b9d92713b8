"""Login attempt identifier value object."""

from dataclasses import dataclass
from uuid import UUID, uuid4

from warden.core.enums import ErrorCode
from warden.core.errors import ValidationError
from warden.core.result import Failure, Result, Success


@dataclass(frozen=True)
class LoginAttemptId:
    """Identifier of one pending two-factor challenge.

    A fresh random (uuid4, 128-bit) identifier is generated for every login
    that triggers the second factor. The canonical textual form is stored.

    Attributes:
        value: Canonical UUID string.

    Raises:
        ValueError: If value is not a valid UUID.
    """

    value: str

    def __post_init__(self) -> None:
        try:
            canonical = str(UUID(self.value))
        except (ValueError, AttributeError, TypeError) as e:
            raise ValueError("Invalid login attempt ID") from e
        object.__setattr__(self, "value", canonical)

    @classmethod
    def generate(cls) -> "LoginAttemptId":
        """Create a new random identifier."""
        return cls(str(uuid4()))

    @classmethod
    def parse(cls, raw: str) -> Result["LoginAttemptId", ValidationError]:
        """Parse a raw string into a LoginAttemptId."""
        try:
            return Success(value=cls(raw))
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_LOGIN_ATTEMPT_ID,
                    message=str(e),
                    field="loginAttemptId",
                )
            )

    def __str__(self) -> str:
        return self.value
