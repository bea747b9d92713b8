"""Bearer token value object.

The serialized token is opaque to everyone except the token service. This
type only guarantees the string is non-blank.
"""

from dataclasses import dataclass

from warden.core.enums import ErrorCode
from warden.core.errors import ValidationError
from warden.core.result import Failure, Result, Success


@dataclass(frozen=True)
class BearerToken:
    """Serialized signed session credential.

    Attributes:
        value: The token string exactly as issued.

    Raises:
        ValueError: If the token is empty or whitespace.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Token cannot be empty")

    @classmethod
    def parse(cls, raw: str | None) -> Result["BearerToken", ValidationError]:
        """Parse a raw (possibly missing) token string."""
        try:
            return Success(value=cls(raw or ""))
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_TOKEN_FORMAT,
                    message=str(e),
                    field="token",
                )
            )

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "BearerToken('<redacted>')"
