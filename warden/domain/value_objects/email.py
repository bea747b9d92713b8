"""Email value object with validation.

Immutable value object that validates email format and normalizes the address.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from warden.core.enums import ErrorCode
from warden.core.errors import ValidationError
from warden.core.result import Failure, Result, Success


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses email-validator for RFC-shaped syntax checks (no deliverability
    lookup). The stored value is the normalized, lowercased address, so
    equality and hashing are case-insensitive.

    Attributes:
        value: The email address string (validated, normalized).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> Email("User@Example.COM").value
        'user@example.com'
        >>> Email("invalid")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email: ...
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the address.

        Raises:
            ValueError: If email is empty, lacks a single '@' or fails syntax checks.
        """
        if not self.value or not self.value.strip():
            raise ValueError("Invalid email: address is empty")
        if self.value.count("@") != 1:
            raise ValueError("Invalid email: address must contain a single '@'")
        try:
            validated = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "value", validated.normalized.lower())

    @classmethod
    def parse(cls, raw: str) -> Result["Email", ValidationError]:
        """Parse a raw string into an Email.

        Args:
            raw: Candidate email address.

        Returns:
            Success(Email) or Failure(ValidationError) with code INVALID_EMAIL.
        """
        try:
            return Success(value=cls(raw))
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL,
                    message=str(e),
                    field="email",
                )
            )

    def __str__(self) -> str:
        """Return email address as string."""
        return self.value

    def __repr__(self) -> str:
        """Return repr for debugging."""
        return f"Email('{self.value}')"
