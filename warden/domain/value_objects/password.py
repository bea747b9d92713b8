"""Password value object with policy validation.

Immutable value object holding a plaintext password that satisfied the
password policy. Never logged or displayed.
"""

from dataclasses import dataclass

from warden.core.result import Failure, Result, Success
from warden.domain.errors.password_policy_error import (
    PasswordPolicyError,
    PasswordRule,
)

MIN_PASSWORD_LENGTH = 8


def check_password_policy(value: str) -> PasswordRule | None:
    """Return the first policy rule ``value`` violates, or None.

    Rules are checked in a fixed order:
        - At least 8 characters
        - At least one uppercase letter
        - At least one lowercase letter
        - At least one digit
        - At least one non-alphanumeric character
    """
    if len(value) < MIN_PASSWORD_LENGTH:
        return PasswordRule.MIN_LENGTH
    if not any(c.isupper() for c in value):
        return PasswordRule.UPPERCASE
    if not any(c.islower() for c in value):
        return PasswordRule.LOWERCASE
    if not any(c.isdigit() for c in value):
        return PasswordRule.DIGIT
    if all(c.isalnum() for c in value):
        return PasswordRule.SPECIAL_CHARACTER
    return None


@dataclass(frozen=True)
class Password:
    """Password value object with policy validation.

    Attributes:
        value: The password string (validated).

    Raises:
        ValueError: If password does not meet the policy.

    Example:
        >>> str(Password("SecurePass123!"))
        '**************'
        >>> Password("weak")
        Traceback (most recent call last):
        ...
        ValueError: Password must be at least 8 characters long.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate password policy after initialization.

        Raises:
            ValueError: If any rule is violated.
        """
        rule = check_password_policy(self.value)
        if rule is not None:
            raise ValueError(rule.message)

    @classmethod
    def parse(cls, raw: str) -> Result["Password", PasswordPolicyError]:
        """Parse a raw string into a Password.

        Returns:
            Success(Password) or Failure(PasswordPolicyError) naming the
            violated rule.
        """
        rule = check_password_policy(raw)
        if rule is not None:
            return Failure(error=PasswordPolicyError.for_rule(rule))
        return Success(value=cls(raw))

    def __str__(self) -> str:
        """Return masked password for security."""
        return "*" * len(self.value)

    def __repr__(self) -> str:
        """Return repr for debugging (masked)."""
        return f"Password('{'*' * len(self.value)}')"
