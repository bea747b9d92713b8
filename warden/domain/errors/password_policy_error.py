"""Password policy violation error.

Reports which password rule a candidate password broke, so signup can tell
the user exactly what to fix.

Usage:
    from warden.domain.errors import PasswordPolicyError, PasswordRule

    return Failure(error=PasswordPolicyError.for_rule(PasswordRule.DIGIT))
"""

from dataclasses import dataclass
from enum import Enum

from warden.core.enums import ErrorCode
from warden.core.errors import ValidationError


class PasswordRule(Enum):
    """Password policy rules, in the order they are checked."""

    MIN_LENGTH = "min_length"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL_CHARACTER = "special_character"

    @property
    def message(self) -> str:
        """User-facing description of the violated rule."""
        return _RULE_MESSAGES[self]


_RULE_MESSAGES = {
    PasswordRule.MIN_LENGTH: "Password must be at least 8 characters long.",
    PasswordRule.UPPERCASE: "Password must contain at least one uppercase letter.",
    PasswordRule.LOWERCASE: "Password must contain at least one lowercase letter.",
    PasswordRule.DIGIT: "Password must contain at least one digit.",
    PasswordRule.SPECIAL_CHARACTER: (
        "Password must contain at least one special character."
    ),
}


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordPolicyError(ValidationError):
    """Password failed the policy.

    Attributes:
        rule: The first rule the password violated.
    """

    rule: PasswordRule

    @classmethod
    def for_rule(cls, rule: PasswordRule) -> "PasswordPolicyError":
        """Build the error for a violated rule."""
        return cls(
            code=ErrorCode.PASSWORD_TOO_WEAK,
            message=rule.message,
            field="password",
            rule=rule,
        )
