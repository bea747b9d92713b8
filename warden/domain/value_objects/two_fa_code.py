"""One-time two-factor code value object."""

import secrets
from dataclasses import dataclass

from warden.core.enums import ErrorCode
from warden.core.errors import ValidationError
from warden.core.result import Failure, Result, Success

CODE_LENGTH = 6
_LOWEST_CODE = 100_000
_HIGHEST_CODE = 999_999


@dataclass(frozen=True)
class TwoFACode:
    """Six-digit one-time code delivered out of band.

    Generated codes are uniformly random over 100000-999999. Parsing accepts
    any string of exactly six ASCII digits.

    Attributes:
        value: The six-digit code.

    Raises:
        ValueError: If value is not exactly six ASCII digits.
    """

    value: str

    def __post_init__(self) -> None:
        if (
            not isinstance(self.value, str)
            or len(self.value) != CODE_LENGTH
            or not self.value.isascii()
            or not self.value.isdigit()
        ):
            raise ValueError("2FA code must be exactly 6 digits")

    @classmethod
    def generate(cls) -> "TwoFACode":
        """Create a new random code using the system CSPRNG."""
        number = _LOWEST_CODE + secrets.randbelow(_HIGHEST_CODE - _LOWEST_CODE + 1)
        return cls(str(number))

    @classmethod
    def parse(cls, raw: str) -> Result["TwoFACode", ValidationError]:
        """Parse a raw string into a TwoFACode."""
        try:
            return Success(value=cls(raw))
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_TWO_FA_CODE,
                    message=str(e),
                    field="2FACode",
                )
            )

    def __str__(self) -> str:
        """Return masked code, codes are never echoed."""
        return "*" * CODE_LENGTH

    def __repr__(self) -> str:
        return "TwoFACode('******')"
