"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for ALL Warden errors. Errors are tagged
variants: a kind (ErrorCode) plus a message and optional context. They flow
through the system as data inside Failure, they are never raised.

Architecture:
- Base class for all error types (core, domain, application, infrastructure)
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)

Usage:
    from warden.core.errors import DomainError
    from warden.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from warden.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error kind.
        message: Human-readable error message. Never contains secrets.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
