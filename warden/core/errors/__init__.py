"""Core errors package.

Usage:
    from warden.core.errors import DomainError, ValidationError, UnexpectedError
"""

from warden.core.errors.common_errors import UnexpectedError, ValidationError
from warden.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "UnexpectedError",
]
