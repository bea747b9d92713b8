"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for typed error variants
- Settings and composition root

The core module has NO dependencies on the domain, application or presentation layers
(the container is the single exception, being the composition root).
"""

from warden.core.enums import ErrorCode
from warden.core.errors import DomainError, UnexpectedError, ValidationError
from warden.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "UnexpectedError",
    "ValidationError",
]
