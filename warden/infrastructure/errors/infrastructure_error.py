"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (database,
cache, mail provider, hashing backend).

Architecture:
- Adapters catch library exceptions and map them to these errors
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode is for internal tracking; the domain code is
  UNEXPECTED_ERROR
- Stores wrap them in their own error variant as the cause
"""

from dataclasses import dataclass

from warden.core.errors import DomainError
from warden.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        infrastructure_code: Original infrastructure error code.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(InfrastructureError):
    """Wraps SQLAlchemy exceptions (details carry the original error)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Wraps Redis exceptions (details carry key and original error)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalServiceError(InfrastructureError):
    """External service integration errors (mail provider).

    Attributes:
        service_name: Name of the external service.
    """

    service_name: str
