"""Infrastructure-specific error codes.

Internal codes for tracking backend failures. The domain-facing ErrorCode of
an infrastructure error is always UNEXPECTED_ERROR.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Database errors
    DATABASE_ERROR = "database_error"

    # Cache errors
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
    CACHE_DECODE_ERROR = "cache_decode_error"

    # Password hashing
    HASHING_ERROR = "hashing_error"

    # External service errors
    EXTERNAL_SERVICE_UNAVAILABLE = "external_service_unavailable"
    EXTERNAL_SERVICE_TIMEOUT = "external_service_timeout"
    EXTERNAL_SERVICE_ERROR = "external_service_error"
