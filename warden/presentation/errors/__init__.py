"""RFC 7807 error rendering."""

from warden.presentation.errors.error_response_builder import ErrorResponseBuilder
from warden.presentation.errors.exception_handlers import register_exception_handlers
from warden.presentation.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
