"""Error response builder for RFC 7807 Problem Details.

Converts a SessionError into a JSON response with the matching HTTP status.
Only the user-safe message and field details are rendered; the wrapped
lower-level error is never exposed.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from warden.application.errors import SessionError
from warden.core.enums import ErrorCode
from warden.core.errors import ValidationError
from warden.presentation.errors.problem_details import ErrorDetail, ProblemDetails

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INCORRECT_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.USER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.TOKEN_MISSING: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNEXPECTED_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TITLE_BY_CODE: dict[ErrorCode, str] = {
    ErrorCode.INVALID_CREDENTIALS: "Invalid Credentials",
    ErrorCode.INCORRECT_CREDENTIALS: "Incorrect Credentials",
    ErrorCode.USER_ALREADY_EXISTS: "User Already Exists",
    ErrorCode.TOKEN_MISSING: "Missing Token",
    ErrorCode.TOKEN_INVALID: "Invalid Token",
    ErrorCode.UNEXPECTED_ERROR: "Internal Server Error",
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_session_error(
        ...     error=SessionError.incorrect_credentials(),
        ...     request=request,
        ... )
        >>> response.status_code
        401
    """

    @staticmethod
    def from_session_error(error: SessionError, request: Request) -> JSONResponse:
        """Convert SessionError to an RFC 7807 JSON response.

        Args:
            error: Session error returned by a handler.
            request: FastAPI Request object (for instance URL and settings).

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)
        base_url = request.app.state.container.settings.api_base_url

        problem = ProblemDetails(
            type=f"{base_url}/errors/{error.code.value}",
            title=_TITLE_BY_CODE.get(error.code, "Internal Server Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=getattr(request.state, "trace_id", None),
        )

        # Field-level detail only for input errors; never for credential checks.
        if error.code == ErrorCode.INVALID_CREDENTIALS and isinstance(
            error.domain_error, ValidationError
        ):
            problem.errors = [
                ErrorDetail(
                    field=error.domain_error.field or "unknown",
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map a session error kind to its HTTP status (500 if unmapped)."""
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
