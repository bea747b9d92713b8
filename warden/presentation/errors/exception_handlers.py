"""Global exception handlers for the FastAPI application.

Handlers:
    validation_exception_handler: RequestValidationError -> 422 ProblemDetails
    generic_exception_handler: Unhandled exceptions -> 500 ProblemDetails

Exports:
    register_exception_handlers: Register all exception handlers with an app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from warden.presentation.errors.problem_details import ErrorDetail, ProblemDetails


def _base_url(request: Request) -> str:
    return request.app.state.container.settings.api_base_url


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError (malformed body) to a 422 response.

    Field values are not echoed back, since the body may contain passwords
    or one-time codes.
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p != "body"]
        field_name = ".".join(field_parts) if field_parts else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{_base_url(request)}/errors/validation-failed",
        title="Validation Failed",
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors or None,
        trace_id=getattr(request.state, "trace_id", None),
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert any unhandled exception to a 500 response without internals."""
    trace_id = getattr(request.state, "trace_id", None)
    request.app.state.container.logger.error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
        trace_id=trace_id,
    )

    problem = ProblemDetails(
        type=f"{_base_url(request)}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred.",
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
