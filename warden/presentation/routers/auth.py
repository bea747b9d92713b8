"""Session router.

Endpoints:
    POST /signup        - Register a principal (201)
    POST /login         - Authenticate; sets the jwt cookie (200) or asks
                          for the second factor (206)
    POST /verify-2fa    - Complete the second factor; sets the cookie (200)
    POST /logout        - Revoke the cookie credential and clear it (200)
    POST /verify-token  - Check a token for a resource server (200)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from warden.application.commands import (
    Authenticated,
    LoginUser,
    LogoutUser,
    SignupUser,
    TwoFactorPending,
    VerifyToken,
    VerifyTwoFactor,
)
from warden.application.commands.handlers import (
    LoginUserHandler,
    LogoutUserHandler,
    SignupHandler,
    VerifyTokenHandler,
    VerifyTwoFactorHandler,
)
from warden.core.config import Settings
from warden.core.container import (
    get_login_handler,
    get_logout_handler,
    get_signup_handler,
    get_verify_token_handler,
    get_verify_two_factor_handler,
)
from warden.core.result import Failure, Success
from warden.presentation.errors import ErrorResponseBuilder, ProblemDetails
from warden.schemas.auth_schemas import (
    LoginRequest,
    MessageResponse,
    SignupRequest,
    TwoFactorRequiredResponse,
    VerifyTokenRequest,
    VerifyTokenResponse,
    VerifyTwoFactorRequest,
)

router = APIRouter(tags=["Sessions"])


def _settings(request: Request) -> Settings:
    return request.app.state.container.settings


def _authenticated_response(
    request: Request, outcome: Authenticated, message: str
) -> JSONResponse:
    settings = _settings(request)
    response = JSONResponse(
        status_code=status.HTTP_200_OK,
        content=MessageResponse(message=message).model_dump(),
    )
    response.set_cookie(
        key=settings.jwt_cookie_name,
        value=outcome.token,
        max_age=settings.token_ttl_seconds,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return response


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid input", "model": ProblemDetails},
        409: {"description": "User already exists", "model": ProblemDetails},
        422: {"description": "Malformed body", "model": ProblemDetails},
    },
    summary="Sign up",
)
async def signup(
    request: Request,
    data: SignupRequest,
    handler: SignupHandler = Depends(get_signup_handler),
) -> MessageResponse | JSONResponse:
    """Register a principal.

    POST /signup → 201 Created
    """
    result = await handler.handle(
        SignupUser(
            email=data.email,
            password=data.password,
            requires_2fa=data.requires_2fa,
        )
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_session_error(error, request)
        case Success():
            return MessageResponse(message="User created successfully!")


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        206: {"description": "2FA required", "model": TwoFactorRequiredResponse},
        400: {"description": "Invalid input", "model": ProblemDetails},
        401: {"description": "Incorrect credentials", "model": ProblemDetails},
        422: {"description": "Malformed body", "model": ProblemDetails},
    },
    summary="Log in",
)
async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_handler),
) -> JSONResponse:
    """Authenticate with email and password.

    POST /login → 200 OK with jwt cookie, or 206 Partial Content with the
    login attempt id when the account requires a second factor.
    """
    result = await handler.handle(LoginUser(email=data.email, password=data.password))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_session_error(error, request)
        case Success(value=TwoFactorPending(login_attempt_id=login_attempt_id)):
            body = TwoFactorRequiredResponse(login_attempt_id=login_attempt_id.value)
            return JSONResponse(
                status_code=status.HTTP_206_PARTIAL_CONTENT,
                content=body.model_dump(by_alias=True),
            )
        case Success(value=Authenticated() as outcome):
            return _authenticated_response(request, outcome, "Login successful")


@router.post(
    "/verify-2fa",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid input", "model": ProblemDetails},
        401: {"description": "Incorrect credentials", "model": ProblemDetails},
        422: {"description": "Malformed body", "model": ProblemDetails},
    },
    summary="Verify 2FA code",
)
async def verify_two_factor(
    request: Request,
    data: VerifyTwoFactorRequest,
    handler: VerifyTwoFactorHandler = Depends(get_verify_two_factor_handler),
) -> JSONResponse:
    """Complete the second factor.

    POST /verify-2fa → 200 OK with jwt cookie
    """
    result = await handler.handle(
        VerifyTwoFactor(
            email=data.email,
            login_attempt_id=data.login_attempt_id,
            two_fa_code=data.two_fa_code,
        )
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_session_error(error, request)
        case Success(value=outcome):
            return _authenticated_response(request, outcome, "Login successful")


@router.post(
    "/logout",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing token", "model": ProblemDetails},
        401: {"description": "Invalid token", "model": ProblemDetails},
    },
    summary="Log out",
)
async def logout(
    request: Request,
    handler: LogoutUserHandler = Depends(get_logout_handler),
) -> Response:
    """Revoke the cookie credential.

    POST /logout → 200 OK, cookie removed
    """
    settings = _settings(request)
    token = request.cookies.get(settings.jwt_cookie_name)

    match await handler.handle(LogoutUser(token=token)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_session_error(error, request)
        case Success(value=logout_response):
            response = JSONResponse(
                status_code=status.HTTP_200_OK,
                content=MessageResponse(message=logout_response.message).model_dump(),
            )
            response.delete_cookie(
                key=settings.jwt_cookie_name,
                path="/",
                httponly=True,
                samesite="lax",
                secure=settings.is_production,
            )
            return response


@router.post(
    "/verify-token",
    status_code=status.HTTP_200_OK,
    response_model=VerifyTokenResponse,
    responses={
        401: {"description": "Invalid token", "model": ProblemDetails},
        422: {"description": "Malformed body", "model": ProblemDetails},
    },
    summary="Verify token",
)
async def verify_token(
    request: Request,
    data: VerifyTokenRequest,
    handler: VerifyTokenHandler = Depends(get_verify_token_handler),
) -> VerifyTokenResponse | JSONResponse:
    """Check a bearer token on behalf of a resource server.

    POST /verify-token → 200 OK
    """
    match await handler.handle(VerifyToken(token=data.token)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_session_error(error, request)
        case Success(value=claims):
            return VerifyTokenResponse(subject=claims.subject)
