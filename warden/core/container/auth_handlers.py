"""Session handler wiring.

``build_container`` assembles every store, service and handler for one
application instance. ``create_app`` stores the result on ``app.state`` and
the ``get_*_handler`` functions hand the shared handlers to FastAPI
``Depends``.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastapi import Request

from warden.application.commands.handlers import (
    LoginUserHandler,
    LogoutUserHandler,
    SignupHandler,
    VerifyTokenHandler,
    VerifyTwoFactorHandler,
)
from warden.core.config import CacheStoreBackend, Settings, UserStoreBackend
from warden.core.container.infrastructure import (
    build_banned_token_store,
    build_database,
    build_logger,
    build_notifier,
    build_password_service,
    build_redis,
    build_token_service,
    build_two_fa_code_store,
    build_user_store,
)

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from warden.domain.protocols import (
        BannedTokenStore,
        LoggerProtocol,
        NotifierProtocol,
        TokenServiceProtocol,
        TwoFACodeStore,
        UserStore,
    )
    from warden.infrastructure.persistence.database import Database
    from warden.infrastructure.security import Argon2PasswordService


@dataclass(kw_only=True)
class Container:
    """App-scoped dependencies.

    Attributes:
        settings: Settings the container was built from.
        logger: Structured logger.
        password_service: Argon2id hasher (owns a thread pool).
        user_store: Principal store.
        two_fa_code_store: Pending challenge store.
        banned_token_store: Revocation list.
        token_service: JWT issuance/validation.
        notifier: One-time code delivery.
        database: Database manager when the postgres store is in use.
        redis: Redis client when a redis store is in use.
    """

    settings: Settings
    logger: "LoggerProtocol"
    password_service: "Argon2PasswordService"
    user_store: "UserStore"
    two_fa_code_store: "TwoFACodeStore"
    banned_token_store: "BannedTokenStore"
    token_service: "TokenServiceProtocol"
    notifier: "NotifierProtocol"
    signup_handler: SignupHandler
    login_handler: LoginUserHandler
    verify_two_factor_handler: VerifyTwoFactorHandler
    logout_handler: LogoutUserHandler
    verify_token_handler: VerifyTokenHandler
    database: "Database | None" = None
    redis: "Redis | None" = None

    async def close(self) -> None:
        """Release pooled resources (application shutdown)."""
        self.password_service.shutdown()
        if self.database is not None:
            await self.database.close()
        if self.redis is not None:
            await self.redis.aclose()


def build_container(settings: Settings) -> Container:
    """Assemble all dependencies for one application.

    Raises:
        ValueError: If a selected backend is missing its connection setting.
    """
    logger = build_logger(settings)
    password_service = build_password_service(settings)

    database = None
    if settings.user_store_backend == UserStoreBackend.POSTGRES:
        database = build_database(settings)

    redis_client = None
    if CacheStoreBackend.REDIS in (
        settings.two_fa_store_backend,
        settings.banned_token_store_backend,
    ):
        redis_client = build_redis(settings)

    user_store = build_user_store(settings, password_service, database)
    two_fa_code_store = build_two_fa_code_store(settings, redis_client)
    banned_token_store = build_banned_token_store(settings, redis_client)
    token_service = build_token_service(settings, banned_token_store)
    notifier = build_notifier(settings, logger)

    return Container(
        settings=settings,
        logger=logger,
        password_service=password_service,
        user_store=user_store,
        two_fa_code_store=two_fa_code_store,
        banned_token_store=banned_token_store,
        token_service=token_service,
        notifier=notifier,
        signup_handler=SignupHandler(user_store=user_store, logger=logger),
        login_handler=LoginUserHandler(
            user_store=user_store,
            two_fa_code_store=two_fa_code_store,
            token_service=token_service,
            notifier=notifier,
            logger=logger,
        ),
        verify_two_factor_handler=VerifyTwoFactorHandler(
            two_fa_code_store=two_fa_code_store,
            token_service=token_service,
            logger=logger,
        ),
        logout_handler=LogoutUserHandler(
            token_service=token_service,
            banned_token_store=banned_token_store,
            logger=logger,
        ),
        verify_token_handler=VerifyTokenHandler(
            token_service=token_service, logger=logger
        ),
        database=database,
        redis=redis_client,
    )


# ============================================================================
# Request-Scoped Accessors (FastAPI Depends)
# ============================================================================


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_signup_handler(request: Request) -> SignupHandler:
    return get_container(request).signup_handler


def get_login_handler(request: Request) -> LoginUserHandler:
    return get_container(request).login_handler


def get_verify_two_factor_handler(request: Request) -> VerifyTwoFactorHandler:
    return get_container(request).verify_two_factor_handler


def get_logout_handler(request: Request) -> LogoutUserHandler:
    return get_container(request).logout_handler


def get_verify_token_handler(request: Request) -> VerifyTokenHandler:
    return get_container(request).verify_token_handler
