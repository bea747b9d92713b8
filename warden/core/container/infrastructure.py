"""Infrastructure dependency factories.

Builders for core infrastructure services, each selected by Settings:
- Logging (structlog console adapter)
- Password hashing (argon2id)
- Database (PostgreSQL) and Redis clients
- User, two-factor and banned-token stores (memory/postgres/redis)
- Token service (JWT)
- Notifier (log/Postmark)

The composition root calls these once per application; the resulting
objects are app-scoped singletons shared by every request.
"""

from typing import TYPE_CHECKING

from warden.core.config import (
    CacheStoreBackend,
    NotifierBackend,
    Settings,
    UserStoreBackend,
)

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from warden.domain.protocols import (
        BannedTokenStore,
        LoggerProtocol,
        NotifierProtocol,
        PasswordHashingProtocol,
        TwoFACodeStore,
        UserStore,
    )
    from warden.infrastructure.persistence.database import Database
    from warden.infrastructure.security import Argon2PasswordService, JWTService


def build_logger(settings: Settings) -> "LoggerProtocol":
    """Build the structured logger.

    Development renders colored console output; every other environment
    renders JSON.
    """
    from warden.infrastructure.logging import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level="DEBUG" if settings.debug else settings.log_level,
    )


def build_password_service(settings: Settings) -> "Argon2PasswordService":
    from warden.infrastructure.security import Argon2PasswordService

    return Argon2PasswordService(
        memory_cost=settings.argon2_memory_cost,
        time_cost=settings.argon2_time_cost,
        parallelism=settings.argon2_parallelism,
        max_workers=settings.password_hash_workers,
    )


def build_database(settings: Settings) -> "Database":
    """Build the database manager.

    Raises:
        ValueError: If database_url is not configured.
    """
    from warden.infrastructure.persistence.database import Database

    if not settings.database_url:
        raise ValueError("DATABASE_URL is required for the postgres user store")
    return Database(database_url=settings.database_url, echo=settings.db_echo)


def build_redis(settings: Settings) -> "Redis":
    """Build the async Redis client (connection pool shared by both stores).

    Raises:
        ValueError: If redis_url is not configured.
    """
    from redis.asyncio import ConnectionPool, Redis

    if not settings.redis_url:
        raise ValueError("REDIS_URL is required for redis-backed stores")
    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)


def build_user_store(
    settings: Settings,
    password_service: "PasswordHashingProtocol",
    database: "Database | None" = None,
) -> "UserStore":
    """Build the user store selected by USER_STORE_BACKEND."""
    match settings.user_store_backend:
        case UserStoreBackend.POSTGRES:
            from warden.infrastructure.persistence.repositories import (
                PostgresUserStore,
            )

            return PostgresUserStore(
                database or build_database(settings), password_service
            )
        case UserStoreBackend.MEMORY:
            from warden.infrastructure.persistence.memory import InMemoryUserStore

            return InMemoryUserStore(password_service)


def build_two_fa_code_store(
    settings: Settings, redis_client: "Redis | None" = None
) -> "TwoFACodeStore":
    """Build the two-factor code store selected by TWO_FA_STORE_BACKEND."""
    match settings.two_fa_store_backend:
        case CacheStoreBackend.REDIS:
            from warden.infrastructure.cache import RedisTwoFACodeStore

            return RedisTwoFACodeStore(
                redis_client or build_redis(settings),
                ttl_seconds=settings.two_fa_code_ttl_seconds,
            )
        case CacheStoreBackend.MEMORY:
            from warden.infrastructure.persistence.memory import (
                InMemoryTwoFACodeStore,
            )

            return InMemoryTwoFACodeStore(
                ttl_seconds=settings.two_fa_code_ttl_seconds
            )


def build_banned_token_store(
    settings: Settings, redis_client: "Redis | None" = None
) -> "BannedTokenStore":
    """Build the banned token store selected by BANNED_TOKEN_STORE_BACKEND.

    Entry lifetime is never shorter than the token lifetime.
    """
    ttl_seconds = settings.effective_banned_token_ttl_seconds
    match settings.banned_token_store_backend:
        case CacheStoreBackend.REDIS:
            from warden.infrastructure.cache import RedisBannedTokenStore

            return RedisBannedTokenStore(
                redis_client or build_redis(settings),
                ttl_seconds=ttl_seconds,
                min_ttl_seconds=settings.token_ttl_seconds,
            )
        case CacheStoreBackend.MEMORY:
            from warden.infrastructure.persistence.memory import (
                InMemoryBannedTokenStore,
            )

            return InMemoryBannedTokenStore(
                ttl_seconds=ttl_seconds,
                min_ttl_seconds=settings.token_ttl_seconds,
            )


def build_token_service(
    settings: Settings, banned_token_store: "BannedTokenStore"
) -> "JWTService":
    """Build the JWT service with the signing secret passed explicitly."""
    from warden.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        banned_token_store=banned_token_store,
        ttl_seconds=settings.token_ttl_seconds,
    )


def build_notifier(
    settings: Settings, logger: "LoggerProtocol"
) -> "NotifierProtocol":
    """Build the notifier selected by NOTIFIER_BACKEND.

    Raises:
        ValueError: If postmark is selected without a server token.
    """
    match settings.notifier_backend:
        case NotifierBackend.POSTMARK:
            from warden.domain.value_objects import Email
            from warden.infrastructure.email import PostmarkNotifier

            if not settings.postmark_server_token:
                raise ValueError(
                    "POSTMARK_SERVER_TOKEN is required for the postmark notifier"
                )
            return PostmarkNotifier(
                base_url=settings.postmark_base_url,
                sender=Email(settings.notifier_sender),
                server_token=settings.postmark_server_token,
                logger=logger,
                timeout=settings.notifier_timeout_seconds,
            )
        case NotifierBackend.LOG:
            from warden.infrastructure.email import LogNotifier

            return LogNotifier(logger)
