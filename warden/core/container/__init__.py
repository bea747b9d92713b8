"""Container module - composition root.

Re-exports the factory functions so callers import from one place:

    from warden.core.container import build_container, get_container

Organized by concern:
- infrastructure: logger, password service, database, redis, stores,
  token service, notifier
- auth_handlers: Container assembly and FastAPI handler accessors
"""

from warden.core.container.auth_handlers import (
    Container,
    build_container,
    get_container,
    get_login_handler,
    get_logout_handler,
    get_signup_handler,
    get_verify_token_handler,
    get_verify_two_factor_handler,
)
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

__all__ = [
    "Container",
    "build_banned_token_store",
    "build_container",
    "build_database",
    "build_logger",
    "build_notifier",
    "build_password_service",
    "build_redis",
    "build_token_service",
    "build_two_fa_code_store",
    "build_user_store",
    "get_container",
    "get_login_handler",
    "get_logout_handler",
    "get_signup_handler",
    "get_verify_token_handler",
    "get_verify_two_factor_handler",
]
