"""
Main FastAPI application entry point.

``create_app`` builds the composition root from Settings and wires the
session and system routers. The module-level ``app`` is created lazily by
the ASGI server through the factory:

    uvicorn warden.main:create_app --factory
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from warden.core.config import Settings, UserStoreBackend, get_settings
from warden.core.container import build_container
from warden.presentation.errors import register_exception_handlers
from warden.presentation.middleware import TraceMiddleware
from warden.presentation.routers import auth_router, system_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Explicit settings; loaded from the environment when None.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    container = build_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Create tables outside production, release pools on shutdown."""
        if (
            settings.user_store_backend == UserStoreBackend.POSTGRES
            and not settings.is_production
            and container.database is not None
        ):
            await container.database.create_all()
        container.logger.info(
            "application_started",
            environment=settings.environment.value,
            user_store=settings.user_store_backend.value,
            two_fa_store=settings.two_fa_store_backend.value,
            banned_token_store=settings.banned_token_store_backend.value,
            notifier=settings.notifier_backend.value,
        )

        yield

        await container.close()
        container.logger.info("application_stopped")

    app = FastAPI(
        title=settings.app_name,
        description="Credential and session authority",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(TraceMiddleware)
    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(auth_router)

    return app
