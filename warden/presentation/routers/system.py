"""System router for non-session endpoints (health checks)."""

from fastapi import APIRouter, Request

system_router = APIRouter(tags=["System"])


@system_router.get("/health")
async def health(request: Request) -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers."""
    settings = request.app.state.container.settings
    return {"status": "healthy", "version": settings.app_version}
