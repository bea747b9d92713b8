"""HTTP routers."""

from warden.presentation.routers.auth import router as auth_router
from warden.presentation.routers.system import system_router

__all__ = ["auth_router", "system_router"]
