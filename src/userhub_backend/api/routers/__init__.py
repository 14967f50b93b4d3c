"""Route definitions for public HTTP endpoints."""

from userhub_backend.api.routers.fallback import router as fallback_router
from userhub_backend.api.routers.system import router as system_router
from userhub_backend.api.routers.uploads import FILE_TOO_LARGE, UPLOAD_PATH
from userhub_backend.api.routers.uploads import router as uploads_router
from userhub_backend.api.routers.users import router as users_router

__all__ = [
    "FILE_TOO_LARGE",
    "UPLOAD_PATH",
    "fallback_router",
    "system_router",
    "uploads_router",
    "users_router",
]
