"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from userhub_backend.api.errors import register_exception_handlers
from userhub_backend.api.middleware import (
    TrailingSlashMiddleware,
    UploadSizeLimitMiddleware,
)
from userhub_backend.api.routers import (
    FILE_TOO_LARGE,
    UPLOAD_PATH,
    fallback_router,
    system_router,
    uploads_router,
    users_router,
)
from userhub_backend.settings import BackendSettings, get_settings
from userhub_backend.storage import SEED_USERS, InMemoryUserRepository, UploadStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    config: BackendSettings = app.state.settings
    app.state.upload_storage.ensure_directory()
    logger.info("Server running on port %d", config.api_port)
    logger.info(
        "API documentation available at http://localhost:%d/docs", config.api_port
    )
    yield


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()
    app = FastAPI(
        title=config.api_title, version=config.api_version, lifespan=_lifespan
    )
    app.state.settings = config
    app.state.user_repository = InMemoryUserRepository(
        SEED_USERS if config.seed_users else (),
        id_strategy=config.user_id_strategy,
    )
    app.state.upload_storage = UploadStorage(config.upload_dir)

    app.add_middleware(
        UploadSizeLimitMiddleware,
        path=UPLOAD_PATH,
        max_bytes=config.upload_max_bytes,
        message=FILE_TOO_LARGE,
    )
    app.add_middleware(TrailingSlashMiddleware)
    register_exception_handlers(app)
    app.include_router(system_router)
    app.include_router(users_router)
    app.include_router(uploads_router)
    app.include_router(fallback_router)
    return app
