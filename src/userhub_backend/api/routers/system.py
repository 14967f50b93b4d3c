"""Service metadata and health endpoints."""

from __future__ import annotations

import time
from datetime import UTC, datetime

from fastapi import APIRouter

from userhub_backend.api.dependencies import SettingsDep  # noqa: TC001
from userhub_backend.api.models import HealthResponse, WelcomeResponse

router = APIRouter(tags=["system"])

_PROCESS_STARTED_AT = time.monotonic()

ENDPOINTS: dict[str, str] = {
    "GET /": "This welcome message",
    "GET /api/users": "Get all users",
    "GET /api/users/:id": "Get user by ID",
    "POST /api/users": "Create new user",
    "PUT /api/users/:id": "Update user by ID",
    "DELETE /api/users/:id": "Delete user by ID",
    "POST /api/upload": "Upload an image file (max 5MB, JPEG/PNG/GIF)",
    "GET /health": "Health check",
}


def process_uptime() -> float:
    """Seconds elapsed since the backend package was loaded."""
    return time.monotonic() - _PROCESS_STARTED_AT


@router.get("/", response_model=WelcomeResponse)
def welcome(settings: SettingsDep) -> WelcomeResponse:
    return WelcomeResponse(
        message=f"Welcome to {settings.api_title}!",
        version=settings.api_version,
        endpoints=ENDPOINTS,
    )


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Liveness/readiness probe; always succeeds while the process serves requests."""

    return HealthResponse.at(datetime.now(tz=UTC), process_uptime())
