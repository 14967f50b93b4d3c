"""Models for service metadata, health and error responses."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class WelcomeResponse(BaseModel):
    """Static service description served at the root path."""

    message: str
    version: str
    endpoints: dict[str, str]


class HealthResponse(BaseModel):
    """Liveness/readiness payload consumed by orchestrator probes."""

    status: Literal["OK"] = "OK"
    timestamp: str
    uptime: float = Field(..., ge=0)

    @classmethod
    def at(cls, moment: datetime, uptime: float) -> HealthResponse:
        """Build a response stamped with *moment* in ISO-8601 UTC (``Z`` suffix)."""
        timestamp = moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return cls(timestamp=timestamp, uptime=uptime)


class ErrorEnvelope(BaseModel):
    """Body returned for every failed request."""

    success: bool = False
    message: str
