"""ASGI middleware applied in front of the router."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import status

from userhub_backend.api.errors import error_response

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

# Allowance for multipart boundaries, part headers and other form fields.
MULTIPART_OVERHEAD_BYTES = 64 * 1024


class TrailingSlashMiddleware:
    """Route ``/health/`` the same as ``/health``.

    A single trailing slash is dropped before routing; the catch-all route
    would otherwise answer before Starlette's slash redirect gets a chance.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path: str = scope["path"]
            if len(path) > 1 and path.endswith("/"):
                scope = dict(scope, path=path[:-1])
        await self.app(scope, receive, send)


class UploadSizeLimitMiddleware:
    """Refuse upload requests whose declared length cannot fit the size ceiling.

    Runs before the multipart body is spooled to disk. Requests without a
    ``Content-Length`` header are left to the upload service's own check.
    """

    def __init__(
        self, app: ASGIApp, *, path: str, max_bytes: int, message: str
    ) -> None:
        self.app = app
        self.path = path
        self.limit = max_bytes + MULTIPART_OVERHEAD_BYTES
        self.message = message

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if (
            scope["type"] == "http"
            and scope["method"] == "POST"
            and scope["path"].rstrip("/") == self.path
        ):
            length = self._content_length(scope)
            if length is not None and length > self.limit:
                logger.info("Rejected upload with Content-Length %d", length)
                response = error_response(status.HTTP_400_BAD_REQUEST, self.message)
                await response(scope, receive, send)
                return
        await self.app(scope, receive, send)

    @staticmethod
    def _content_length(scope: Scope) -> int | None:
        for name, value in scope.get("headers", ()):
            if name == b"content-length":
                try:
                    return int(value)
                except ValueError:
                    return None
        return None
