"""Catch-all route answering unmatched paths and methods.

Must be included after every other router: Starlette dispatches to the first
route whose path and method both match, so this only sees leftovers.
"""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from userhub_backend.api.errors import ROUTE_NOT_FOUND, error_response

router = APIRouter(include_in_schema=False)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{path:path}", methods=ALL_METHODS)
def route_not_found(path: str) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, ROUTE_NOT_FOUND)
