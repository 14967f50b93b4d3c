"""Image upload endpoint."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from userhub_backend.api.dependencies import UploadServiceDep  # noqa: TC001
from userhub_backend.api.models import (
    ErrorEnvelope,
    UploadedFileResponse,
    UploadEnvelope,
)
from userhub_backend.api.services import (
    FileTooLargeError,
    IncomingFile,
    InvalidFileTypeError,
    MissingFileError,
    UploadRejectedError,
)

router = APIRouter(prefix="/api", tags=["uploads"])

UPLOAD_PATH = "/api/upload"
UPLOAD_FIELD = "image"
UPLOAD_SUCCESS = "Image uploaded and health checked successfully!"
FILE_TOO_LARGE = "File too large"

_REJECTION_MESSAGES: dict[type[UploadRejectedError], str] = {
    MissingFileError: "No file uploaded or invalid file type.",
    InvalidFileTypeError: "Invalid file type. Only JPEG, PNG, GIF are allowed.",
    FileTooLargeError: FILE_TOO_LARGE,
}

_MULTIPART_BODY = {
    "required": False,
    "content": {
        "multipart/form-data": {
            "schema": {
                "type": "object",
                "properties": {UPLOAD_FIELD: {"type": "string", "format": "binary"}},
            }
        }
    },
}


def _incoming_file(value: object) -> IncomingFile | None:
    """Wrap the form value if it is a file; plain text fields count as missing."""
    if not isinstance(value, UploadFile):
        return None
    return IncomingFile(
        filename=value.filename, content_type=value.content_type, stream=value.file
    )


@router.post(
    "/upload",
    response_model=UploadEnvelope,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope}},
    openapi_extra={"requestBody": _MULTIPART_BODY},
)
async def upload_image(request: Request, service: UploadServiceDep) -> UploadEnvelope:
    """Validate an image's type and size, then store it in the upload directory."""

    async with request.form() as form:
        incoming = _incoming_file(form.get(UPLOAD_FIELD))
        try:
            stored = await run_in_threadpool(service.store_image, incoming)
        except UploadRejectedError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=_REJECTION_MESSAGES[type(exc)],
            ) from exc
    return UploadEnvelope(
        message=UPLOAD_SUCCESS, file=UploadedFileResponse.model_validate(stored)
    )
