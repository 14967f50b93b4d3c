"""Pydantic models for the upload endpoint."""

from pydantic import BaseModel, ConfigDict


class UploadedFileResponse(BaseModel):
    """Attributes of a stored upload."""

    model_config = ConfigDict(from_attributes=True)

    filename: str
    mimetype: str
    size: int
    path: str


class UploadEnvelope(BaseModel):
    success: bool = True
    message: str
    file: UploadedFileResponse
