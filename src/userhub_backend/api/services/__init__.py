"""Service layer for API-specific business logic."""

from userhub_backend.api.services.uploads import (
    FileTooLargeError,
    IncomingFile,
    InvalidFileTypeError,
    MissingFileError,
    UploadedImage,
    UploadRejectedError,
    UploadService,
    build_stored_filename,
)
from userhub_backend.api.services.users import (
    InvalidUserError,
    UserNotFoundError,
    UserService,
    parse_user_id,
)

__all__ = [
    "FileTooLargeError",
    "IncomingFile",
    "InvalidFileTypeError",
    "InvalidUserError",
    "MissingFileError",
    "UploadRejectedError",
    "UploadService",
    "UploadedImage",
    "UserNotFoundError",
    "UserService",
    "build_stored_filename",
    "parse_user_id",
]
