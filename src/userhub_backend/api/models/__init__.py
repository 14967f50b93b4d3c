"""Models used for API request and response payloads."""

from userhub_backend.api.models.system import (
    ErrorEnvelope,
    HealthResponse,
    WelcomeResponse,
)
from userhub_backend.api.models.uploads import UploadedFileResponse, UploadEnvelope
from userhub_backend.api.models.users import (
    USER_FIELDS_REQUIRED,
    UserCreateRequest,
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "USER_FIELDS_REQUIRED",
    "ErrorEnvelope",
    "HealthResponse",
    "UploadEnvelope",
    "UploadedFileResponse",
    "UserCreateRequest",
    "UserEnvelope",
    "UserListEnvelope",
    "UserResponse",
    "UserUpdateRequest",
    "WelcomeResponse",
]
