"""Storage layer: the user collection and the upload directory."""

from userhub_backend.storage.repositories import (
    InMemoryUserRepository,
    UserRepository,
)
from userhub_backend.storage.schemas import SEED_USERS, UserRecord
from userhub_backend.storage.uploads import (
    SizeLimitExceededError,
    StoredFile,
    UploadStorage,
)

__all__ = [
    "SEED_USERS",
    "InMemoryUserRepository",
    "SizeLimitExceededError",
    "StoredFile",
    "UploadStorage",
    "UserRecord",
    "UserRepository",
]
