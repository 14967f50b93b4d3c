"""Record types held by the storage layer."""

from userhub_backend.storage.schemas.user import SEED_USERS, UserRecord

__all__ = ["SEED_USERS", "UserRecord"]
