"""Repositories providing access to stored records."""

from userhub_backend.storage.repositories.user import (
    InMemoryUserRepository,
    UserRepository,
)

__all__ = ["InMemoryUserRepository", "UserRepository"]
