"""User management domain logic."""

from __future__ import annotations

import logging
import re

from userhub_backend.storage import UserRecord, UserRepository

logger = logging.getLogger(__name__)

_LEADING_INTEGER = re.compile(r"^\s*([+-]?[0-9]+)")


class UserNotFoundError(Exception):
    """Raised when no user matches the requested identifier."""


class InvalidUserError(Exception):
    """Raised when a user payload lacks required fields."""


def parse_user_id(raw: str) -> int | None:
    """Parse the leading integer of *raw*, e.g. ``"12abc"`` -> 12.

    Returns ``None`` when *raw* does not start with a number; such an id never
    matches a stored record.
    """
    match = _LEADING_INTEGER.match(raw)
    if match is None:
        return None
    return int(match.group(1))


class UserService:
    """Coordinates lookups and mutations of the user collection."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def list_users(self) -> list[UserRecord]:
        return self._repository.list_all()

    def get_user(self, raw_id: str) -> UserRecord:
        user_id = self._require_id(raw_id)
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(raw_id)
        return user

    def create_user(self, *, name: str | None, email: str | None) -> UserRecord:
        if not name or not email:
            msg = "name and email are required"
            raise InvalidUserError(msg)
        user = self._repository.add(name, email)
        logger.info("Created user id=%d email=%s", user.id, user.email)
        return user

    def update_user(
        self, raw_id: str, *, name: str | None = None, email: str | None = None
    ) -> UserRecord:
        """Apply a partial update; empty values leave the field untouched."""
        user_id = self._require_id(raw_id)
        user = self._repository.update(
            user_id, name=name or None, email=email or None
        )
        if user is None:
            raise UserNotFoundError(raw_id)
        logger.info("Updated user id=%d", user.id)
        return user

    def delete_user(self, raw_id: str) -> UserRecord:
        user_id = self._require_id(raw_id)
        user = self._repository.delete(user_id)
        if user is None:
            raise UserNotFoundError(raw_id)
        logger.info("Deleted user id=%d", user.id)
        return user

    @staticmethod
    def _require_id(raw_id: str) -> int:
        user_id = parse_user_id(raw_id)
        if user_id is None:
            raise UserNotFoundError(raw_id)
        return user_id
