"""Repository helpers for working with users.

The service layer only talks to :class:`UserRepository`, so the in-memory
implementation below can be swapped for a real backing store without touching
the handlers.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import replace
from typing import Protocol

from userhub_backend.shared import IdStrategy
from userhub_backend.storage.schemas import UserRecord


class UserRepository(Protocol):
    """Protocol describing how user records are stored."""

    def list_all(self) -> list[UserRecord]:
        """Return every record in insertion order."""

    def get_by_id(self, user_id: int) -> UserRecord | None:
        """Return the record identified by *user_id* or ``None``."""

    def add(self, name: str, email: str) -> UserRecord:
        """Store a new record, assigning its identifier."""

    def update(
        self, user_id: int, *, name: str | None = None, email: str | None = None
    ) -> UserRecord | None:
        """Overwrite the given fields of *user_id*; ``None`` if it is unknown."""

    def delete(self, user_id: int) -> UserRecord | None:
        """Remove *user_id* and return the removed record, if any."""


class InMemoryUserRepository:
    """List-backed implementation of :class:`UserRepository`.

    Every operation holds a single lock, and records leave the repository as
    copies, so concurrent requests never observe a half-applied change.
    """

    def __init__(
        self,
        seed: Iterable[UserRecord] = (),
        *,
        id_strategy: IdStrategy = IdStrategy.COUNTER,
    ) -> None:
        self._lock = threading.Lock()
        self._users: list[UserRecord] = [replace(user) for user in seed]
        self._id_strategy = id_strategy
        self._last_id = max((user.id for user in self._users), default=0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list_all(self) -> list[UserRecord]:
        with self._lock:
            return [replace(user) for user in self._users]

    def get_by_id(self, user_id: int) -> UserRecord | None:
        with self._lock:
            user = self._find(user_id)
            return replace(user) if user is not None else None

    def add(self, name: str, email: str) -> UserRecord:
        with self._lock:
            user = UserRecord(id=self._next_id(), name=name, email=email)
            self._users.append(user)
            return replace(user)

    def update(
        self, user_id: int, *, name: str | None = None, email: str | None = None
    ) -> UserRecord | None:
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return None
            if name is not None:
                user.name = name
            if email is not None:
                user.email = email
            return replace(user)

    def delete(self, user_id: int) -> UserRecord | None:
        with self._lock:
            for index, user in enumerate(self._users):
                if user.id == user_id:
                    return self._users.pop(index)
            return None

    def _find(self, user_id: int) -> UserRecord | None:
        return next((user for user in self._users if user.id == user_id), None)

    def _next_id(self) -> int:
        # Caller holds the lock.
        if self._id_strategy is IdStrategy.LENGTH:
            return len(self._users) + 1
        self._last_id += 1
        return self._last_id
