"""User record schema."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class UserRecord:
    """A single entry of the user collection."""

    id: int
    name: str
    email: str


SEED_USERS: tuple[UserRecord, ...] = (
    UserRecord(id=1, name="John Doe", email="john@example.com"),
    UserRecord(id=2, name="Jane Smith", email="jane@example.com"),
    UserRecord(id=3, name="Bob Johnson", email="bob@example.com"),
)
