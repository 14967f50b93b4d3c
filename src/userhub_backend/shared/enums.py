"""Shared enumerations used across the backend."""

from enum import StrEnum


class IdStrategy(StrEnum):
    """How the user repository assigns identifiers to new records."""

    COUNTER = "counter"
    LENGTH = "length"
