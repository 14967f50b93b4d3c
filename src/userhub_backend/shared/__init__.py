"""Shared helpers and enumerations used across the backend."""

from userhub_backend.shared.enums import IdStrategy

__all__ = ["IdStrategy"]
