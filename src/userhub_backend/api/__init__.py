"""API layer: application factory, routers, models and services."""

from userhub_backend.api.app import create_api

__all__ = ["create_api"]
