"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from userhub_backend.shared import IdStrategy

MAX_UPLOAD_BYTES = 5 * 1024 * 1024
IMAGE_MIME_TYPES = ("image/jpeg", "image/png", "image/gif")


class BackendSettings(BaseSettings):
    """Centralized settings for the UserHub backend service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_title: str = "My Docker API"
    api_version: str = "2.0.0"
    api_host: str = "0.0.0.0"
    api_port: int = Field(
        default=3000, validation_alias=AliasChoices("port", "api_port")
    )
    upload_dir: Path = Path("uploads")
    upload_max_bytes: int = Field(default=MAX_UPLOAD_BYTES, gt=0)
    upload_allowed_types: tuple[str, ...] = IMAGE_MIME_TYPES
    seed_users: bool = True
    user_id_strategy: IdStrategy = IdStrategy.COUNTER
    log_level: str = "INFO"


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


settings = get_settings()

__all__ = [
    "IMAGE_MIME_TYPES",
    "MAX_UPLOAD_BYTES",
    "BackendSettings",
    "get_settings",
    "settings",
]
