"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from userhub_backend.api.services import UploadService, UserService
from userhub_backend.settings import BackendSettings
from userhub_backend.storage import UploadStorage, UserRepository


def get_app_settings(request: Request) -> BackendSettings:
    """Return the settings the running application was built with."""

    return request.app.state.settings


def get_user_repository(request: Request) -> UserRepository:
    """Return the user collection shared by all requests."""

    return request.app.state.user_repository


def get_upload_storage(request: Request) -> UploadStorage:
    return request.app.state.upload_storage


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    return UserService(repository)


def get_upload_service(
    storage: Annotated[UploadStorage, Depends(get_upload_storage)],
    settings: Annotated[BackendSettings, Depends(get_app_settings)],
) -> UploadService:
    return UploadService(
        storage,
        allowed_types=settings.upload_allowed_types,
        max_bytes=settings.upload_max_bytes,
    )


SettingsDep = Annotated[BackendSettings, Depends(get_app_settings)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
UploadServiceDep = Annotated[UploadService, Depends(get_upload_service)]

__all__ = [
    "SettingsDep",
    "UploadServiceDep",
    "UserServiceDep",
    "get_app_settings",
    "get_upload_service",
    "get_upload_storage",
    "get_user_repository",
    "get_user_service",
]
