"""CRUD endpoints over the user collection."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from userhub_backend.api.dependencies import UserServiceDep  # noqa: TC001
from userhub_backend.api.models import (
    USER_FIELDS_REQUIRED,
    ErrorEnvelope,
    UserCreateRequest,
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
    UserUpdateRequest,
)
from userhub_backend.api.services import InvalidUserError, UserNotFoundError

router = APIRouter(prefix="/api/users", tags=["users"])

USER_NOT_FOUND = "User not found"
_NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorEnvelope}}


def _user_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)


@router.get("", response_model=UserListEnvelope)
def list_users(service: UserServiceDep) -> UserListEnvelope:
    """Return every user in insertion order."""

    users = [UserResponse.model_validate(user) for user in service.list_users()]
    return UserListEnvelope(count=len(users), data=users)


@router.get(
    "/{user_id}",
    response_model=UserEnvelope,
    response_model_exclude_none=True,
    responses=_NOT_FOUND_RESPONSE,
)
def get_user(user_id: str, service: UserServiceDep) -> UserEnvelope:
    try:
        user = service.get_user(user_id)
    except UserNotFoundError as exc:
        raise _user_not_found() from exc
    return UserEnvelope(data=UserResponse.model_validate(user))


@router.post(
    "",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope}},
)
def create_user(
    service: UserServiceDep, payload: UserCreateRequest | None = None
) -> UserEnvelope:
    """Create a user; the identifier is assigned by the repository."""

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=USER_FIELDS_REQUIRED
        )
    try:
        user = service.create_user(name=payload.name, email=payload.email)
    except InvalidUserError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=USER_FIELDS_REQUIRED
        ) from exc
    return UserEnvelope(
        message="User created successfully", data=UserResponse.model_validate(user)
    )


@router.put("/{user_id}", response_model=UserEnvelope, responses=_NOT_FOUND_RESPONSE)
def update_user(
    user_id: str, service: UserServiceDep, payload: UserUpdateRequest | None = None
) -> UserEnvelope:
    """Overwrite the non-empty fields of an existing user."""

    changes = payload or UserUpdateRequest()
    try:
        user = service.update_user(user_id, name=changes.name, email=changes.email)
    except UserNotFoundError as exc:
        raise _user_not_found() from exc
    return UserEnvelope(
        message="User updated successfully", data=UserResponse.model_validate(user)
    )


@router.delete(
    "/{user_id}", response_model=UserEnvelope, responses=_NOT_FOUND_RESPONSE
)
def delete_user(user_id: str, service: UserServiceDep) -> UserEnvelope:
    try:
        user = service.delete_user(user_id)
    except UserNotFoundError as exc:
        raise _user_not_found() from exc
    return UserEnvelope(
        message="User deleted successfully", data=UserResponse.model_validate(user)
    )
