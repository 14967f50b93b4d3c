"""Pydantic models for the user endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

USER_FIELDS_REQUIRED = "Name and email are required"


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class UserCreateRequest(BaseModel):
    """Payload for creating a new user."""

    name: str | None = None
    email: str | None = None

    @model_validator(mode="after")
    def require_name_and_email(self) -> UserCreateRequest:
        if not self.name or not self.email:
            raise ValueError(USER_FIELDS_REQUIRED)
        return self


class UserUpdateRequest(BaseModel):
    """Payload for a partial update; empty fields are ignored."""

    name: str | None = None
    email: str | None = None


class UserEnvelope(BaseModel):
    """Envelope wrapping a single user."""

    success: bool = True
    message: str | None = None
    data: UserResponse


class UserListEnvelope(BaseModel):
    """Envelope wrapping the whole user collection."""

    success: bool = True
    count: int
    data: list[UserResponse]
