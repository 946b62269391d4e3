"""
Pydantic models for requests, responses, and port results.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── User ──────────────────────────────────────────────────────


class User(BaseModel):
    """
    A stored user record. `id` is assigned by the store.

    Reads are tolerant: documents written before the allow-list existed
    may miss fields, hold other types, or carry extra keys, and all of
    it is passed through. Writes go through `UserCreate` / `UserUpdate`.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: Any = None
    email: Any = None
    age: Any = None


class UserCreate(BaseModel):
    """Request body for POST /users."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=200)
    email: str | None = None
    age: int | None = Field(default=None, ge=0, le=150)


class UserUpdate(BaseModel):
    """
    Request body for PUT /users/{id}.

    Partial update: only fields the client actually sent are applied.
    Unknown fields (including `id`) are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=200)
    email: str | None = None
    age: int | None = Field(default=None, ge=0, le=150)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("name cannot be null")
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


# ── Port results ──────────────────────────────────────────────


class UserFound(BaseModel):
    """The record matched; `user` is its state after the operation (or before, for delete)."""

    user: User


class UserNotFound(BaseModel):
    """No record matches `user_id`."""

    user_id: str


UserResult = UserFound | UserNotFound


# ── Responses ─────────────────────────────────────────────────


class MessageResponse(BaseModel):
    message: str


class UserCreatedResponse(BaseModel):
    message: str = "User created"
    createdUser: User


class UserUpdatedResponse(BaseModel):
    message: str = "User updated"
    updatedUser: User


class UserDeletedResponse(BaseModel):
    message: str = "User deleted"
    deletedUser: User


class HealthResponse(BaseModel):
    status: str
    store: str
    message: str | None = None
