"""User Schemas — request DTOs and response models for /users.

Invariants:
    - Request DTOs are immutable after construction (frozen)
    - GetUserRequest/DeleteUserRequest keep the raw path string so a malformed
      ID becomes a field error, not a framework 422
    - Responses never expose password_hash
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class CreateUserRequest(BaseModel):
    """Create-user body. Shape only; rules live in core/user_rules.py."""
    model_config = ConfigDict(frozen=True)

    username: str | None = None
    email: str | None = None
    phone: str | None = None
    password: str | None = None
    role: str | None = None
    status: str | None = "Active"


class GetUserRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None


class DeleteUserRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None


class ListUsersRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int = 1
    size: int = 10


class CreateUserResponse(BaseModel):
    id: UUID


class UserResponse(BaseModel):
    """Public-facing user data."""
    id: UUID
    username: str
    email: str
    phone: str
    role: str
    status: str


class DeleteUserResponse(BaseModel):
    id: UUID
