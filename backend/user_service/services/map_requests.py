"""Request/Result Mappers — explicit field-by-field conversions at the pipeline seams.

Invariants:
    - Request mappers run only after validation succeeded: they never fail
      and perform no business logic
    - Every field is assigned by hand; adding a field means editing one
      function here (no reflective mapping)
    - Result mappers never expose password_hash
"""

from uuid import UUID

from user_service.core.commands import (
    CreateUserCommand, GetUserQuery, DeleteUserCommand, ListUsersQuery,
    AuthenticateCommand,
    CreateUserResult, GetUserResult, DeleteUserResult, AuthenticateResult,
)
from user_service.core.domain_types import UserId, UserRole, UserStatus
from user_service.schemas.auth import AuthenticateRequest, AuthenticateResponse
from user_service.schemas.users import (
    CreateUserRequest, GetUserRequest, DeleteUserRequest, ListUsersRequest,
    CreateUserResponse, UserResponse, DeleteUserResponse,
)


# ─── Request -> Command ─────────────────────────────────────────

def to_create_user_command(request: CreateUserRequest) -> CreateUserCommand:
    return CreateUserCommand(
        username=request.username,
        email=request.email,
        phone=request.phone,
        password=request.password,
        role=UserRole(request.role),
        status=UserStatus(request.status),
    )


def to_get_user_query(request: GetUserRequest) -> GetUserQuery:
    return GetUserQuery(id=UserId(UUID(request.id)))


def to_delete_user_command(request: DeleteUserRequest) -> DeleteUserCommand:
    return DeleteUserCommand(id=UserId(UUID(request.id)))


def to_list_users_query(request: ListUsersRequest) -> ListUsersQuery:
    return ListUsersQuery(page=request.page, size=request.size)


def to_authenticate_command(request: AuthenticateRequest) -> AuthenticateCommand:
    return AuthenticateCommand(email=request.email, password=request.password)


# ─── Result -> Response ─────────────────────────────────────────

def to_create_user_response(result: CreateUserResult) -> CreateUserResponse:
    return CreateUserResponse(id=result.id)


def to_user_response(result: GetUserResult) -> UserResponse:
    return UserResponse(
        id=result.id,
        username=result.username,
        email=result.email,
        phone=result.phone,
        role=result.role.value,
        status=result.status.value,
    )


def to_delete_user_response(result: DeleteUserResult) -> DeleteUserResponse:
    return DeleteUserResponse(id=result.id)


def to_authenticate_response(result: AuthenticateResult) -> AuthenticateResponse:
    return AuthenticateResponse(
        token=result.token,
        email=result.email,
        username=result.username,
        role=result.role.value,
    )
