"""Request/Result Mappers — explicit field copies between DTOs, commands and results."""

from uuid import UUID, uuid4

from user_service.core.commands import (
    CreateUserCommand, GetUserResult, AuthenticateResult,
)
from user_service.core.domain_types import UserRole, UserStatus
from user_service.schemas.auth import AuthenticateRequest
from user_service.schemas.users import (
    CreateUserRequest, GetUserRequest, DeleteUserRequest, ListUsersRequest,
)
from user_service.services.map_requests import (
    to_create_user_command, to_get_user_query, to_delete_user_command,
    to_list_users_query, to_authenticate_command,
    to_user_response, to_authenticate_response,
)


def test_create_user_command_copies_every_field_and_types_enums():
    request = CreateUserRequest(
        username="ana", email="ana@x.com", phone="+551199999999",
        password="Secret123", role="Admin", status="Inactive",
    )
    assert to_create_user_command(request) == CreateUserCommand(
        username="ana",
        email="ana@x.com",
        phone="+551199999999",
        password="Secret123",
        role=UserRole.ADMIN,
        status=UserStatus.INACTIVE,
    )


def test_id_requests_become_uuid_queries():
    raw = "0b5c3a1e-8f6d-4f8e-9a4b-2f1c7d9e0a11"
    assert to_get_user_query(GetUserRequest(id=raw)).id == UUID(raw)
    assert to_delete_user_command(DeleteUserRequest(id=raw)).id == UUID(raw)


def test_list_query_copies_paging():
    query = to_list_users_query(ListUsersRequest(page=2, size=25))
    assert (query.page, query.size) == (2, 25)


def test_authenticate_command_copies_credentials():
    command = to_authenticate_command(
        AuthenticateRequest(email="ana@x.com", password="Secret123"),
    )
    assert (command.email, command.password) == ("ana@x.com", "Secret123")


def test_user_response_uses_wire_enum_values_and_no_password():
    uid = uuid4()
    response = to_user_response(GetUserResult(
        id=uid, username="ana", email="ana@x.com", phone="+551199999999",
        role=UserRole.CUSTOMER, status=UserStatus.ACTIVE,
    ))
    dumped = response.model_dump(mode="json")
    assert dumped == {
        "id": str(uid),
        "username": "ana",
        "email": "ana@x.com",
        "phone": "+551199999999",
        "role": "Customer",
        "status": "Active",
    }


def test_authenticate_response_is_bearer_token():
    response = to_authenticate_response(AuthenticateResult(
        token="t", email="ana@x.com", username="ana", role=UserRole.MANAGER,
    ))
    assert response.token_type == "bearer"
    assert response.role == "Manager"
