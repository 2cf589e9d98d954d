"""User Handlers — create_user, get_user, delete_user, list_users.

Invariants:
    - create_user stores only PasswordHasher output, never the plaintext
    - Each method returns its Result or a Failure; collaborator exceptions are
      classified here (RecordNotFoundError -> NOT_FOUND, DatabaseError -> PERSISTENCE)
    - No retries, no multi-step writes

Design Decisions:
    - Collaborators injected as Protocols (core/repository_protocols.py):
      handlers are exercised in tests with in-memory fakes
"""

import logging
import uuid

from user_service.core.commands import (
    CreateUserCommand, GetUserQuery, DeleteUserCommand, ListUsersQuery,
    CreateUserResult, GetUserResult, DeleteUserResult, ListUsersResult,
)
from user_service.core.domain_types import UserId
from user_service.core.errors import DatabaseError, RecordNotFoundError
from user_service.core.outcome import Failure, not_found, persistence_error
from user_service.core.repository_protocols import PasswordHasher, UserRepository
from user_service.core.user import User

logger = logging.getLogger(__name__)


def to_get_user_result(user: User) -> GetUserResult:
    return GetUserResult(
        id=user.id,
        username=user.username,
        email=user.email,
        phone=user.phone,
        role=user.role,
        status=user.status,
    )


class UserHandlers:
    """User CRUD handlers."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher):
        self.users = users
        self.hasher = hasher

    async def create_user(
        self, command: CreateUserCommand,
    ) -> CreateUserResult | Failure:
        """Hash the password, persist a new user, return its ID."""
        password_hash = await self.hasher.hash(command.password)
        user = User(
            id=UserId(uuid.uuid4()),
            username=command.username,
            email=command.email,
            phone=command.phone,
            password_hash=password_hash,
            role=command.role,
            status=command.status,
        )
        try:
            await self.users.create(user)
        except DatabaseError as e:
            logger.warning(
                f"Failed to create user: {e.message}",
                extra={"error_code": e.code, "operation": "create_user"},
            )
            if e.is_conflict:
                return persistence_error("A user with this email already exists")
            return persistence_error("User could not be saved")
        logger.info("User created", extra={"user_id": str(user.id)})
        return CreateUserResult(id=user.id)

    async def get_user(self, query: GetUserQuery) -> GetUserResult | Failure:
        user = await self._find(query.id)
        if isinstance(user, Failure):
            return user
        return to_get_user_result(user)

    async def delete_user(
        self, command: DeleteUserCommand,
    ) -> DeleteUserResult | Failure:
        """Delete an existing user. A row that vanished meanwhile is NOT_FOUND."""
        user = await self._find(command.id)
        if isinstance(user, Failure):
            return user
        try:
            await self.users.delete(user.id)
        except RecordNotFoundError:
            return not_found("User", command.id)
        except DatabaseError as e:
            logger.warning(
                f"Failed to delete user {command.id}: {e.message}",
                extra={"error_code": e.code, "operation": "delete_user"},
            )
            return persistence_error("User could not be deleted")
        logger.info("User deleted", extra={"user_id": str(user.id)})
        return DeleteUserResult(id=user.id)

    async def list_users(self, query: ListUsersQuery) -> ListUsersResult | Failure:
        try:
            users, total = await self.users.list_page(query.offset, query.size)
        except DatabaseError as e:
            logger.warning(
                f"Failed to list users: {e.message}",
                extra={"error_code": e.code, "operation": "list_users"},
            )
            return persistence_error("Users could not be listed")
        return ListUsersResult(
            items=tuple(to_get_user_result(u) for u in users),
            page=query.page,
            size=query.size,
            total_count=total,
        )

    async def _find(self, user_id: UserId) -> User | Failure:
        try:
            user = await self.users.get_by_id(user_id)
        except DatabaseError as e:
            logger.warning(
                f"Failed to read user {user_id}: {e.message}",
                extra={"error_code": e.code},
            )
            return persistence_error("User could not be read")
        if user is None:
            return not_found("User", user_id)
        return user
