"""Commands, Queries and Results — internal operation values after validation.

Invariants:
    - One command/query type per handler method
    - Commands carry only the fields their handler needs, already typed
      (UUID, enums); they never carry validation errors
    - Results are immutable and produced once per handler call
"""

from dataclasses import dataclass

from user_service.core.domain_types import UserId, UserRole, UserStatus


# ─── Commands / Queries ──────────────────────────────────────────

@dataclass(frozen=True)
class CreateUserCommand:
    username: str
    email: str
    phone: str
    password: str
    role: UserRole
    status: UserStatus


@dataclass(frozen=True)
class GetUserQuery:
    id: UserId


@dataclass(frozen=True)
class DeleteUserCommand:
    id: UserId


@dataclass(frozen=True)
class ListUsersQuery:
    page: int
    size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


@dataclass(frozen=True)
class AuthenticateCommand:
    email: str
    password: str


# ─── Results ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateUserResult:
    id: UserId


@dataclass(frozen=True)
class GetUserResult:
    id: UserId
    username: str
    email: str
    phone: str
    role: UserRole
    status: UserStatus


@dataclass(frozen=True)
class DeleteUserResult:
    id: UserId


@dataclass(frozen=True)
class ListUsersResult:
    items: tuple[GetUserResult, ...]
    page: int
    size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        if self.total_count == 0:
            return 0
        return -(-self.total_count // self.size)


@dataclass(frozen=True)
class AuthenticateResult:
    token: str
    email: str
    username: str
    role: UserRole
