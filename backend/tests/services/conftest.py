"""Service test fixtures — in-memory collaborators for handlers and dispatch.

Invariants:
    - Fakes satisfy core/repository_protocols.py structurally (no subclassing)
    - InMemoryUserRepository mirrors SqlUserRepository failure modes:
      duplicate email -> DatabaseError(CONFLICT), missing delete -> RecordNotFoundError
    - FakePasswordHasher output never equals its input
"""

from typing import Any

import pytest

from user_service.core.domain_types import UserId
from user_service.core.errors import (
    DatabaseError, ErrorCategory, RecordNotFoundError,
)
from user_service.core.user import User
from user_service.services.request_dispatch import RequestDispatch


class InMemoryUserRepository:
    def __init__(self):
        self.rows: dict[UserId, User] = {}

    async def create(self, user: User) -> None:
        if any(u.email == user.email for u in self.rows.values()):
            raise DatabaseError(
                "Integrity constraint violated", "insert", ErrorCategory.CONFLICT,
            )
        self.rows[user.id] = user

    async def get_by_id(self, user_id: UserId) -> User | None:
        return self.rows.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in self.rows.values() if u.email == email), None)

    async def delete(self, user_id: UserId) -> None:
        if user_id not in self.rows:
            raise RecordNotFoundError("User", str(user_id))
        del self.rows[user_id]

    async def list_page(self, offset: int, limit: int) -> tuple[list[User], int]:
        ordered = sorted(
            self.rows.values(), key=lambda u: u.created_at, reverse=True,
        )
        return ordered[offset:offset + limit], len(ordered)


class FakePasswordHasher:
    def __init__(self):
        self.dummy_verifies = 0

    async def hash(self, plaintext: str) -> str:
        return f"hashed::{plaintext}"

    async def verify(self, plaintext: str, hashed: str) -> bool:
        return hashed == f"hashed::{plaintext}"

    async def dummy_verify(self) -> None:
        self.dummy_verifies += 1


class FakeTokenIssuer:
    def __init__(self):
        self.issued: list[tuple[UserId, dict[str, Any]]] = []

    async def issue(self, user_id: UserId, claims: dict[str, Any]) -> str:
        self.issued.append((user_id, claims))
        return f"token-{len(self.issued)}-{user_id}"

    def read_claims(self, token: str) -> dict[str, Any] | None:
        for index, (user_id, claims) in enumerate(self.issued, start=1):
            if token == f"token-{index}-{user_id}":
                return {**claims, "sub": str(user_id)}
        return None


@pytest.fixture
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def issuer() -> FakeTokenIssuer:
    return FakeTokenIssuer()


@pytest.fixture
def dispatch(repo, hasher, issuer) -> RequestDispatch:
    return RequestDispatch(repo, hasher, issuer)
