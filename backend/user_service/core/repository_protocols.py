"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
      (infrastructure/user_repository.py, infrastructure/security.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy;
      test fakes satisfy the contract without subclassing
    - Async in Protocol: every collaborator call is a suspension point,
      including hashing (runs off the event loop) and token issuance
"""

from typing import Any, Protocol

from user_service.core.domain_types import UserId
from user_service.core.user import User


class UserRepository(Protocol):
    """Contract for user persistence.

    create raises DatabaseError on constraint violation; delete raises
    RecordNotFoundError when the row is already gone.
    """
    async def create(self, user: User) -> None: ...
    async def get_by_id(self, user_id: UserId) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...
    async def delete(self, user_id: UserId) -> None: ...
    async def list_page(
        self, offset: int, limit: int,
    ) -> tuple[list[User], int]: ...


class PasswordHasher(Protocol):
    """Contract for one-way password hashing."""
    async def hash(self, plaintext: str) -> str: ...
    async def verify(self, plaintext: str, hashed: str) -> bool: ...
    async def dummy_verify(self) -> None: ...


class TokenIssuer(Protocol):
    """Contract for opaque access-token issuance and claim reading."""
    async def issue(self, user_id: UserId, claims: dict[str, Any]) -> str: ...
    def read_claims(self, token: str) -> dict[str, Any] | None: ...
