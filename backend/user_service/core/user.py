"""Domain User — the persisted account as seen by handlers.

Invariants:
    - password_hash is always a hash produced by PasswordHasher, never plaintext
    - Instances are immutable; handlers build a new value instead of mutating

Design Decisions:
    - Plain frozen dataclass, decoupled from the ORM row (models/user.py):
      the repository maps between the two
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from user_service.core.domain_types import UserId, UserRole, UserStatus


@dataclass(frozen=True)
class User:
    id: UserId
    username: str
    email: str
    phone: str
    password_hash: str
    role: UserRole
    status: UserStatus = UserStatus.ACTIVE
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE
