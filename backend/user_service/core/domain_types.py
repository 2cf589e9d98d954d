"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps UUID; never use bare UUID in domain logic
    - Role and status values encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders; values are the
      wire spelling ("Customer", "Active")
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """Authorization role carried in issued tokens."""
    CUSTOMER = "Customer"
    MANAGER = "Manager"
    ADMIN = "Admin"


class UserStatus(str, Enum):
    """Account lifecycle states. Only ACTIVE users may authenticate."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    SUSPENDED = "Suspended"
