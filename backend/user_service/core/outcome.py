"""Handler Outcomes — typed failure values returned instead of raised.

Invariants:
    - A handler returns either its Result dataclass or a Failure, never both
    - Failure.errors are human-readable and safe to show to the caller
    - FailureKind is closed: the dispatcher maps every member to a status

Design Decisions:
    - Return values over exceptions for NotFound/Unauthorized: the dispatcher
      matches kinds explicitly instead of relying on except-clause ordering
"""

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """Failure taxonomy surfaced to the caller."""
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    PERSISTENCE = "persistence_error"
    UNHANDLED = "unhandled"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    errors: tuple[str, ...]

    @property
    def error_code(self) -> str:
        return self.kind.value.upper()


def not_found(resource_type: str, resource_id: object) -> Failure:
    return Failure(
        FailureKind.NOT_FOUND, (f"{resource_type} '{resource_id}' not found",),
    )


def unauthorized(reason: str = "Invalid email or password") -> Failure:
    return Failure(FailureKind.UNAUTHORIZED, (reason,))


def persistence_error(reason: str) -> Failure:
    return Failure(FailureKind.PERSISTENCE, (reason,))
