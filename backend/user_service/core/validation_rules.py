"""Validation Rules — declarative field checks evaluated without short-circuit.

Invariants:
    - All functions are PURE: no IO, no async, no persisted state
    - run_rules evaluates EVERY rule; output order == rule order
    - Shape predicates (email, phone, length, membership) pass on absent values,
      so a missing field reports only its "required" rule

Design Decisions:
    - Rule as (field, predicate, message) triple: a rule set is a plain list,
      reviewable in one place per operation
    - Predicates read attributes by name: rules work on any request object
      without core importing the pydantic schemas
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable
from uuid import UUID

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
PHONE_PATTERN = re.compile(r"\+?[1-9]\d{1,14}")

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def format(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class Rule:
    field: str
    predicate: Predicate
    message: str


def run_rules(rules: Iterable[Rule], request: object) -> list[FieldError]:
    """Evaluate every rule against request. Empty list == valid."""
    errors: list[FieldError] = []
    for rule in rules:
        value = getattr(request, rule.field, None)
        if not rule.predicate(value):
            errors.append(FieldError(rule.field, rule.message))
    return errors


# ─── Predicates ──────────────────────────────────────────────────

def _absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def required(value: Any) -> bool:
    return not _absent(value)


def email_shape(value: Any) -> bool:
    return _absent(value) or bool(EMAIL_PATTERN.fullmatch(str(value)))


def phone_shape(value: Any) -> bool:
    return _absent(value) or bool(PHONE_PATTERN.fullmatch(str(value)))


def uuid_shape(value: Any) -> bool:
    if _absent(value):
        return True
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


def min_length(limit: int) -> Predicate:
    return lambda value: _absent(value) or len(value) >= limit


def max_length(limit: int) -> Predicate:
    return lambda value: _absent(value) or len(value) <= limit


def max_utf8_bytes(limit: int) -> Predicate:
    return lambda value: _absent(value) or len(str(value).encode("utf-8")) <= limit


def contains(pattern: str) -> Predicate:
    compiled = re.compile(pattern)
    return lambda value: _absent(value) or bool(compiled.search(str(value)))


def member_of(enum_type: type[Enum]) -> Predicate:
    allowed = {member.value for member in enum_type}
    return lambda value: _absent(value) or value in allowed


def in_range(low: int, high: int | None = None) -> Predicate:
    def check(value: Any) -> bool:
        if value is None:
            return True
        if value < low:
            return False
        return high is None or value <= high
    return check


def allowed_values(enum_type: type[Enum]) -> str:
    """Comma-joined member values, for rule messages."""
    return ", ".join(member.value for member in enum_type)
