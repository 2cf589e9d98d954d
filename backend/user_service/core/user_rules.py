"""Request Rule Sets — per-operation validation for user and auth requests.

Invariants:
    - One fixed rule list per operation; validate_* functions are pure
    - Uniqueness (e.g. email already registered) is NOT checked here:
      it is a persistence concern surfaced by the handler
    - PASSWORD_MAX_BYTES matches the bcrypt input limit
"""

from user_service.core.domain_types import UserRole, UserStatus
from user_service.core.validation_rules import (
    FieldError, Rule, run_rules,
    required, email_shape, phone_shape, uuid_shape,
    min_length, max_length, max_utf8_bytes, contains, member_of, in_range,
    allowed_values,
)

USERNAME_MIN_LENGTH: int = 3
USERNAME_MAX_LENGTH: int = 50
EMAIL_MAX_LENGTH: int = 100
PASSWORD_MIN_LENGTH: int = 8
PASSWORD_MAX_BYTES: int = 72
MAX_PAGE_SIZE: int = 100
# Keeps (page - 1) * size inside a signed 64-bit OFFSET
MAX_PAGE: int = (2**63 - 1) // MAX_PAGE_SIZE


CREATE_USER_RULES: list[Rule] = [
    Rule("username", required, "Username is required"),
    Rule(
        "username", min_length(USERNAME_MIN_LENGTH),
        f"Username must be at least {USERNAME_MIN_LENGTH} characters",
    ),
    Rule(
        "username", max_length(USERNAME_MAX_LENGTH),
        f"Username must be at most {USERNAME_MAX_LENGTH} characters",
    ),
    Rule("email", required, "Email is required"),
    Rule("email", email_shape, "Email must be a valid email address"),
    Rule(
        "email", max_length(EMAIL_MAX_LENGTH),
        f"Email must be at most {EMAIL_MAX_LENGTH} characters",
    ),
    Rule("phone", required, "Phone is required"),
    Rule(
        "phone", phone_shape,
        "Phone must be in international format, e.g. +5511999999999",
    ),
    Rule("password", required, "Password is required"),
    Rule(
        "password", min_length(PASSWORD_MIN_LENGTH),
        f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
    ),
    Rule(
        "password", max_utf8_bytes(PASSWORD_MAX_BYTES),
        f"Password must be at most {PASSWORD_MAX_BYTES} bytes",
    ),
    Rule(
        "password", contains(r"[A-Z]"),
        "Password must contain at least one uppercase letter",
    ),
    Rule(
        "password", contains(r"[a-z]"),
        "Password must contain at least one lowercase letter",
    ),
    Rule(
        "password", contains(r"\d"),
        "Password must contain at least one digit",
    ),
    Rule("role", required, "Role is required"),
    Rule(
        "role", member_of(UserRole),
        f"Role must be one of: {allowed_values(UserRole)}",
    ),
    Rule("status", required, "Status is required"),
    Rule(
        "status", member_of(UserStatus),
        f"Status must be one of: {allowed_values(UserStatus)}",
    ),
]

USER_ID_RULES: list[Rule] = [
    Rule("id", required, "User ID is required"),
    Rule("id", uuid_shape, "User ID must be a valid UUID"),
]

LIST_USERS_RULES: list[Rule] = [
    Rule(
        "page", in_range(1, MAX_PAGE),
        f"Page must be between 1 and {MAX_PAGE}",
    ),
    Rule(
        "size", in_range(1, MAX_PAGE_SIZE),
        f"Size must be between 1 and {MAX_PAGE_SIZE}",
    ),
]

AUTHENTICATE_RULES: list[Rule] = [
    Rule("email", required, "Email is required"),
    Rule("email", email_shape, "Email must be a valid email address"),
    Rule("password", required, "Password is required"),
]


def validate_create_user(request: object) -> list[FieldError]:
    return run_rules(CREATE_USER_RULES, request)


def validate_get_user(request: object) -> list[FieldError]:
    return run_rules(USER_ID_RULES, request)


def validate_delete_user(request: object) -> list[FieldError]:
    return run_rules(USER_ID_RULES, request)


def validate_list_users(request: object) -> list[FieldError]:
    return run_rules(LIST_USERS_RULES, request)


def validate_authenticate(request: object) -> list[FieldError]:
    return run_rules(AUTHENTICATE_RULES, request)
