"""Outcomes & Commands — failure constructors and paging arithmetic."""

from user_service.core.commands import ListUsersQuery, ListUsersResult
from user_service.core.outcome import (
    FailureKind, not_found, unauthorized, persistence_error,
)


def test_not_found_names_resource_and_id():
    failure = not_found("User", "abc")
    assert failure.kind == FailureKind.NOT_FOUND
    assert failure.errors == ("User 'abc' not found",)
    assert failure.error_code == "NOT_FOUND"


def test_unauthorized_default_message_is_generic():
    assert unauthorized().errors == ("Invalid email or password",)


def test_persistence_error_kind():
    failure = persistence_error("User could not be saved")
    assert failure.kind == FailureKind.PERSISTENCE
    assert failure.error_code == "PERSISTENCE_ERROR"


def test_list_query_offset():
    assert ListUsersQuery(page=1, size=10).offset == 0
    assert ListUsersQuery(page=3, size=10).offset == 20


def test_total_pages_rounds_up():
    assert ListUsersResult(items=(), page=1, size=2, total_count=3).total_pages == 2
    assert ListUsersResult(items=(), page=1, size=2, total_count=4).total_pages == 2
    assert ListUsersResult(items=(), page=1, size=10, total_count=0).total_pages == 0
