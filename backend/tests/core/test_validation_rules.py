"""Validation Rules — tests for the rule engine and predicates.

Tests cover:
    - run_rules reports every failing rule, in rule order
    - required treats None, "" and whitespace as absent
    - shape predicates pass on absent values
    - email/phone/uuid shapes, length bounds, enum membership, ranges
"""

from types import SimpleNamespace

from user_service.core.domain_types import UserRole
from user_service.core.validation_rules import (
    FieldError, Rule, run_rules,
    required, email_shape, phone_shape, uuid_shape,
    min_length, max_length, max_utf8_bytes, contains, member_of, in_range,
    allowed_values,
)


# ─── run_rules ───────────────────────────────────────────────────

def test_run_rules_returns_empty_list_when_valid():
    rules = [Rule("name", required, "Name is required")]
    assert run_rules(rules, SimpleNamespace(name="ana")) == []


def test_run_rules_does_not_short_circuit():
    rules = [
        Rule("a", required, "A is required"),
        Rule("b", required, "B is required"),
        Rule("c", required, "C is required"),
    ]
    errors = run_rules(rules, SimpleNamespace(a=None, b="ok", c=""))
    assert errors == [
        FieldError("a", "A is required"),
        FieldError("c", "C is required"),
    ]


def test_run_rules_treats_missing_attribute_as_absent():
    rules = [Rule("ghost", required, "Ghost is required")]
    assert run_rules(rules, object()) == [FieldError("ghost", "Ghost is required")]


def test_field_error_formats_as_field_colon_message():
    assert FieldError("email", "Email is required").format() == (
        "email: Email is required"
    )


# ─── predicates ──────────────────────────────────────────────────

def test_required_rejects_none_empty_and_whitespace():
    assert not required(None)
    assert not required("")
    assert not required("   ")
    assert required("x")
    assert required(0)


def test_shape_predicates_pass_on_absent_values():
    for predicate in (
        email_shape, phone_shape, uuid_shape,
        min_length(3), max_length(3), contains(r"\d"), member_of(UserRole),
    ):
        assert predicate(None)
        assert predicate("")


def test_email_shape():
    assert email_shape("ana@x.com")
    assert not email_shape("ana")
    assert not email_shape("ana@x")
    assert not email_shape("ana @x.com")


def test_phone_shape_accepts_international_numbers():
    assert phone_shape("+551199999999")
    assert phone_shape("5511999999999")
    assert not phone_shape("+0123")
    assert not phone_shape("phone")
    assert not phone_shape("+1234567890123456")


def test_shapes_reject_trailing_newline():
    assert not email_shape("ana@x.com\n")
    assert not phone_shape("+55119999\n")


def test_uuid_shape():
    assert uuid_shape("0b5c3a1e-8f6d-4f8e-9a4b-2f1c7d9e0a11")
    assert not uuid_shape("not-a-uuid")


def test_length_bounds_are_inclusive():
    assert min_length(3)("abc")
    assert not min_length(3)("ab")
    assert max_length(3)("abc")
    assert not max_length(3)("abcd")


def test_max_utf8_bytes_counts_bytes_not_characters():
    assert max_utf8_bytes(4)("abcd")
    assert not max_utf8_bytes(4)("ééé")


def test_member_of_is_case_sensitive():
    assert member_of(UserRole)("Customer")
    assert not member_of(UserRole)("customer")
    assert not member_of(UserRole)("Root")


def test_in_range():
    assert in_range(1)(1)
    assert not in_range(1)(0)
    assert in_range(1, 100)(100)
    assert not in_range(1, 100)(101)
    assert in_range(1, 100)(None)


def test_allowed_values_lists_members_in_order():
    assert allowed_values(UserRole) == "Customer, Manager, Admin"
