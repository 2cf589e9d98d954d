"""Domain Types — verifies identity wrapper and enum wire values.

Tests:
    - UserId wraps UUID
    - Role/status enums serialize to their wire spelling
    - Only ACTIVE users report is_active
"""

from uuid import uuid4

from user_service.core.domain_types import UserId, UserRole, UserStatus
from user_service.core.user import User


def test_user_id_wraps_uuid():
    uid = uuid4()
    assert UserId(uid) == uid


def test_user_role_values_are_wire_spelling():
    assert [r.value for r in UserRole] == ["Customer", "Manager", "Admin"]


def test_user_status_values_are_wire_spelling():
    assert [s.value for s in UserStatus] == ["Active", "Inactive", "Suspended"]


def test_enums_compare_equal_to_their_string_value():
    assert UserRole.CUSTOMER == "Customer"
    assert UserStatus("Suspended") is UserStatus.SUSPENDED


def _user(status: UserStatus) -> User:
    return User(
        id=UserId(uuid4()), username="ana", email="ana@x.com",
        phone="+551199999999", password_hash="h", role=UserRole.CUSTOMER,
        status=status,
    )


def test_only_active_user_is_active():
    assert _user(UserStatus.ACTIVE).is_active
    assert not _user(UserStatus.INACTIVE).is_active
    assert not _user(UserStatus.SUSPENDED).is_active
