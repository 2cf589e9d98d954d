"""Caller Identity — reads who is calling from already-verified token claims.

Invariants:
    - PURE: claims come in as a dict, nothing is decoded or verified here
    - Missing or malformed "sub"/"email" claims yield an UNAUTHORIZED Failure
"""

from dataclasses import dataclass
from uuid import UUID

from user_service.core.domain_types import UserId
from user_service.core.outcome import Failure, unauthorized


@dataclass(frozen=True)
class CallerIdentity:
    user_id: UserId
    email: str


def read_caller_identity(claims: dict | None) -> CallerIdentity | Failure:
    """Extract (user_id, email) from token claims."""
    if not claims:
        return unauthorized("Authentication required")
    subject = claims.get("sub")
    email = claims.get("email")
    if not subject or not email:
        return unauthorized("Token is missing identity claims")
    try:
        user_id = UserId(UUID(str(subject)))
    except ValueError:
        return unauthorized("Token subject is not a valid user ID")
    return CallerIdentity(user_id=user_id, email=str(email))
