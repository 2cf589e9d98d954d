"""FastAPI Dependencies — per-request pipeline wiring and caller identity.

Invariants:
    - RequestDispatch is built per request around that request's AsyncSession
    - Hasher and issuer are process-wide (lru_cache), configured from Settings
    - get_caller_identity raises AuthenticationError (401 envelope) when the
      bearer token is absent, invalid, or lacks identity claims

Design Decisions:
    - Token decoding lives in the issuer adapter; identity rules live in
      core/identity.py; this module only connects them to the request
"""

from functools import lru_cache

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.config import get_settings
from user_service.core.errors import AuthenticationError, ErrorContext
from user_service.core.identity import CallerIdentity, read_caller_identity
from user_service.core.outcome import Failure
from user_service.infrastructure.database import get_db
from user_service.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer
from user_service.infrastructure.user_repository import SqlUserRepository
from user_service.services.request_dispatch import RequestDispatch

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)


@lru_cache
def get_token_issuer() -> JwtTokenIssuer:
    settings = get_settings()
    return JwtTokenIssuer(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_minutes=settings.jwt_ttl_minutes,
    )


def get_dispatch(
    db: AsyncSession = Depends(get_db),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    issuer: JwtTokenIssuer = Depends(get_token_issuer),
) -> RequestDispatch:
    return RequestDispatch(SqlUserRepository(db), hasher, issuer)


def get_caller_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    issuer: JwtTokenIssuer = Depends(get_token_issuer),
) -> CallerIdentity:
    """Resolve the authenticated caller from the Authorization header."""
    claims = issuer.read_claims(credentials.credentials) if credentials else None
    identity = read_caller_identity(claims)
    if isinstance(identity, Failure):
        raise AuthenticationError(
            identity.errors[0],
            ErrorContext(user_message=identity.errors[0]),
        )
    return identity
