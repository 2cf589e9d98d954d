"""Security Adapters — bcrypt password hashing and JWT issuance.

Invariants:
    - BcryptPasswordHasher.verify never raises: malformed hashes verify as False
    - bcrypt work runs in a worker thread (asyncio.to_thread), never on the event loop
    - dummy_verify costs the same as a real verify at the configured rounds
    - JwtTokenIssuer tokens carry sub (user ID), iat, exp plus caller claims;
      read_claims returns None for any invalid, expired or tampered token

Design Decisions:
    - passlib CryptContext: scheme upgrades via deprecated="auto" without
      touching handlers
    - PyJWT with a shared secret (HS256 default); algorithm configurable
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from user_service.core.domain_types import UserId

logger = logging.getLogger(__name__)


class BcryptPasswordHasher:
    """PasswordHasher backed by passlib's bcrypt scheme."""

    def __init__(self, rounds: int = 12):
        self._ctx = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds,
        )

    async def hash(self, plaintext: str) -> str:
        return await asyncio.to_thread(self._ctx.hash, plaintext)

    async def verify(self, plaintext: str, hashed: str) -> bool:
        return await asyncio.to_thread(self._verify, plaintext, hashed)

    def _verify(self, plaintext: str, hashed: str) -> bool:
        try:
            return bool(hashed) and self._ctx.verify(plaintext, hashed)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password hash could not be verified: {e}")
            return False

    async def dummy_verify(self) -> None:
        """Spend one verify's worth of work when there is no hash to check."""
        await asyncio.to_thread(self._ctx.dummy_verify)


class JwtTokenIssuer:
    """TokenIssuer backed by PyJWT."""

    def __init__(
        self, secret: str, algorithm: str = "HS256", ttl_minutes: int = 480,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(minutes=ttl_minutes)

    async def issue(self, user_id: UserId, claims: dict[str, Any]) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            **claims,
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def read_claims(self, token: str) -> dict[str, Any] | None:
        try:
            data = jwt.decode(
                token, self._secret, algorithms=[self._algorithm],
            )
        except jwt.PyJWTError as e:
            logger.info(f"Rejected bearer token: {e}")
            return None
        return data if isinstance(data, dict) else None
