"""Auth Handlers — authenticate.

Invariants:
    - Unknown email, wrong password and inactive account all return the SAME
      Failure (never reveals whether the email exists)
    - Unknown email still pays for one password verify
    - Token claims carry email/username/role; the subject is the user ID
    - Plaintext passwords and issued tokens are never logged
"""

import logging

from user_service.core.commands import AuthenticateCommand, AuthenticateResult
from user_service.core.errors import DatabaseError
from user_service.core.outcome import Failure, unauthorized, persistence_error
from user_service.core.repository_protocols import (
    PasswordHasher, TokenIssuer, UserRepository,
)

logger = logging.getLogger(__name__)


class AuthHandlers:
    """Credential check + token issuance."""

    def __init__(
        self, users: UserRepository, hasher: PasswordHasher, issuer: TokenIssuer,
    ):
        self.users = users
        self.hasher = hasher
        self.issuer = issuer

    async def authenticate(
        self, command: AuthenticateCommand,
    ) -> AuthenticateResult | Failure:
        try:
            user = await self.users.get_by_email(command.email)
        except DatabaseError as e:
            logger.warning(
                f"Failed to look up credentials: {e.message}",
                extra={"error_code": e.code, "operation": "authenticate"},
            )
            return persistence_error("Credentials could not be checked")

        if user is None:
            await self.hasher.dummy_verify()
            logger.info("Authentication rejected: unknown email")
            return unauthorized()
        if not await self.hasher.verify(command.password, user.password_hash):
            logger.info(
                "Authentication rejected: password mismatch",
                extra={"user_id": str(user.id)},
            )
            return unauthorized()
        if not user.is_active:
            logger.info(
                f"Authentication rejected: user is {user.status.value}",
                extra={"user_id": str(user.id)},
            )
            return unauthorized()

        token = await self.issuer.issue(
            user.id,
            {
                "email": user.email,
                "username": user.username,
                "role": user.role.value,
            },
        )
        logger.info("User authenticated", extra={"user_id": str(user.id)})
        return AuthenticateResult(
            token=token,
            email=user.email,
            username=user.username,
            role=user.role,
        )
