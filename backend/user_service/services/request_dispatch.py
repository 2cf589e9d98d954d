"""Request Dispatch — validate -> map -> handle -> envelope for every operation.

Invariants:
    - Stages run strictly in order; each may short-circuit with an envelope
    - Every operation->pipeline mapping is visible in one dict
    - Every FailureKind has exactly one (status, message) entry in FAILURE_RESPONSES
    - No exception escapes execute(): anything unclassified becomes UNHANDLED,
      is logged with traceback, and exposes no internal detail
    - asyncio.CancelledError is not caught; task cancellation propagates into
      the pending collaborator call; uncommitted writes are rolled back
    - Stateless after construction: safe to share across concurrent requests

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
      (ADR: no convention-over-config)
    - Operation as a frozen dataclass of plain callables: validator, mapper,
      handler and presenter are each independently testable
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from fastapi import status

from user_service.core.outcome import Failure, FailureKind
from user_service.core.repository_protocols import (
    PasswordHasher, TokenIssuer, UserRepository,
)
from user_service.core.user_rules import (
    validate_create_user, validate_get_user, validate_delete_user,
    validate_list_users, validate_authenticate,
)
from user_service.core.validation_rules import FieldError
from user_service.schemas.envelope import (
    Envelope, ok_envelope, fail_envelope, paginated_envelope,
)
from user_service.services.handle_auth import AuthHandlers
from user_service.services.handle_users import UserHandlers
from user_service.services.map_requests import (
    to_create_user_command, to_get_user_query, to_delete_user_command,
    to_list_users_query, to_authenticate_command,
    to_create_user_response, to_user_response, to_delete_user_response,
    to_authenticate_response,
)

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

FAILURE_RESPONSES: dict[FailureKind, tuple[int, str]] = {
    FailureKind.VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST, VALIDATION_FAILED_MESSAGE,
    ),
    FailureKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource not found"),
    FailureKind.UNAUTHORIZED: (status.HTTP_401_UNAUTHORIZED, "Unauthorized"),
    FailureKind.PERSISTENCE: (
        status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE,
    ),
    FailureKind.UNHANDLED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE,
    ),
}


@dataclass(frozen=True)
class DispatchResult:
    status_code: int
    envelope: Envelope


@dataclass(frozen=True)
class Operation:
    """One pipeline: the stages a request passes through, in order."""
    label: str
    validate: Callable[[Any], list[FieldError]]
    to_command: Callable[[Any], Any]
    handle: Callable[[Any], Awaitable[Any]]
    present: Callable[[Any, str], Envelope]
    success_status: int = status.HTTP_200_OK


def present_with(to_response: Callable[[Any], Any]) -> Callable[[Any, str], Envelope]:
    """Presenter that maps a Result into its response DTO inside ok_envelope."""
    def present(result: Any, message: str) -> Envelope:
        return ok_envelope(to_response(result), message)
    return present


def present_user_page(result: Any, message: str) -> Envelope:
    return paginated_envelope(
        [to_user_response(item) for item in result.items],
        current_page=result.page,
        total_pages=result.total_pages,
        total_count=result.total_count,
        message=message,
    )


def failure_result(failure: Failure) -> DispatchResult:
    """Translate a typed Failure 1:1 into status + envelope."""
    status_code, message = FAILURE_RESPONSES[failure.kind]
    errors = list(failure.errors) or [message]
    return DispatchResult(status_code, fail_envelope(message, errors))


class RequestDispatch:
    """Routes operation name -> pipeline. Explicit registration, no auto-discovery."""

    def __init__(
        self, users: UserRepository, hasher: PasswordHasher, issuer: TokenIssuer,
    ):
        user_handlers = UserHandlers(users, hasher)
        auth_handlers = AuthHandlers(users, hasher, issuer)

        # ADR: adding an operation requires editing this dict
        self._operations: dict[str, Operation] = {
            "create_user": Operation(
                "Create user", validate_create_user, to_create_user_command,
                user_handlers.create_user, present_with(to_create_user_response),
                status.HTTP_201_CREATED,
            ),
            "get_user": Operation(
                "Get user", validate_get_user, to_get_user_query,
                user_handlers.get_user, present_with(to_user_response),
            ),
            "delete_user": Operation(
                "Delete user", validate_delete_user, to_delete_user_command,
                user_handlers.delete_user, present_with(to_delete_user_response),
            ),
            "list_users": Operation(
                "List users", validate_list_users, to_list_users_query,
                user_handlers.list_users, present_user_page,
            ),
            "authenticate": Operation(
                "Authenticate", validate_authenticate, to_authenticate_command,
                auth_handlers.authenticate, present_with(to_authenticate_response),
            ),
        }

    @property
    def operations(self) -> frozenset[str]:
        return frozenset(self._operations)

    async def execute(self, operation: str, request: object) -> DispatchResult:
        """Run request through the named pipeline. Never raises (except cancellation)."""
        pipeline = self._operations.get(operation)
        if pipeline is None:
            logger.error(
                f"Unknown operation '{operation}'",
                extra={"operation": operation, "error_code": "UNKNOWN_OPERATION"},
            )
            return failure_result(
                Failure(FailureKind.UNHANDLED, (UNEXPECTED_ERROR_MESSAGE,)),
            )
        try:
            return await self._run(operation, pipeline, request)
        except Exception as e:
            logger.error(
                f"Unhandled error in {operation}: {e}",
                exc_info=True,
                extra={"operation": operation, "failure_kind": FailureKind.UNHANDLED.value},
            )
            return failure_result(
                Failure(FailureKind.UNHANDLED, (UNEXPECTED_ERROR_MESSAGE,)),
            )

    async def _run(
        self, operation: str, pipeline: Operation, request: object,
    ) -> DispatchResult:
        field_errors = pipeline.validate(request)
        if field_errors:
            logger.warning(
                f"Validation failed for {operation}: "
                f"{[e.field for e in field_errors]}",
                extra={"operation": operation, "error_code": "VALIDATION_FAILED"},
            )
            return failure_result(Failure(
                FailureKind.VALIDATION_FAILED,
                tuple(e.format() for e in field_errors),
            ))

        command = pipeline.to_command(request)
        outcome = await pipeline.handle(command)

        if isinstance(outcome, Failure):
            logger.info(
                f"{pipeline.label} failed: {outcome.kind.value}",
                extra={
                    "operation": operation,
                    "failure_kind": outcome.kind.value,
                    "error_code": outcome.error_code,
                },
            )
            return failure_result(outcome)

        return DispatchResult(
            pipeline.success_status,
            pipeline.present(outcome, f"{pipeline.label} succeeded"),
        )
