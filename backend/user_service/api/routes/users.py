"""User Routes — create, read, list and delete users.

Invariants:
    - Every response body is an Envelope; status comes from DispatchResult
    - Path IDs are passed through as raw strings (validated by the pipeline)
    - /users/me requires a bearer token; the other routes do not
"""

import logging

from fastapi import APIRouter, Depends, Query

from user_service.api.dependencies import get_caller_identity, get_dispatch
from user_service.api.respond import dispatch_response
from user_service.core.identity import CallerIdentity
from user_service.schemas.users import (
    CreateUserRequest, GetUserRequest, DeleteUserRequest, ListUsersRequest,
)
from user_service.services.request_dispatch import RequestDispatch

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
async def create_user(
    body: CreateUserRequest, dispatch: RequestDispatch = Depends(get_dispatch),
):
    """Create a new user. 201 on success."""
    logger.info("Received request to create user")
    return dispatch_response(await dispatch.execute("create_user", body))


@router.get("")
async def list_users(
    page: int = Query(1),
    size: int = Query(10),
    dispatch: RequestDispatch = Depends(get_dispatch),
):
    """List users, newest first, one page at a time."""
    request = ListUsersRequest(page=page, size=size)
    return dispatch_response(await dispatch.execute("list_users", request))


@router.get("/me")
async def get_current_user(
    identity: CallerIdentity = Depends(get_caller_identity),
    dispatch: RequestDispatch = Depends(get_dispatch),
):
    """Return the authenticated caller's own record."""
    request = GetUserRequest(id=str(identity.user_id))
    return dispatch_response(await dispatch.execute("get_user", request))


@router.get("/{user_id}")
async def get_user(
    user_id: str, dispatch: RequestDispatch = Depends(get_dispatch),
):
    logger.info(f"Received request to retrieve user: {user_id}")
    request = GetUserRequest(id=user_id)
    return dispatch_response(await dispatch.execute("get_user", request))


@router.delete("/{user_id}")
async def delete_user(
    user_id: str, dispatch: RequestDispatch = Depends(get_dispatch),
):
    logger.info(f"Received request to delete user: {user_id}")
    request = DeleteUserRequest(id=user_id)
    return dispatch_response(await dispatch.execute("delete_user", request))
