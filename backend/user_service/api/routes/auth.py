"""Auth Routes — exchange credentials for a bearer token."""

import logging

from fastapi import APIRouter, Depends

from user_service.api.dependencies import get_dispatch
from user_service.api.respond import dispatch_response
from user_service.schemas.auth import AuthenticateRequest
from user_service.services.request_dispatch import RequestDispatch

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("")
async def authenticate(
    body: AuthenticateRequest, dispatch: RequestDispatch = Depends(get_dispatch),
):
    """Authenticate with email + password. 200 with token, or 401."""
    logger.info("Received authentication request")
    return dispatch_response(await dispatch.execute("authenticate", body))
