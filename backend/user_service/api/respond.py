"""Envelope -> HTTP response conversion shared by route modules."""

from fastapi.responses import JSONResponse

from user_service.schemas.envelope import Envelope
from user_service.services.request_dispatch import DispatchResult


def envelope_response(status_code: int, envelope: Envelope) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=envelope.model_dump(mode="json"),
    )


def dispatch_response(result: DispatchResult) -> JSONResponse:
    return envelope_response(result.status_code, result.envelope)
