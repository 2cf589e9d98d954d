"""Auth Schemas — credentials in, bearer token out."""

from pydantic import BaseModel, ConfigDict


class AuthenticateRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str | None = None
    password: str | None = None


class AuthenticateResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    email: str
    username: str
    role: str
