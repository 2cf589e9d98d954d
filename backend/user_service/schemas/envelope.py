"""Response Envelope — the single success/failure wrapper returned by every endpoint.

Invariants:
    - success=True  => data is set, errors is None or empty
    - success=False => data is None, errors is non-empty
    - Builders (ok_envelope, fail_envelope, paginated_envelope) are the only
      construction path used by the dispatcher and error handlers

Design Decisions:
    - Free builder functions over a base-controller helper hierarchy
    - One shape for all endpoints; PaginatedEnvelope only adds page counters
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, model_validator

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Uniform response wrapper."""
    success: bool
    message: str
    data: DataT | None = None
    errors: list[str] | None = None

    @model_validator(mode="after")
    def check_shape(self):
        if self.success:
            if self.data is None:
                raise ValueError("successful envelope requires data")
            if self.errors:
                raise ValueError("successful envelope cannot carry errors")
        else:
            if self.data is not None:
                raise ValueError("failed envelope cannot carry data")
            if not self.errors:
                raise ValueError("failed envelope requires at least one error")
        return self


class PaginatedEnvelope(Envelope[DataT], Generic[DataT]):
    """Envelope for list endpoints: data is one page of items."""
    current_page: int
    total_pages: int
    total_count: int


def ok_envelope(data: object, message: str = "Success") -> Envelope:
    return Envelope(success=True, message=message, data=data)


def fail_envelope(message: str, errors: list[str]) -> Envelope:
    return Envelope(success=False, message=message, errors=list(errors))


def paginated_envelope(
    items: list,
    current_page: int,
    total_pages: int,
    total_count: int,
    message: str = "Paged data returned",
) -> PaginatedEnvelope:
    return PaginatedEnvelope(
        success=True,
        message=message,
        data=list(items),
        current_page=current_page,
        total_pages=total_pages,
        total_count=total_count,
    )
