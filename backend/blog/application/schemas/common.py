"""Response envelopes shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PageMetaSchema(BaseModel):
    page: int
    limit: int
    total: int
    total_page: int

    model_config = {"from_attributes": True}


class ApiResponse(BaseModel, Generic[T]):
    """Standard envelope: ``{code, message, data}``."""

    code: int = 200
    message: str = "success"
    data: T | None = None


class PagedResponse(ApiResponse[T], Generic[T]):
    """Envelope for paginated listings, with page metadata."""

    meta: PageMetaSchema
