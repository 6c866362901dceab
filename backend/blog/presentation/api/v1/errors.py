"""Domain exception → HTTP error translation shared by the v1 endpoints.

Every error response uses the same ``{code, message}`` envelope as successful
responses; validation failures also carry the field errors in ``data``.
"""

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.application.schemas import ApiResponse
from blog.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
    InternalError,
    InvalidInputError,
    UnauthorizedError,
)

_STATUS_BY_ERROR: tuple[tuple[type[Exception], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (DuplicateEntityError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def to_http_exception(error: Exception) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal server error")


def _envelope(status_code: int, message: str, data=None, headers=None) -> JSONResponse:
    body = ApiResponse(code=status_code, message=message, data=data)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render any HTTPException (including unknown routes) as ``{code, message}``."""
    return _envelope(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _envelope(
        422,
        "invalid request",
        data=jsonable_encoder(exc.errors()),
    )
