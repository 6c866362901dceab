"""Login endpoint: exchanges admin credentials for a bearer token."""

from fastapi import APIRouter, Depends

from blog.application.schemas import LoginRequest, LoginResponse
from blog.application.services import AuthService
from blog.domain.exceptions import UnauthorizedError
from blog.infrastructure.dependencies import get_auth_service
from blog.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/auth", tags=["Auth"])


# Plain ``def``: bcrypt verification is CPU-bound, so FastAPI runs this in its threadpool.
@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    try:
        token = service.login(data.username, data.password)
    except UnauthorizedError as e:
        raise to_http_exception(e)
    return LoginResponse(token=token, username=data.username)
