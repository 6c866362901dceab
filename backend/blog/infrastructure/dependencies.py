"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.services import (
    ArticleService,
    AuthService,
    BackupService,
    CategoryService,
    TagService,
)
from blog.config import get_settings
from blog.domain.exceptions import UnauthorizedError
from blog.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyTagRepository,
)
from blog.infrastructure.database.session import get_db_session

bearer_scheme = HTTPBearer(auto_error=False)


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService with article, category and tag repositories wired up."""
    yield ArticleService(
        SQLAlchemyArticleRepository(session),
        SQLAlchemyCategoryRepository(session),
        SQLAlchemyTagRepository(session),
    )


async def get_category_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CategoryService, None]:
    yield CategoryService(SQLAlchemyCategoryRepository(session))


async def get_tag_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[TagService, None]:
    settings = get_settings()
    yield TagService(SQLAlchemyTagRepository(session), default_color=settings.default_tag_color)


async def get_backup_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[BackupService, None]:
    settings = get_settings()
    yield BackupService(
        SQLAlchemyArticleRepository(session),
        fetch_limit=settings.backup_fetch_limit,
    )


@lru_cache
def get_auth_service() -> AuthService:
    """Process-wide AuthService; the admin password is hashed once per process."""
    settings = get_settings()
    return AuthService(
        secret=settings.jwt_secret,
        admin_username=settings.admin_username,
        admin_password_hash=AuthService.hash_password(settings.admin_password),
        algorithm=settings.jwt_algorithm,
        expiration=timedelta(minutes=settings.jwt_expiration_minutes),
    )


async def require_auth(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> str:
    """Guards write endpoints and returns the authenticated username."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return auth_service.validate_token(credentials.credentials)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
