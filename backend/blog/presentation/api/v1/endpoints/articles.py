"""Article CRUD, scoped listing and backup endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from blog.application.schemas import (
    ApiResponse,
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    PagedResponse,
    PageMetaSchema,
)
from blog.application.services import ArticleService, BackupService, parse_query_params
from blog.config import get_settings
from blog.domain.entities import ArticlePage, QueryParams
from blog.domain.exceptions import BackupError, EntityNotFoundError, InvalidInputError
from blog.infrastructure.dependencies import get_article_service, get_backup_service, require_auth
from blog.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/articles", tags=["Articles"])


# ── Helpers ──────────────────────────────────────────────────────────


def get_query_params(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    published: str | None = Query(None),
    search: str | None = Query(None),
) -> QueryParams:
    """Lenient parsing: bad page/limit values are ignored rather than rejected."""
    settings = get_settings()
    return parse_query_params(
        page=page,
        limit=limit,
        published=published,
        search=search,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )


def _page_to_response(page: ArticlePage) -> ApiResponse:
    items = [ArticleResponse.model_validate(a, from_attributes=True) for a in page.items]
    if page.meta is not None:
        return PagedResponse[list[ArticleResponse]](
            data=items,
            meta=PageMetaSchema.model_validate(page.meta, from_attributes=True),
        )
    return ApiResponse[list[ArticleResponse]](data=items)


# ── Reads ────────────────────────────────────────────────────────────


@router.get("", response_model=None)
async def list_articles(
    params: QueryParams = Depends(get_query_params),
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse:
    """List articles, optionally filtered by published flag and search text."""
    page = await service.list_articles(params)
    return _page_to_response(page)


@router.get("/backup", dependencies=[Depends(require_auth)])
async def backup_articles(
    service: BackupService = Depends(get_backup_service),
) -> Response:
    """Download every article as a ZIP archive."""
    try:
        archive = await service.backup_all()
    except BackupError as e:
        raise to_http_exception(e)
    return Response(
        content=archive.content,
        media_type="application/zip",
        headers={
            "Content-Disposition": f'attachment; filename="{archive.filename}"',
        },
    )


@router.get("/category/{category_id}", response_model=None)
async def list_articles_by_category(
    category_id: int,
    params: QueryParams = Depends(get_query_params),
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse:
    try:
        page = await service.list_by_category(category_id, params)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _page_to_response(page)


@router.get("/tag/{tag_id}", response_model=None)
async def list_articles_by_tag(
    tag_id: int,
    params: QueryParams = Depends(get_query_params),
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse:
    try:
        page = await service.list_by_tag(tag_id, params)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _page_to_response(page)


@router.get("/{article_id}", response_model=ApiResponse[ArticleResponse])
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse[ArticleResponse]:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data=ArticleResponse.model_validate(article, from_attributes=True))


# ── Writes (authenticated) ───────────────────────────────────────────


@router.post(
    "",
    response_model=ApiResponse[ArticleResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_auth)],
)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse[ArticleResponse]:
    """Create a new article; category and tag ids must all exist."""
    try:
        article = await service.create_article(data)
    except (EntityNotFoundError, InvalidInputError) as e:
        raise to_http_exception(e)
    return ApiResponse(
        code=status.HTTP_201_CREATED,
        message="created",
        data=ArticleResponse.model_validate(article, from_attributes=True),
    )


@router.put(
    "/{article_id}",
    response_model=ApiResponse[ArticleResponse],
    dependencies=[Depends(require_auth)],
)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse[ArticleResponse]:
    """Replace an article's fields, category and tags."""
    try:
        article = await service.update_article(article_id, data)
    except (EntityNotFoundError, InvalidInputError) as e:
        raise to_http_exception(e)
    return ApiResponse(data=ArticleResponse.model_validate(article, from_attributes=True))


@router.delete(
    "/{article_id}",
    response_model=ApiResponse[dict],
    dependencies=[Depends(require_auth)],
)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse[dict]:
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data={"message": "article deleted"})
