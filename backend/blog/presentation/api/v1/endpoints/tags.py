"""Tag CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from blog.application.schemas import ApiResponse, TagCreate, TagResponse, TagUpdate
from blog.application.services import TagService
from blog.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from blog.infrastructure.dependencies import get_tag_service, require_auth
from blog.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/tags", tags=["Tags"])


@router.get("", response_model=ApiResponse[list[TagResponse]])
async def list_tags(
    service: TagService = Depends(get_tag_service),
) -> ApiResponse[list[TagResponse]]:
    tags = await service.list_tags()
    return ApiResponse(data=[TagResponse.model_validate(t, from_attributes=True) for t in tags])


@router.get("/{tag_id}", response_model=ApiResponse[TagResponse])
async def get_tag(
    tag_id: int,
    service: TagService = Depends(get_tag_service),
) -> ApiResponse[TagResponse]:
    try:
        tag = await service.get_tag(tag_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data=TagResponse.model_validate(tag, from_attributes=True))


@router.post(
    "",
    response_model=ApiResponse[TagResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_auth)],
)
async def create_tag(
    data: TagCreate,
    service: TagService = Depends(get_tag_service),
) -> ApiResponse[TagResponse]:
    """Create a tag; a missing color falls back to the default."""
    try:
        tag = await service.create_tag(data)
    except DuplicateEntityError as e:
        raise to_http_exception(e)
    return ApiResponse(
        code=status.HTTP_201_CREATED,
        message="created",
        data=TagResponse.model_validate(tag, from_attributes=True),
    )


@router.put(
    "/{tag_id}",
    response_model=ApiResponse[TagResponse],
    dependencies=[Depends(require_auth)],
)
async def update_tag(
    tag_id: int,
    data: TagUpdate,
    service: TagService = Depends(get_tag_service),
) -> ApiResponse[TagResponse]:
    try:
        tag = await service.update_tag(tag_id, data)
    except (EntityNotFoundError, DuplicateEntityError) as e:
        raise to_http_exception(e)
    return ApiResponse(data=TagResponse.model_validate(tag, from_attributes=True))


@router.delete(
    "/{tag_id}",
    response_model=ApiResponse[dict],
    dependencies=[Depends(require_auth)],
)
async def delete_tag(
    tag_id: int,
    service: TagService = Depends(get_tag_service),
) -> ApiResponse[dict]:
    try:
        await service.delete_tag(tag_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data={"message": "tag deleted"})
