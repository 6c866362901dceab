"""Category CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from blog.application.schemas import ApiResponse, CategoryCreate, CategoryResponse, CategoryUpdate
from blog.application.services import CategoryService
from blog.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from blog.infrastructure.dependencies import get_category_service, require_auth
from blog.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=ApiResponse[list[CategoryResponse]])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> ApiResponse[list[CategoryResponse]]:
    categories = await service.list_categories()
    return ApiResponse(
        data=[CategoryResponse.model_validate(c, from_attributes=True) for c in categories]
    )


@router.get("/{category_id}", response_model=ApiResponse[CategoryResponse])
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> ApiResponse[CategoryResponse]:
    try:
        category = await service.get_category(category_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data=CategoryResponse.model_validate(category, from_attributes=True))


@router.post(
    "",
    response_model=ApiResponse[CategoryResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_auth)],
)
async def create_category(
    data: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
) -> ApiResponse[CategoryResponse]:
    """Create a category; names are unique."""
    try:
        category = await service.create_category(data)
    except DuplicateEntityError as e:
        raise to_http_exception(e)
    return ApiResponse(
        code=status.HTTP_201_CREATED,
        message="created",
        data=CategoryResponse.model_validate(category, from_attributes=True),
    )


@router.put(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    dependencies=[Depends(require_auth)],
)
async def update_category(
    category_id: int,
    data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
) -> ApiResponse[CategoryResponse]:
    try:
        category = await service.update_category(category_id, data)
    except (EntityNotFoundError, DuplicateEntityError) as e:
        raise to_http_exception(e)
    return ApiResponse(data=CategoryResponse.model_validate(category, from_attributes=True))


@router.delete(
    "/{category_id}",
    response_model=ApiResponse[dict],
    dependencies=[Depends(require_auth)],
)
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> ApiResponse[dict]:
    """Delete a category; its articles are kept without a category."""
    try:
        await service.delete_category(category_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data={"message": "category deleted"})
