"""Application service for Category operations."""

from blog.application.interfaces import CategoryRepository
from blog.application.schemas import CategoryCreate, CategoryUpdate
from blog.domain.entities import Category
from blog.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class CategoryService:
    """Category CRUD with name-uniqueness checks."""

    def __init__(self, repository: CategoryRepository):
        self._repository = repository

    async def get_category(self, category_id: int) -> Category:
        category = await self._repository.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError("Category", category_id)
        return category

    async def list_categories(self) -> list[Category]:
        return await self._repository.get_all()

    async def create_category(self, data: CategoryCreate) -> Category:
        if await self._repository.get_by_name(data.name) is not None:
            raise DuplicateEntityError("Category", "name", data.name)
        category = Category(name=data.name, description=data.description)
        return await self._repository.create(category)

    async def update_category(self, category_id: int, data: CategoryUpdate) -> Category:
        category = await self.get_category(category_id)
        existing = await self._repository.get_by_name(data.name)
        if existing is not None and existing.id != category_id:
            raise DuplicateEntityError("Category", "name", data.name)
        category.update(name=data.name, description=data.description)
        return await self._repository.update(category)

    async def delete_category(self, category_id: int) -> bool:
        deleted = await self._repository.delete(category_id)
        if not deleted:
            raise EntityNotFoundError("Category", category_id)
        return deleted
