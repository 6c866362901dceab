"""SQLAlchemy implementation of the CategoryRepository."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import CategoryRepository
from blog.domain.entities import Category
from blog.infrastructure.database.models import ArticleModel, CategoryModel


def category_to_entity(model: CategoryModel) -> Category:
    """Map ORM model → domain entity."""
    return Category(
        id=model.id,
        name=model.name,
        description=model.description,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class SQLAlchemyCategoryRepository(CategoryRepository):
    """Implements the CategoryRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, category_id: int) -> Category | None:
        model = await self._session.get(CategoryModel, category_id)
        return category_to_entity(model) if model else None

    async def get_by_name(self, name: str) -> Category | None:
        result = await self._session.execute(
            select(CategoryModel).where(CategoryModel.name == name)
        )
        model = result.scalar_one_or_none()
        return category_to_entity(model) if model else None

    async def get_all(self) -> list[Category]:
        result = await self._session.execute(
            select(CategoryModel).order_by(CategoryModel.created_at.desc(), CategoryModel.id.desc())
        )
        return [category_to_entity(m) for m in result.scalars().all()]

    async def create(self, category: Category) -> Category:
        model = CategoryModel(
            name=category.name,
            description=category.description,
        )
        self._session.add(model)
        await self._session.flush()
        return category_to_entity(model)

    async def update(self, category: Category) -> Category:
        model = await self._session.get(CategoryModel, category.id)
        if model is None:
            raise ValueError(f"Category {category.id} not found in database")
        model.name = category.name
        model.description = category.description
        model.updated_at = category.updated_at
        await self._session.flush()
        return category_to_entity(model)

    async def delete(self, category_id: int) -> bool:
        model = await self._session.get(CategoryModel, category_id)
        if model is None:
            return False
        # Articles outlive their category; they just lose the reference.
        await self._session.execute(
            update(ArticleModel)
            .where(ArticleModel.category_id == category_id)
            .values(category_id=None)
            .execution_options(synchronize_session=False)
        )
        await self._session.delete(model)
        await self._session.flush()
        return True
