"""SQLAlchemy implementation of the TagRepository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import TagRepository
from blog.domain.entities import Tag
from blog.infrastructure.database.models import TagModel, article_tags


def tag_to_entity(model: TagModel) -> Tag:
    """Map ORM model → domain entity."""
    return Tag(
        id=model.id,
        name=model.name,
        color=model.color,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class SQLAlchemyTagRepository(TagRepository):
    """Implements the TagRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, tag_id: int) -> Tag | None:
        model = await self._session.get(TagModel, tag_id)
        return tag_to_entity(model) if model else None

    async def get_by_ids(self, tag_ids: list[int]) -> list[Tag]:
        if not tag_ids:
            return []
        result = await self._session.execute(
            select(TagModel).where(TagModel.id.in_(tag_ids)).order_by(TagModel.id)
        )
        return [tag_to_entity(m) for m in result.scalars().all()]

    async def get_by_name(self, name: str) -> Tag | None:
        result = await self._session.execute(select(TagModel).where(TagModel.name == name))
        model = result.scalar_one_or_none()
        return tag_to_entity(model) if model else None

    async def get_all(self) -> list[Tag]:
        result = await self._session.execute(
            select(TagModel).order_by(TagModel.created_at.desc(), TagModel.id.desc())
        )
        return [tag_to_entity(m) for m in result.scalars().all()]

    async def create(self, tag: Tag) -> Tag:
        model = TagModel(name=tag.name, color=tag.color)
        self._session.add(model)
        await self._session.flush()
        return tag_to_entity(model)

    async def update(self, tag: Tag) -> Tag:
        model = await self._session.get(TagModel, tag.id)
        if model is None:
            raise ValueError(f"Tag {tag.id} not found in database")
        model.name = tag.name
        model.color = tag.color
        model.updated_at = tag.updated_at
        await self._session.flush()
        return tag_to_entity(model)

    async def delete(self, tag_id: int) -> bool:
        model = await self._session.get(TagModel, tag_id)
        if model is None:
            return False
        await self._session.execute(delete(article_tags).where(article_tags.c.tag_id == tag_id))
        await self._session.delete(model)
        await self._session.flush()
        return True
