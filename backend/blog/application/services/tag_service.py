"""Application service for Tag operations."""

from blog.application.interfaces import TagRepository
from blog.application.schemas import TagCreate, TagUpdate
from blog.domain.entities import DEFAULT_TAG_COLOR, Tag
from blog.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class TagService:
    """Tag CRUD with name-uniqueness checks and a default color."""

    def __init__(self, repository: TagRepository, default_color: str = DEFAULT_TAG_COLOR):
        self._repository = repository
        self._default_color = default_color

    async def get_tag(self, tag_id: int) -> Tag:
        tag = await self._repository.get_by_id(tag_id)
        if tag is None:
            raise EntityNotFoundError("Tag", tag_id)
        return tag

    async def list_tags(self) -> list[Tag]:
        return await self._repository.get_all()

    async def create_tag(self, data: TagCreate) -> Tag:
        if await self._repository.get_by_name(data.name) is not None:
            raise DuplicateEntityError("Tag", "name", data.name)
        tag = Tag(name=data.name, color=data.color or self._default_color)
        return await self._repository.create(tag)

    async def update_tag(self, tag_id: int, data: TagUpdate) -> Tag:
        tag = await self.get_tag(tag_id)
        existing = await self._repository.get_by_name(data.name)
        if existing is not None and existing.id != tag_id:
            raise DuplicateEntityError("Tag", "name", data.name)
        tag.update(name=data.name, color=data.color or self._default_color)
        return await self._repository.update(tag)

    async def delete_tag(self, tag_id: int) -> bool:
        deleted = await self._repository.delete(tag_id)
        if not deleted:
            raise EntityNotFoundError("Tag", tag_id)
        return deleted
