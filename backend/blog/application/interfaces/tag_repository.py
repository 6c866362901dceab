from abc import ABC, abstractmethod

from blog.domain.entities import Tag


class TagRepository(ABC):
    """Port for tag persistence."""

    @abstractmethod
    async def get_by_id(self, tag_id: int) -> Tag | None:
        ...

    @abstractmethod
    async def get_by_ids(self, tag_ids: list[int]) -> list[Tag]:
        """Resolve the given ids; ids that do not exist are simply absent from the result."""
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Tag | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Tag]:
        ...

    @abstractmethod
    async def create(self, tag: Tag) -> Tag:
        ...

    @abstractmethod
    async def update(self, tag: Tag) -> Tag:
        ...

    @abstractmethod
    async def delete(self, tag_id: int) -> bool:
        """Delete a tag and its article associations."""
        ...
