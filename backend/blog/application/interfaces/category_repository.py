from abc import ABC, abstractmethod

from blog.domain.entities import Category


class CategoryRepository(ABC):
    """Port for category persistence."""

    @abstractmethod
    async def get_by_id(self, category_id: int) -> Category | None:
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Category | None:
        """Exact, case-sensitive name lookup."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Category]:
        ...

    @abstractmethod
    async def create(self, category: Category) -> Category:
        ...

    @abstractmethod
    async def update(self, category: Category) -> Category:
        ...

    @abstractmethod
    async def delete(self, category_id: int) -> bool:
        """Delete a category and clear it from referencing articles."""
        ...
