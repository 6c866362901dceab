"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog.domain.entities import Article, QueryParams


class ArticleRepository(ABC):
    """Port for article persistence, implemented in the infrastructure layer.

    Listing methods return ``(items, total)`` where ``total`` counts every
    match of the filter, not just the returned page.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article with its category and tags resolved."""
        ...

    @abstractmethod
    async def get_all(self, params: QueryParams) -> tuple[list[Article], int]:
        """Filter by published flag and search text, newest first."""
        ...

    @abstractmethod
    async def list_by_category(
        self, category_id: int, params: QueryParams
    ) -> tuple[list[Article], int]:
        """Articles of one category, filtered by published flag only."""
        ...

    @abstractmethod
    async def list_by_tag(self, tag_id: int, params: QueryParams) -> tuple[list[Article], int]:
        """Articles carrying one tag, filtered by published flag only."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and its associations, return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Replace an existing article's fields, category and tag set."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
