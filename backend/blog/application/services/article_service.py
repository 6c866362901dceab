"""Application service (use case) for Article operations."""

from blog.application.interfaces import ArticleRepository, CategoryRepository, TagRepository
from blog.application.schemas import ArticleCreate, ArticleUpdate
from blog.domain.entities import Article, ArticlePage, Category, QueryParams, Tag
from blog.domain.exceptions import EntityNotFoundError, InvalidInputError


class ArticleService:
    """Orchestrates article business logic. Depends on the repository ports (DI)."""

    def __init__(
        self,
        repository: ArticleRepository,
        category_repository: CategoryRepository,
        tag_repository: TagRepository,
    ):
        self._repository = repository
        self._categories = category_repository
        self._tags = tag_repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self, params: QueryParams) -> ArticlePage:
        items, total = await self._repository.get_all(params)
        return ArticlePage(items=items, total=total, meta=params.page_meta(total))

    async def list_by_category(self, category_id: int, params: QueryParams) -> ArticlePage:
        if await self._categories.get_by_id(category_id) is None:
            raise EntityNotFoundError("Category", category_id)
        items, total = await self._repository.list_by_category(category_id, params)
        return ArticlePage(items=items, total=total, meta=params.page_meta(total))

    async def list_by_tag(self, tag_id: int, params: QueryParams) -> ArticlePage:
        if await self._tags.get_by_id(tag_id) is None:
            raise EntityNotFoundError("Tag", tag_id)
        items, total = await self._repository.list_by_tag(tag_id, params)
        return ArticlePage(items=items, total=total, meta=params.page_meta(total))

    async def create_article(self, data: ArticleCreate) -> Article:
        category = await self._resolve_category(data.category_id)
        tags = await self._resolve_tags(data.tag_ids)
        article = Article(
            title=data.title,
            content=data.content,
            summary=data.summary,
            published=data.published,
            category=category,
            tags=tags,
        )
        return await self._repository.create(article)

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        category = await self._resolve_category(data.category_id)
        tags = await self._resolve_tags(data.tag_ids)
        article.replace(
            title=data.title,
            content=data.content,
            summary=data.summary,
            published=data.published,
            category=category,
            tags=tags,
        )
        return await self._repository.update(article)

    async def delete_article(self, article_id: int) -> bool:
        deleted = await self._repository.delete(article_id)
        if not deleted:
            raise EntityNotFoundError("Article", article_id)
        return deleted

    # ── Referential validation ───────────────────────────────────────

    async def _resolve_category(self, category_id: int | None) -> Category | None:
        if category_id is None:
            return None
        category = await self._categories.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError("Category", category_id)
        return category

    async def _resolve_tags(self, tag_ids: list[int]) -> list[Tag]:
        """All-or-nothing: every requested id must resolve, duplicates included."""
        if not tag_ids:
            return []
        tags = await self._tags.get_by_ids(tag_ids)
        if len(tags) != len(tag_ids):
            raise InvalidInputError("some tag ids do not exist")
        return tags
