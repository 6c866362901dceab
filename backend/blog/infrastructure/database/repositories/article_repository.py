"""Concrete repository implementation backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import Article, QueryParams
from blog.infrastructure.database.models import ArticleModel, CategoryModel, TagModel

from .category_repository import category_to_entity
from .tag_repository import tag_to_entity


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Search is a case-insensitive substring match on title or content
    (``ILIKE`` with ``%``/``_`` escaped), identical on PostgreSQL and SQLite.
    Listings are ordered newest first, ties broken by id descending.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            summary=model.summary,
            published=model.published,
            category=category_to_entity(model.category) if model.category else None,
            tags=[tag_to_entity(tag) for tag in model.tags],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def _load(self, article_id: int) -> ArticleModel | None:
        return await self._session.get(ArticleModel, article_id, populate_existing=True)

    async def _category_model(self, article: Article) -> CategoryModel | None:
        if article.category_id is None:
            return None
        return await self._session.get(CategoryModel, article.category_id)

    async def _tag_models(self, article: Article) -> list[TagModel]:
        tag_ids = article.tag_ids
        if not tag_ids:
            return []
        result = await self._session.execute(select(TagModel).where(TagModel.id.in_(tag_ids)))
        return list(result.scalars().all())

    async def get_by_id(self, article_id: int) -> Article | None:
        model = await self._load(article_id)
        return self._to_entity(model) if model else None

    async def get_all(self, params: QueryParams) -> tuple[list[Article], int]:
        conditions: list[Any] = []
        if params.search:
            conditions.append(
                ArticleModel.title.icontains(params.search, autoescape=True)
                | ArticleModel.content.icontains(params.search, autoescape=True)
            )
        return await self._paginate(params, conditions)

    async def list_by_category(
        self, category_id: int, params: QueryParams
    ) -> tuple[list[Article], int]:
        return await self._paginate(params, [ArticleModel.category_id == category_id])

    async def list_by_tag(self, tag_id: int, params: QueryParams) -> tuple[list[Article], int]:
        return await self._paginate(params, [ArticleModel.tags.any(TagModel.id == tag_id)])

    async def _paginate(
        self, params: QueryParams, conditions: list[Any]
    ) -> tuple[list[Article], int]:
        """Apply the published filter, count, then slice; count and page share one predicate."""
        if params.published is not None:
            conditions = [*conditions, ArticleModel.published == params.published]

        count_stmt = select(func.count()).select_from(ArticleModel).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(ArticleModel)
            .where(*conditions)
            .order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())
            .execution_options(populate_existing=True)
        )
        if params.is_paginated:
            stmt = stmt.offset(params.offset).limit(params.limit)

        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()], total

    async def create(self, article: Article) -> Article:
        model = ArticleModel(
            title=article.title,
            content=article.content,
            summary=article.summary,
            published=article.published,
            category=await self._category_model(article),
            tags=await self._tag_models(article),
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._load(article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.content = article.content
        model.summary = article.summary
        model.published = article.published
        model.category = await self._category_model(article)
        model.tags = await self._tag_models(article)
        model.updated_at = article.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._load(article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
