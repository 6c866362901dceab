"""Unit tests for the ArticleService."""

import pytest

from blog.application.schemas import ArticleCreate, ArticleUpdate
from blog.application.services import ArticleService
from blog.domain.entities import Category, QueryParams, Tag
from blog.domain.exceptions import EntityNotFoundError, InvalidInputError
from tests.unit.fakes import FakeArticleRepository, FakeCategoryRepository, FakeTagRepository


@pytest.fixture
def articles() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def categories() -> FakeCategoryRepository:
    return FakeCategoryRepository()


@pytest.fixture
def tags() -> FakeTagRepository:
    return FakeTagRepository()


@pytest.fixture
def service(articles, categories, tags) -> ArticleService:
    return ArticleService(articles, categories, tags)


@pytest.mark.asyncio
async def test_create_article(service: ArticleService):
    data = ArticleCreate(title="Test Article", content="Some content", summary="Short")
    article = await service.create_article(data)
    assert article.id is not None
    assert article.title == "Test Article"
    assert article.summary == "Short"
    assert article.published is False
    assert article.category is None
    assert article.tags == []


@pytest.mark.asyncio
async def test_create_article_resolves_category_and_tags(service, categories, tags):
    category = await categories.create(Category(name="Tech"))
    go = await tags.create(Tag(name="go"))
    web = await tags.create(Tag(name="web"))

    article = await service.create_article(
        ArticleCreate(title="T", content="C", category_id=category.id, tag_ids=[go.id, web.id])
    )

    assert article.category.name == "Tech"
    assert {t.name for t in article.tags} == {"go", "web"}


@pytest.mark.asyncio
async def test_create_article_with_missing_tag_persists_nothing(service, articles, tags):
    await tags.create(Tag(name="only"))

    with pytest.raises(InvalidInputError):
        await service.create_article(ArticleCreate(title="T", content="C", tag_ids=[1, 2]))

    assert articles.count == 0


@pytest.mark.asyncio
async def test_create_article_with_duplicate_tag_ids_is_rejected(service, tags):
    await tags.create(Tag(name="one"))

    with pytest.raises(InvalidInputError):
        await service.create_article(ArticleCreate(title="T", content="C", tag_ids=[1, 1]))


@pytest.mark.asyncio
async def test_create_article_with_missing_category(service, articles):
    with pytest.raises(EntityNotFoundError):
        await service.create_article(ArticleCreate(title="T", content="C", category_id=42))
    assert articles.count == 0


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_update_article_replaces_everything(service, categories, tags):
    category = await categories.create(Category(name="Tech"))
    tag = await tags.create(Tag(name="go"))
    created = await service.create_article(
        ArticleCreate(title="Old", content="Old content", category_id=category.id, tag_ids=[tag.id])
    )

    updated = await service.update_article(
        created.id, ArticleUpdate(title="New", content="New content", published=True)
    )

    assert updated.title == "New"
    assert updated.content == "New content"
    assert updated.published is True
    assert updated.category is None
    assert updated.tags == []
    assert updated.updated_at >= updated.created_at


@pytest.mark.asyncio
async def test_update_missing_article(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(5, ArticleUpdate(title="T", content="C"))


@pytest.mark.asyncio
async def test_update_article_with_missing_tag(service: ArticleService):
    created = await service.create_article(ArticleCreate(title="T", content="C"))
    with pytest.raises(InvalidInputError):
        await service.update_article(created.id, ArticleUpdate(title="T", content="C", tag_ids=[7]))


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService):
    created = await service.create_article(ArticleCreate(title="Delete Me", content="..."))
    result = await service.delete_article(created.id)
    assert result is True
    with pytest.raises(EntityNotFoundError):
        await service.get_article(created.id)


@pytest.mark.asyncio
async def test_delete_missing_article(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.delete_article(1)


@pytest.mark.asyncio
async def test_list_articles_with_pagination_returns_meta(service: ArticleService):
    for i in range(23):
        await service.create_article(ArticleCreate(title=f"A{i}", content="C"))

    page = await service.list_articles(QueryParams(page=3, limit=10))

    assert page.total == 23
    assert len(page.items) == 3
    assert page.meta is not None
    assert page.meta.total_page == 3
    assert page.meta.page == 3


@pytest.mark.asyncio
async def test_list_articles_without_pagination_has_no_meta(service: ArticleService):
    await service.create_article(ArticleCreate(title="A1", content="C1"))
    await service.create_article(ArticleCreate(title="A2", content="C2"))

    page = await service.list_articles(QueryParams())

    assert len(page.items) == 2
    assert page.total == 2
    assert page.meta is None


@pytest.mark.asyncio
async def test_list_by_category_requires_existing_category(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.list_by_category(3, QueryParams())


@pytest.mark.asyncio
async def test_list_by_tag_filters_published(service, tags):
    tag = await tags.create(Tag(name="go"))
    await service.create_article(ArticleCreate(title="Draft", content="C", tag_ids=[tag.id]))
    await service.create_article(
        ArticleCreate(title="Live", content="C", published=True, tag_ids=[tag.id])
    )
    await service.create_article(ArticleCreate(title="Other", content="C", published=True))

    page = await service.list_by_tag(tag.id, QueryParams(published=True))

    assert [a.title for a in page.items] == ["Live"]
    assert page.total == 1


@pytest.mark.asyncio
async def test_list_by_tag_requires_existing_tag(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.list_by_tag(9, QueryParams())
