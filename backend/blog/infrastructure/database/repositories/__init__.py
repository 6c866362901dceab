from .article_repository import SQLAlchemyArticleRepository
from .category_repository import SQLAlchemyCategoryRepository
from .tag_repository import SQLAlchemyTagRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyTagRepository",
]
