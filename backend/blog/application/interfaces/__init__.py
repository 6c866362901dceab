from .article_repository import ArticleRepository
from .category_repository import CategoryRepository
from .tag_repository import TagRepository

__all__ = [
    "ArticleRepository",
    "CategoryRepository",
    "TagRepository",
]
