from .article import Article
from .category import Category
from .tag import DEFAULT_TAG_COLOR, Tag
from .query import ArticlePage, PageMeta, QueryParams

__all__ = [
    "Article",
    "Category",
    "Tag",
    "DEFAULT_TAG_COLOR",
    "ArticlePage",
    "PageMeta",
    "QueryParams",
]
