from .category import CategoryModel
from .tag import TagModel
from .article import ArticleModel, article_tags

__all__ = [
    "ArticleModel",
    "CategoryModel",
    "TagModel",
    "article_tags",
]
