from .article import ArticleCreate, ArticleUpdate, ArticleResponse
from .category import CategoryCreate, CategoryUpdate, CategoryResponse
from .tag import TagCreate, TagUpdate, TagResponse
from .auth import LoginRequest, LoginResponse
from .common import ApiResponse, PagedResponse, PageMetaSchema

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "TagCreate",
    "TagUpdate",
    "TagResponse",
    "LoginRequest",
    "LoginResponse",
    "ApiResponse",
    "PagedResponse",
    "PageMetaSchema",
]
