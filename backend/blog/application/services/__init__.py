from .article_service import ArticleService
from .auth_service import AuthService
from .backup_service import BackupArchive, BackupService, sanitize_filename
from .category_service import CategoryService
from .pagination import parse_query_params
from .tag_service import TagService

__all__ = [
    "ArticleService",
    "AuthService",
    "BackupArchive",
    "BackupService",
    "CategoryService",
    "TagService",
    "parse_query_params",
    "sanitize_filename",
]
