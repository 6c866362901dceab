"""Article export: builds a ZIP archive snapshot of every article.

Archive layout:

    articles_backup.json              manifest {backup_time, article_count, articles}
    articles/<id>_<safe-title>.json   one file per article (best effort)
    backup_info.txt                   human-readable summary

The manifest is authoritative. Per-article files are a convenience for
selective recovery: an article that cannot be serialized or written is
skipped and counted, and the export carries on. Failures while listing,
writing the manifest or closing the archive abort the export.
"""

import io
import json
import zipfile
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from blog.application.interfaces import ArticleRepository
from blog.application.schemas import ArticleResponse
from blog.domain.entities import Article, QueryParams
from blog.domain.exceptions import BackupError
from blog.infrastructure.logging.colored_logger import BackupStage, PipelineLogger

plog = PipelineLogger("BackupService")

BACKUP_FETCH_LIMIT = 10000
MANIFEST_NAME = "articles_backup.json"
ARTICLES_PREFIX = "articles/"
INFO_NAME = "backup_info.txt"
FILENAME_MAX_LENGTH = 50

_UNSAFE_FILENAME_CHARS = frozenset('/\\:*?"<>|')

_INFO_TEMPLATE = """博客文章备份
备份时间: {backup_time}
文章总数: {article_count}
备份格式: JSON
备份工具: blog backend

文件说明:
- articles_backup.json: 完整的文章备份数据
- articles/: 每个文章的单独文件
- backup_info.txt: 备份信息（本文件）
"""


def sanitize_filename(name: str, max_length: int = FILENAME_MAX_LENGTH) -> str:
    """Make ``name`` safe as an archive path component.

    Path separators, the characters ``: * ? " < > |`` and anything outside
    printable ASCII become ``_``; the result is cut to ``max_length``.
    """
    safe = "".join(
        "_" if ch in _UNSAFE_FILENAME_CHARS or not 32 <= ord(ch) <= 126 else ch
        for ch in name
    )
    return safe[:max_length]


def article_entry_name(article: Article) -> str:
    return f"{ARTICLES_PREFIX}{article.id}_{sanitize_filename(article.title)}.json"


@dataclass
class BackupArchive:
    """A finished export: the ZIP bytes plus what went into them."""

    content: bytes
    backup_time: datetime
    article_count: int
    skipped: int = 0

    @property
    def filename(self) -> str:
        return f"articles_backup_{self.backup_time:%Y%m%d_%H%M%S}.zip"


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _article_payload(article: Article) -> dict[str, Any]:
    """Archive form of an article; an absent category or empty tag list is left out."""
    payload = ArticleResponse.model_validate(article, from_attributes=True).model_dump(
        mode="json", exclude_none=True
    )
    if not payload.get("tags"):
        payload.pop("tags", None)
    return payload


def _encode(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")


class BackupService:
    """Exports all articles into an in-memory ZIP archive."""

    def __init__(
        self,
        repository: ArticleRepository,
        fetch_limit: int = BACKUP_FETCH_LIMIT,
        clock: Callable[[], datetime] = _local_now,
    ):
        self._repository = repository
        self._fetch_limit = fetch_limit
        self._clock = clock

    async def backup_all(self) -> BackupArchive:
        # One large page rather than a paging loop; fetch_limit is the ceiling.
        params = QueryParams(page=1, limit=self._fetch_limit)
        try:
            with plog.timed_step(BackupStage.LISTING, "Loading articles", limit=self._fetch_limit):
                articles, _ = await self._repository.get_all(params)
        except Exception as exc:
            raise BackupError("listing", str(exc)) from exc

        backup_time = self._clock()
        buffer = io.BytesIO()
        archive = zipfile.ZipFile(buffer, mode="w", compression=zipfile.ZIP_DEFLATED)

        try:
            with plog.timed_step(BackupStage.MANIFEST, "Writing manifest", articles=len(articles)):
                manifest = {
                    "backup_time": backup_time.isoformat(),
                    "article_count": len(articles),
                    "articles": [_article_payload(article) for article in articles],
                }
                archive.writestr(MANIFEST_NAME, _encode(manifest))
        except Exception as exc:
            archive.close()
            raise BackupError("manifest", str(exc)) from exc

        skipped = self._write_articles(archive, articles)
        self._write_info(archive, backup_time, len(articles))

        try:
            with plog.timed_step(BackupStage.FINALIZE, "Closing archive"):
                archive.close()
        except Exception as exc:
            raise BackupError("finalize", str(exc)) from exc

        content = buffer.getvalue()
        plog.step_complete(BackupStage.COMPLETE, "Backup ready")
        plog.stats(articles=len(articles), skipped=skipped, size_bytes=len(content))
        return BackupArchive(
            content=content,
            backup_time=backup_time,
            article_count=len(articles),
            skipped=skipped,
        )

    @staticmethod
    def _write_articles(archive: zipfile.ZipFile, articles: list[Article]) -> int:
        """Write one entry per article; returns how many were skipped."""
        plog.step_start(BackupStage.ARTICLES, "Writing article entries", count=len(articles))
        skipped = 0
        for article in articles:
            try:
                name = article_entry_name(article)
                archive.writestr(name, _encode(_article_payload(article)))
                plog.detail("Wrote entry", name=name)
            except Exception as exc:
                skipped += 1
                plog.warning(
                    BackupStage.ARTICLES,
                    "Skipping article entry",
                    article_id=article.id,
                    error=f"{type(exc).__name__}: {exc}",
                )
        plog.step_complete(BackupStage.ARTICLES, "Article entries written", skipped=skipped)
        return skipped

    @staticmethod
    def _write_info(archive: zipfile.ZipFile, backup_time: datetime, article_count: int) -> None:
        info = _INFO_TEMPLATE.format(
            backup_time=f"{backup_time:%Y-%m-%d %H:%M:%S}",
            article_count=article_count,
        )
        try:
            archive.writestr(INFO_NAME, info.encode("utf-8"))
        except Exception as exc:
            plog.warning(BackupStage.INFO, "Could not write info entry", error=str(exc))
