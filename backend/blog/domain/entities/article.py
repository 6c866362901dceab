"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .category import Category
from .tag import Tag


@dataclass
class Article:
    """Core domain entity representing a blog article."""

    title: str
    content: str
    summary: str = ""
    published: bool = False
    id: int | None = None
    category: Category | None = None
    tags: list[Tag] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def category_id(self) -> int | None:
        return self.category.id if self.category else None

    @property
    def tag_ids(self) -> list[int]:
        return [tag.id for tag in self.tags if tag.id is not None]

    def replace(
        self,
        title: str,
        content: str,
        summary: str,
        published: bool,
        category: Category | None,
        tags: list[Tag],
    ) -> None:
        """Full replace of the editable fields; refreshes the updated_at timestamp."""
        self.title = title
        self.content = content
        self.summary = summary
        self.published = published
        self.category = category
        self.tags = list(tags)
        self.updated_at = datetime.now(timezone.utc)
