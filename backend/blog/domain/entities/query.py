"""Domain value objects for article listings: filters and page metadata."""

import math
from dataclasses import dataclass, field

from .article import Article


@dataclass(frozen=True)
class QueryParams:
    """Listing filters.

    ``page`` and ``limit`` use 0 for "unset"; pagination only applies when
    both are positive. ``published`` is tri-state: None means "no filter",
    which is distinct from False ("drafts only").
    """

    page: int = 0
    limit: int = 0
    published: bool | None = None
    search: str = ""

    @property
    def is_paginated(self) -> bool:
        return self.page > 0 and self.limit > 0

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit if self.is_paginated else 0

    def page_meta(self, total: int) -> "PageMeta | None":
        """Page metadata for ``total`` matches, or None for an unpaginated listing."""
        if not self.is_paginated:
            return None
        return PageMeta(
            page=self.page,
            limit=self.limit,
            total=total,
            total_page=math.ceil(total / self.limit),
        )


@dataclass(frozen=True)
class PageMeta:
    page: int
    limit: int
    total: int
    total_page: int


@dataclass
class ArticlePage:
    """One listing result: the items, the filtered total, and optional page metadata."""

    items: list[Article] = field(default_factory=list)
    total: int = 0
    meta: PageMeta | None = None
