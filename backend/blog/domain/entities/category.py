from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Category:
    """A named grouping; an article belongs to at most one category."""

    name: str
    description: str = ""
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        self.updated_at = datetime.now(timezone.utc)
