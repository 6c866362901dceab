from dataclasses import dataclass, field
from datetime import datetime, timezone

DEFAULT_TAG_COLOR = "#007bff"


@dataclass
class Tag:
    """A label attached to any number of articles."""

    name: str
    color: str = DEFAULT_TAG_COLOR
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, name: str, color: str) -> None:
        self.name = name
        self.color = color
        self.updated_at = datetime.now(timezone.utc)
