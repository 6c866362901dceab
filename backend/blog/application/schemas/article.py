"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from .category import CategoryResponse
from .tag import TagResponse


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=200, examples=["Getting Started with Go"])
    content: str = Field(..., min_length=1, examples=["This is an introductory article."])
    summary: str = Field("", max_length=500)
    published: bool = False
    category_id: int | None = None
    tag_ids: list[int] = Field(default_factory=list)


class ArticleUpdate(BaseModel):
    """Schema for updating an article. Updates are a full replace."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    summary: str = Field("", max_length=500)
    published: bool = False
    category_id: int | None = None
    tag_ids: list[int] = Field(default_factory=list)


class ArticleResponse(BaseModel):
    """Schema returned to the client and written into backup archives."""

    id: int
    title: str
    content: str
    summary: str
    published: bool
    created_at: datetime
    updated_at: datetime
    category: CategoryResponse | None = None
    tags: list[TagResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}
