"""Pydantic DTOs for the Tag feature."""

from datetime import datetime

from pydantic import BaseModel, Field

HEX_COLOR_PATTERN = r"^(?:#(?:[0-9a-fA-F]{3}){1,2})?$"


class TagCreate(BaseModel):
    """Schema for creating a tag; an absent color falls back to the default."""

    name: str = Field(..., min_length=1, max_length=50, examples=["python"])
    color: str | None = Field(None, pattern=HEX_COLOR_PATTERN, examples=["#3776ab"])


class TagUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    color: str | None = Field(None, pattern=HEX_COLOR_PATTERN)


class TagResponse(BaseModel):
    id: int
    name: str
    color: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
