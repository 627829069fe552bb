from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


SectionType = Literal[
    "full-width-text",
    "full-width-media",
    "left-media-right-text",
    "left-text-right-media",
]


class ArticleSectionIn(BaseModel):
    # The editor sends camelCase media keys.
    model_config = ConfigDict(populate_by_name=True)

    type: SectionType = "full-width-text"
    title: str | None = None
    subtitle: str | None = None
    text: str | None = None
    media_url: str | None = Field(default=None, alias="mediaUrl")
    media_subtext: str | None = Field(default=None, alias="mediaSubtext")
    order: int | None = Field(default=None, ge=0)


class ArticleSectionOut(BaseModel):
    id: int
    type: str
    title: str | None = None
    subtitle: str | None = None
    text: str | None = None
    mediaUrl: str | None = None
    mediaSubtext: str | None = None
    order: int


class ArticleWrite(BaseModel):
    title: str | None = None
    tags: list[str] = Field(default_factory=list)
    citations: list[str] = Field(default_factory=list)
    contributors: list[str] = Field(default_factory=list)
    related_media: list[str] = Field(default_factory=list)
    sections: list[ArticleSectionIn] = Field(default_factory=list)


class ArticleRead(BaseModel):
    id: int
    user_id: int
    username: str | None = None
    title: str
    tags: list[str] = Field(default_factory=list)
    citations: list[str] = Field(default_factory=list)
    contributors: list[str] = Field(default_factory=list)
    related_media: list[str] = Field(default_factory=list)
    sections: list[ArticleSectionOut] = Field(default_factory=list)
    likes_count: int = 0
    follows_count: int = 0
    watches_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ArticleListResponse(BaseModel):
    data: list[ArticleRead]
    total: int
    page: int
    limit: int


class ArticleMediaResponse(BaseModel):
    mediaUrl: str
