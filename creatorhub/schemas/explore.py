from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


CONTENT_KINDS: tuple[str, ...] = ("users", "projects", "articles", "posts")


class SearchParams(BaseModel):
    q: str = ""
    content_types: list[str] = Field(default_factory=list)
    user_types: list[str] = Field(default_factory=list)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=12, ge=1)
    sort_by: str | None = None
    sort_order: str | None = None


class UserHit(BaseModel):
    id: int
    username: str
    bio: str | None = None
    profile_image: str | None = None
    user_type: str | None = None
    career_title: str | None = None
    created_at: datetime | None = None


class ProjectHit(BaseModel):
    id: int
    title: str
    description: str | None = None
    project_image: str | None = None
    project_type: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    user_id: int
    username: str | None = None
    user_type: str | None = None


class ArticleHit(BaseModel):
    id: int
    title: str
    tags: list[str] = Field(default_factory=list)
    excerpt: str
    created_at: datetime | None = None
    user_id: int
    username: str | None = None
    user_type: str | None = None


class PostHit(BaseModel):
    id: int
    title: str
    description: str | None = None
    mediaUrl: str | None = None
    tags: list[str] = Field(default_factory=list)
    likes: int = 0
    comment_count: int = 0
    created_at: datetime | None = None
    user_id: int
    username: str | None = None
    user_type: str | None = None


class SearchResults(BaseModel):
    users: list[UserHit] = Field(default_factory=list)
    projects: list[ProjectHit] = Field(default_factory=list)
    articles: list[ArticleHit] = Field(default_factory=list)
    posts: list[PostHit] = Field(default_factory=list)


class SearchResponse(BaseModel):
    results: SearchResults
    totals: dict[str, int] = Field(default_factory=dict)
    totalPages: int
    page: int
    limit: int
