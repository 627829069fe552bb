from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from creatorhub.schemas.common import OwnerSummary


class _Counters(BaseModel):
    likes_count: int = 0
    follows_count: int = 0
    watches_count: int = 0


class FeaturedUser(_Counters):
    id: int
    username: str
    profile_image: str | None = None
    bio: str | None = None
    user_type: str | None = None
    career_title: str | None = None
    created_at: datetime | None = None


class FeaturedProject(_Counters):
    id: int
    project_name: str
    project_description: str | None = None
    mediaUrl: str | None = None
    tags: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    timeline: str | None = None
    budget: str | None = None
    target_audience: list[str] = Field(default_factory=list)
    project_followers: int = 0
    created_at: datetime | None = None
    users: OwnerSummary | None = None


class FeaturedArticle(_Counters):
    id: int
    title: str
    tags: list[str] = Field(default_factory=list)
    mediaUrl: str | None = None
    excerpt: str
    created_at: datetime | None = None
    users: OwnerSummary | None = None


class FeaturedPost(_Counters):
    id: int
    title: str
    description: str | None = None
    mediaUrl: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    users: OwnerSummary | None = None


class FeaturedContent(BaseModel):
    users: list[FeaturedUser] = Field(default_factory=list)
    projects: list[FeaturedProject] = Field(default_factory=list)
    articles: list[FeaturedArticle] = Field(default_factory=list)
    posts: list[FeaturedPost] = Field(default_factory=list)
