from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PostWrite(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    post_image_display: Literal["url", "upload"] = "url"
    post_image_url: str = ""
    tags: list[str] = Field(default_factory=list)


class CommentCreate(BaseModel):
    # The client posts the comment body as `content`.
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(min_length=1, alias="content")


class CommentRead(BaseModel):
    id: int
    user_id: int
    username: str | None = None
    text: str
    created_at: datetime | None = None


class PostRead(BaseModel):
    id: int
    user_id: int
    username: str | None = None
    title: str
    description: str = ""
    post_image_display: str = "url"
    post_image_url: str = ""
    post_image_upload: str = ""
    media_url: str | None = None
    tags: list[str] = Field(default_factory=list)
    likes: int = 0
    comment_count: int = 0
    comments: list[CommentRead] = Field(default_factory=list)
    likes_count: int = 0
    follows_count: int = 0
    watches_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PostListResponse(BaseModel):
    posts: list[PostRead]
    total: int
    page: int
    limit: int


class PostImageResponse(BaseModel):
    imageUrl: str
