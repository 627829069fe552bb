from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


EntityType = Literal["user", "project", "article", "post"]


class InteractionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    entity_type: EntityType = Field(alias="entityType")
    entity_id: int = Field(alias="entityId", ge=1)


class InteractionCount(BaseModel):
    entityType: str
    entityId: int
    count: int


class InteractionStatus(BaseModel):
    entityType: str
    entityId: int
    active: bool


class InteractionRead(BaseModel):
    id: int
    entityType: str
    entityId: int
    user_id: int
    created_at: datetime | None = None


class UserInteractions(BaseModel):
    likes: list[InteractionRead] = Field(default_factory=list)
    follows: list[InteractionRead] = Field(default_factory=list)
    watches: list[InteractionRead] = Field(default_factory=list)
