from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from creatorhub.schemas.common import NotificationPreferences, Seeking, SocialLinks
from creatorhub.services.codec import coerce_int, ensure_list


class _ProjectListItem(BaseModel):
    # Items are stored as submitted; unknown keys (client-side ids etc.) are kept.
    model_config = ConfigDict(extra="allow")

    id: str | int | None = None
    media: str | None = None


class TeamMember(_ProjectListItem):
    name: str | None = None
    role: str | None = None
    years: str | None = None
    bio: str | None = None


class Collaborator(_ProjectListItem):
    name: str | None = None
    company: str | None = None
    role: str | None = None
    contribution: str | None = None


class Advisor(_ProjectListItem):
    name: str | None = None
    expertise: str | None = None
    bio: str | None = None
    year: str | None = None


class Partner(_ProjectListItem):
    name: str | None = None
    organization: str | None = None
    contribution: str | None = None
    year: str | None = None


class Testimonial(_ProjectListItem):
    name: str | None = None
    role: str | None = None
    organization: str | None = None
    position: str | None = None
    company: str | None = None
    text: str | None = None


class Deliverable(_ProjectListItem):
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    status: str | None = None


class Milestone(_ProjectListItem):
    title: str | None = None
    description: str | None = None
    date: str | None = None


class _ProjectFields(BaseModel):
    project_name: str | None = None
    project_description: str | None = None
    project_type: str | None = None
    project_category: str | None = None
    project_title: str | None = None
    project_duration: str | None = None
    project_handle: str | None = None
    project_followers: int | None = None

    client: str | None = None
    client_location: str | None = None
    client_website: str | None = None
    contract_type: str | None = None
    contract_duration: str | None = None
    contract_value: str | None = None
    project_timeline: str | None = None
    budget: str | None = None
    budget_range: str | None = None
    currency: str | None = None
    project_status: str | None = None
    project_status_tag: str | None = None
    project_visibility: str | None = None
    search_visibility: bool | None = None
    short_term_goals: str | None = None
    long_term_goals: str | None = None

    skills_required: list[str] | None = None
    expertise_needed: list[str] | None = None
    target_audience: list[str] | None = None
    solutions_offered: list[str] | None = None
    project_tags: list[str] | None = None
    industry_tags: list[str] | None = None
    technology_tags: list[str] | None = None
    website_links: list[str] | None = None

    @field_validator("project_followers", mode="before")
    @classmethod
    def _coerce_followers(cls, v: Any) -> int | None:
        if v is None:
            return None
        return coerce_int(v)

    @field_validator(
        "skills_required",
        "expertise_needed",
        "target_audience",
        "solutions_offered",
        "project_tags",
        "industry_tags",
        "technology_tags",
        "website_links",
        mode="before",
    )
    @classmethod
    def _coerce_lists(cls, v: Any) -> list | None:
        if v is None:
            return None
        return [str(item) for item in ensure_list(v)]


class ProjectWrite(_ProjectFields):
    """Create and update payload; on update only the keys sent are applied."""

    seeking: Seeking | None = None
    social_links: SocialLinks | None = None
    notification_preferences: NotificationPreferences | None = None

    team_members: list[TeamMember] | None = None
    collaborators: list[Collaborator] | None = None
    advisors: list[Advisor] | None = None
    partners: list[Partner] | None = None
    testimonials: list[Testimonial] | None = None
    deliverables: list[Deliverable] | None = None
    milestones: list[Milestone] | None = None


class ProjectRead(_ProjectFields):
    id: int
    user_id: int
    username: str | None = None
    project_image: str | None = None

    seeking: Seeking = Field(default_factory=Seeking)
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    notification_preferences: NotificationPreferences = Field(default_factory=NotificationPreferences)

    team_members: list[dict[str, Any]] = Field(default_factory=list)
    collaborators: list[dict[str, Any]] = Field(default_factory=list)
    advisors: list[dict[str, Any]] = Field(default_factory=list)
    partners: list[dict[str, Any]] = Field(default_factory=list)
    testimonials: list[dict[str, Any]] = Field(default_factory=list)
    deliverables: list[dict[str, Any]] = Field(default_factory=list)
    milestones: list[dict[str, Any]] = Field(default_factory=list)

    likes_count: int = 0
    follows_count: int = 0
    watches_count: int = 0

    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectListResponse(BaseModel):
    data: list[ProjectRead]
    total: int
    page: int
    limit: int


class ProjectImageResponse(BaseModel):
    imageUrl: str
