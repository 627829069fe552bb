from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from creatorhub.schemas.article import ArticleRead
from creatorhub.schemas.common import NotificationPreferences, SocialLinks
from creatorhub.schemas.post import PostRead
from creatorhub.schemas.project import ProjectRead
from creatorhub.services.codec import coerce_int, ensure_list


class _CollectionItem(BaseModel):
    media: str | None = None


class WorkExperienceItem(_CollectionItem):
    title: str = ""
    company: str = ""
    years: str = ""


class EducationItem(_CollectionItem):
    degree: str = ""
    school: str = ""
    year: str = ""


class CertificationItem(_CollectionItem):
    name: str = ""
    issuer: str = ""
    year: str = ""


class AccoladeItem(_CollectionItem):
    title: str = ""
    issuer: str = ""
    year: str = ""


class EndorsementItem(_CollectionItem):
    name: str = ""
    position: str = ""
    company: str = ""
    text: str = ""


class PortfolioItem(_CollectionItem):
    title: str = ""
    description: str = ""
    url: str = ""


class _ProfileFields(BaseModel):
    """Editable profile attributes shared by the read model and the patch model."""

    profile_image: str | None = None
    bio: str | None = None
    user_type: str | None = None

    career_title: str | None = None
    career_experience: int | None = None
    social_media_handle: str | None = None
    social_media_followers: int | None = None
    company: str | None = None
    company_location: str | None = None
    company_website: str | None = None
    contract_type: str | None = None
    contract_duration: str | None = None
    contract_rate: str | None = None
    availability_status: str | None = None
    preferred_work_type: str | None = None
    rate_range: str | None = None
    currency: str | None = None
    standard_service_rate: str | None = None
    standard_rate_type: str | None = None
    compensation_type: str | None = None
    work_status: str | None = None
    seeking: str | None = None
    short_term_goals: str | None = None
    long_term_goals: str | None = None
    profile_visibility: str | None = None
    search_visibility: bool | None = None

    skills: list[str] | None = None
    expertise: list[str] | None = None
    target_audience: list[str] | None = None
    solutions_offered: list[str] | None = None
    interest_tags: list[str] | None = None
    experience_tags: list[str] | None = None
    education_tags: list[str] | None = None
    website_links: list[str] | None = None

    @field_validator("career_experience", "social_media_followers", mode="before")
    @classmethod
    def _coerce_counts(cls, v: Any) -> int | None:
        # Forms submit these as strings.
        if v is None:
            return None
        return coerce_int(v)

    @field_validator(
        "skills",
        "expertise",
        "target_audience",
        "solutions_offered",
        "interest_tags",
        "experience_tags",
        "education_tags",
        "website_links",
        mode="before",
    )
    @classmethod
    def _coerce_lists(cls, v: Any) -> list | None:
        if v is None:
            return None
        return [str(item) for item in ensure_list(v)]


class UserUpdate(_ProfileFields):
    username: str | None = Field(default=None, min_length=1, max_length=50)

    social_links: SocialLinks | None = None
    notification_preferences: NotificationPreferences | None = None

    work_experience: list[WorkExperienceItem] | None = None
    education: list[EducationItem] | None = None
    certifications: list[CertificationItem] | None = None
    accolades: list[AccoladeItem] | None = None
    endorsements: list[EndorsementItem] | None = None
    featured_projects: list[PortfolioItem] | None = None
    case_studies: list[PortfolioItem] | None = None


class UserProfile(_ProfileFields):
    id: int
    username: str
    email: str

    social_links: SocialLinks = Field(default_factory=SocialLinks)
    notification_preferences: NotificationPreferences = Field(default_factory=NotificationPreferences)

    work_experience: list[WorkExperienceItem] = Field(default_factory=list)
    education: list[EducationItem] = Field(default_factory=list)
    certifications: list[CertificationItem] = Field(default_factory=list)
    accolades: list[AccoladeItem] = Field(default_factory=list)
    endorsements: list[EndorsementItem] = Field(default_factory=list)
    featured_projects: list[PortfolioItem] = Field(default_factory=list)
    case_studies: list[PortfolioItem] = Field(default_factory=list)

    likes_count: int = 0
    follows_count: int = 0
    watches_count: int = 0
    is_admin: bool = False

    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ProfileImageResponse(BaseModel):
    imageUrl: str


class UserPortfolio(BaseModel):
    user_id: int
    projects: list[ProjectRead] = Field(default_factory=list)
    articles: list[ArticleRead] = Field(default_factory=list)
    posts: list[PostRead] = Field(default_factory=list)
