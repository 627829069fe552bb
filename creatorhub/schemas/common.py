from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class SocialLinks(BaseModel):
    youtube: str = ""
    instagram: str = ""
    github: str = ""
    twitter: str = ""
    linkedin: str = ""


class NotificationPreferences(BaseModel):
    email: bool = False
    push: bool = False
    digest: bool = False


class Seeking(BaseModel):
    creator: bool = False
    brand: bool = False
    freelancer: bool = False
    contractor: bool = False


class OwnerSummary(BaseModel):
    id: int
    username: str
    profile_image: str | None = None
    user_type: str | None = None


class MessageResponse(BaseModel):
    message: str


class MediaUploadResponse(BaseModel):
    url: str


def validate_email_like(v: Any) -> str:
    value = (v or "").strip()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value.lower()
