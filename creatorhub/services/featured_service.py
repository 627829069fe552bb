from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from sqlalchemy.orm import Session

from creatorhub.models.article import Article
from creatorhub.models.post import Post
from creatorhub.models.project import Project
from creatorhub.models.user import User
from creatorhub.schemas.common import OwnerSummary
from creatorhub.schemas.featured import (
    FeaturedArticle,
    FeaturedContent,
    FeaturedPost,
    FeaturedProject,
    FeaturedUser,
)
from creatorhub.services.article_service import article_excerpt


logger = logging.getLogger(__name__)


def _owner(user: User | None) -> OwnerSummary | None:
    if user is None:
        return None
    return OwnerSummary(
        id=user.id,
        username=user.username,
        profile_image=user.profile_image,
        user_type=user.user_type,
    )


def _counters(row: Any) -> dict[str, int]:
    return {
        "likes_count": row.likes_count or 0,
        "follows_count": row.follows_count or 0,
        "watches_count": row.watches_count or 0,
    }


def _article_media(article: Article) -> str | None:
    if article.related_media:
        return article.related_media[0]
    for section in article.sections:
        if section.media_url:
            return section.media_url
    return None


def _latest_users(db: Session, limit: int) -> list[FeaturedUser]:
    rows = db.query(User).order_by(User.created_at.desc(), User.id.desc()).limit(limit).all()
    return [
        FeaturedUser(
            id=u.id,
            username=u.username,
            profile_image=u.profile_image,
            bio=u.bio,
            user_type=u.user_type,
            career_title=u.career_title,
            created_at=u.created_at,
            **_counters(u),
        )
        for u in rows
    ]


def _latest_projects(db: Session, limit: int) -> list[FeaturedProject]:
    rows = db.query(Project).order_by(Project.created_at.desc(), Project.id.desc()).limit(limit).all()
    return [
        FeaturedProject(
            id=p.id,
            project_name=p.project_name,
            project_description=p.project_description,
            mediaUrl=p.project_image,
            tags=list(p.project_tags or []),
            skills=list(p.skills_required or []),
            timeline=p.project_timeline,
            budget=p.budget,
            target_audience=list(p.target_audience or []),
            project_followers=p.project_followers or 0,
            created_at=p.created_at,
            users=_owner(p.owner),
            **_counters(p),
        )
        for p in rows
    ]


def _latest_articles(db: Session, limit: int) -> list[FeaturedArticle]:
    rows = db.query(Article).order_by(Article.created_at.desc(), Article.id.desc()).limit(limit).all()
    return [
        FeaturedArticle(
            id=a.id,
            title=a.title,
            tags=list(a.tags or []),
            mediaUrl=_article_media(a),
            excerpt=article_excerpt(a),
            created_at=a.created_at,
            users=_owner(a.owner),
            **_counters(a),
        )
        for a in rows
    ]


def _latest_posts(db: Session, limit: int) -> list[FeaturedPost]:
    rows = db.query(Post).order_by(Post.created_at.desc(), Post.id.desc()).limit(limit).all()
    return [
        FeaturedPost(
            id=p.id,
            title=p.title,
            description=p.description,
            mediaUrl=p.media_url,
            tags=list(p.tags or []),
            created_at=p.created_at,
            users=_owner(p.owner),
            **_counters(p),
        )
        for p in rows
    ]


def _fetch(session_factory: Callable[[], Session], fetcher: Callable[[Session, int], list[Any]], limit: int) -> list[Any]:
    with session_factory() as db:
        return fetcher(db, limit)


async def _fetch_safe(
    kind: str,
    session_factory: Callable[[], Session],
    fetcher: Callable[[Session, int], list[Any]],
    limit: int,
) -> list[Any]:
    try:
        return await asyncio.to_thread(_fetch, session_factory, fetcher, limit)
    except Exception as exc:
        logger.warning("featured %s unavailable: %s", kind, exc)
        return []


async def get_featured_content(session_factory: Callable[[], Session], limit: int = 3) -> FeaturedContent:
    """Latest items of every kind; a kind that fails comes back empty."""

    users, projects, articles, posts = await asyncio.gather(
        _fetch_safe("users", session_factory, _latest_users, limit),
        _fetch_safe("projects", session_factory, _latest_projects, limit),
        _fetch_safe("articles", session_factory, _latest_articles, limit),
        _fetch_safe("posts", session_factory, _latest_posts, limit),
    )
    return FeaturedContent(users=users, projects=projects, articles=articles, posts=posts)
