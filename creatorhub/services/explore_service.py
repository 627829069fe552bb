from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Callable

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from creatorhub.errors import ValidationError
from creatorhub.models.article import Article
from creatorhub.models.post import Post
from creatorhub.models.project import Project
from creatorhub.models.user import User
from creatorhub.schemas.explore import (
    CONTENT_KINDS,
    ArticleHit,
    PostHit,
    ProjectHit,
    SearchParams,
    SearchResponse,
    SearchResults,
    UserHit,
)
from creatorhub.services.article_service import article_excerpt


logger = logging.getLogger(__name__)

SORT_FIELDS = ("created_at", "updated_at", "title", "likes", "follows", "watches")
SORT_ORDERS = ("asc", "desc")

# sort key -> column per kind; "title" is whatever the kind displays as its name
_SORT_COLUMNS: dict[str, dict[str, Any]] = {
    "users": {
        "created_at": User.created_at,
        "updated_at": User.updated_at,
        "title": User.username,
        "likes": User.likes_count,
        "follows": User.follows_count,
        "watches": User.watches_count,
    },
    "projects": {
        "created_at": Project.created_at,
        "updated_at": Project.updated_at,
        "title": Project.project_name,
        "likes": Project.likes_count,
        "follows": Project.follows_count,
        "watches": Project.watches_count,
    },
    "articles": {
        "created_at": Article.created_at,
        "updated_at": Article.updated_at,
        "title": Article.title,
        "likes": Article.likes_count,
        "follows": Article.follows_count,
        "watches": Article.watches_count,
    },
    "posts": {
        "created_at": Post.created_at,
        "updated_at": Post.updated_at,
        "title": Post.title,
        "likes": Post.likes_count,
        "follows": Post.follows_count,
        "watches": Post.watches_count,
    },
}

_ID_COLUMNS = {"users": User.id, "projects": Project.id, "articles": Article.id, "posts": Post.id}


def parse_csv(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def validate_content_types(content_types: list[str]) -> list[str]:
    unknown = [kind for kind in content_types if kind not in CONTENT_KINDS]
    if unknown:
        raise ValidationError(f"Unknown content type(s): {', '.join(unknown)}")
    # keep the canonical order, drop duplicates
    return [kind for kind in CONTENT_KINDS if kind in content_types]


def resolve_sort(sort_by: str | None, sort_order: str | None) -> tuple[str, str]:
    key = sort_by or "created_at"
    order = (sort_order or "desc").lower()
    if key not in SORT_FIELDS:
        raise ValidationError(f"Invalid sort field '{key}'. Allowed: {', '.join(SORT_FIELDS)}")
    if order not in SORT_ORDERS:
        raise ValidationError("sortOrder must be 'asc' or 'desc'")
    return key, order


def _ordered_page(query: Query, kind: str, params: SearchParams) -> tuple[list[Any], int]:
    key, order = resolve_sort(params.sort_by, params.sort_order)
    column = _SORT_COLUMNS[kind][key]
    tie_break = _ID_COLUMNS[kind].desc()
    total = query.count()
    rows = (
        query.order_by(column.asc() if order == "asc" else column.desc(), tie_break)
        .offset((params.page - 1) * params.limit)
        .limit(params.limit)
        .all()
    )
    return rows, total


LIKE_ESCAPE = "\\"


def _pattern(q: str) -> str:
    # User input is matched literally; escape LIKE wildcards.
    term = q.strip().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{term}%"


def _matches(q: str, *columns):
    pattern = _pattern(q)
    return or_(*(column.ilike(pattern, escape=LIKE_ESCAPE) for column in columns))


def search_users(db: Session, params: SearchParams) -> tuple[list[UserHit], int]:
    query = db.query(User)
    if params.q.strip():
        query = query.filter(_matches(params.q, User.username, User.bio))
    if params.user_types:
        query = query.filter(User.user_type.in_(params.user_types))

    rows, total = _ordered_page(query, "users", params)
    hits = [
        UserHit(
            id=u.id,
            username=u.username,
            bio=u.bio,
            profile_image=u.profile_image,
            user_type=u.user_type,
            career_title=u.career_title,
            created_at=u.created_at,
        )
        for u in rows
    ]
    return hits, total


def search_projects(db: Session, params: SearchParams) -> tuple[list[ProjectHit], int]:
    query = db.query(Project).join(User, Project.user_id == User.id)
    if params.q.strip():
        query = query.filter(_matches(params.q, Project.project_name, Project.project_description))
    if params.user_types:
        query = query.filter(User.user_type.in_(params.user_types))

    rows, total = _ordered_page(query, "projects", params)
    hits = [
        ProjectHit(
            id=p.id,
            title=p.project_name,
            description=p.project_description,
            project_image=p.project_image,
            project_type=p.project_type,
            tags=list(p.project_tags or []),
            created_at=p.created_at,
            user_id=p.user_id,
            username=p.owner.username if p.owner else None,
            user_type=p.owner.user_type if p.owner else None,
        )
        for p in rows
    ]
    return hits, total


def search_articles(db: Session, params: SearchParams) -> tuple[list[ArticleHit], int]:
    query = db.query(Article).join(User, Article.user_id == User.id)
    if params.q.strip():
        query = query.filter(_matches(params.q, Article.title))
    if params.user_types:
        query = query.filter(User.user_type.in_(params.user_types))

    rows, total = _ordered_page(query, "articles", params)
    hits = [
        ArticleHit(
            id=a.id,
            title=a.title,
            tags=list(a.tags or []),
            excerpt=article_excerpt(a),
            created_at=a.created_at,
            user_id=a.user_id,
            username=a.owner.username if a.owner else None,
            user_type=a.owner.user_type if a.owner else None,
        )
        for a in rows
    ]
    return hits, total


def search_posts(db: Session, params: SearchParams) -> tuple[list[PostHit], int]:
    query = db.query(Post).join(User, Post.user_id == User.id)
    if params.q.strip():
        query = query.filter(_matches(params.q, Post.title, Post.description))
    if params.user_types:
        query = query.filter(User.user_type.in_(params.user_types))

    rows, total = _ordered_page(query, "posts", params)
    hits = [
        PostHit(
            id=p.id,
            title=p.title,
            description=p.description,
            mediaUrl=p.media_url,
            tags=list(p.tags or []),
            likes=p.likes or 0,
            comment_count=p.comment_count or 0,
            created_at=p.created_at,
            user_id=p.user_id,
            username=p.owner.username if p.owner else None,
            user_type=p.owner.user_type if p.owner else None,
        )
        for p in rows
    ]
    return hits, total


SEARCHERS: dict[str, Callable[[Session, SearchParams], tuple[list[Any], int]]] = {
    "users": search_users,
    "projects": search_projects,
    "articles": search_articles,
    "posts": search_posts,
}


def _search_kind(session_factory: Callable[[], Session], kind: str, params: SearchParams) -> tuple[list[Any], int]:
    with session_factory() as db:
        return SEARCHERS[kind](db, params)


def total_pages(totals: dict[str, int], limit: int) -> int:
    if not totals or limit <= 0:
        return 0
    return max(math.ceil(total / limit) for total in totals.values())


async def search_all(session_factory: Callable[[], Session], params: SearchParams) -> SearchResponse:
    """Run the requested kinds concurrently and merge them into one page.

    Content kinds are opt-in: with none selected nothing is queried and the
    response is empty with ``totalPages == 0``.
    """

    kinds = validate_content_types(params.content_types)
    resolve_sort(params.sort_by, params.sort_order)

    results = SearchResults()
    totals: dict[str, int] = {}
    if not kinds:
        return SearchResponse(results=results, totals=totals, totalPages=0, page=params.page, limit=params.limit)

    outcomes = await asyncio.gather(
        *(asyncio.to_thread(_search_kind, session_factory, kind, params) for kind in kinds)
    )
    for kind, (items, total) in zip(kinds, outcomes):
        setattr(results, kind, items)
        totals[kind] = total

    logger.info("explore q=%r kinds=%s totals=%s page=%s", params.q, kinds, totals, params.page)
    return SearchResponse(
        results=results,
        totals=totals,
        totalPages=total_pages(totals, params.limit),
        page=params.page,
        limit=params.limit,
    )
