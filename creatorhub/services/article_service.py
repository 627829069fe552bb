from __future__ import annotations

import logging
from typing import Any, Literal, Sequence

from fastapi import UploadFile
from sqlalchemy.orm import Session

from creatorhub.database import utc_now
from creatorhub.errors import NotFoundError, ValidationError, persistence_guard
from creatorhub.models.article import Article, ArticleSection
from creatorhub.models.user import User
from creatorhub.schemas.article import ArticleRead, ArticleSectionIn, ArticleWrite
from creatorhub.services.interaction_service import purge_entity
from creatorhub.services.ownership import ensure_owner
from creatorhub.services.storage import save_upload


logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Article"
EXCERPT_LENGTH = 150
NO_EXCERPT = "No content available"


# --- section ordering -------------------------------------------------------
#
# The editor keeps sections as a list with an explicit `order`; after any
# insert/remove/move the orders must be 0..n-1 again before submitting.


def renumber(sections: Sequence[dict[str, Any]]) -> list[dict[str, Any]]:
    return [{**section, "order": i} for i, section in enumerate(sections)]


def move_section(sections: Sequence[dict[str, Any]], index: int, direction: Literal["up", "down"]) -> list[dict[str, Any]]:
    items = list(sections)
    target = index - 1 if direction == "up" else index + 1
    if not (0 <= index < len(items)) or not (0 <= target < len(items)):
        return renumber(items)
    items[index], items[target] = items[target], items[index]
    return renumber(items)


def insert_section(sections: Sequence[dict[str, Any]], index: int, section: dict[str, Any]) -> list[dict[str, Any]]:
    items = list(sections)
    index = max(0, min(index, len(items)))
    items.insert(index, section)
    return renumber(items)


def remove_section(sections: Sequence[dict[str, Any]], index: int) -> list[dict[str, Any]]:
    items = list(sections)
    if 0 <= index < len(items):
        items.pop(index)
    return renumber(items)


def normalize_sections(sections: Sequence[ArticleSectionIn]) -> list[ArticleSectionIn]:
    """Fill missing orders from list position, sort, then renumber densely."""

    keyed = [(s.order if s.order is not None else i, i, s) for i, s in enumerate(sections)]
    keyed.sort(key=lambda k: (k[0], k[1]))
    return [s.model_copy(update={"order": i}) for i, (_, _, s) in enumerate(keyed)]


# --- excerpts ---------------------------------------------------------------


def make_excerpt(text: str | None, *, length: int = EXCERPT_LENGTH) -> str:
    if not text:
        return NO_EXCERPT
    return text[:length] + "..."


def article_excerpt(article: Article) -> str:
    first = article.sections[0] if article.sections else None
    return make_excerpt(first.text if first else None)


# --- persistence ------------------------------------------------------------


def build_article(article: Article) -> ArticleRead:
    return ArticleRead(
        id=article.id,
        user_id=article.user_id,
        username=article.owner.username if article.owner else None,
        title=article.title,
        tags=list(article.tags or []),
        citations=list(article.citations or []),
        contributors=list(article.contributors or []),
        related_media=list(article.related_media or []),
        sections=[
            {
                "id": s.id,
                "type": s.type,
                "title": s.title,
                "subtitle": s.subtitle,
                "text": s.text,
                "mediaUrl": s.media_url,
                "mediaSubtext": s.media_subtext,
                "order": s.section_order,
            }
            for s in article.sections
        ],
        likes_count=article.likes_count or 0,
        follows_count=article.follows_count or 0,
        watches_count=article.watches_count or 0,
        created_at=article.created_at,
        updated_at=article.updated_at,
    )


def _load(db: Session, article_id: int) -> Article:
    article = db.query(Article).filter(Article.id == article_id).first()
    if article is None:
        raise NotFoundError("Article not found")
    return article


def _section_rows(article_id: int, sections: Sequence[ArticleSectionIn]) -> list[ArticleSection]:
    return [
        ArticleSection(
            article_id=article_id,
            type=s.type,
            title=s.title,
            subtitle=s.subtitle,
            text=s.text,
            media_url=s.media_url,
            media_subtext=s.media_subtext,
            section_order=s.order,
        )
        for s in normalize_sections(sections)
    ]


def _apply_scalars(article: Article, payload: ArticleWrite) -> None:
    article.title = (payload.title or "").strip() or DEFAULT_TITLE
    article.tags = list(payload.tags)
    article.citations = list(payload.citations)
    article.contributors = list(payload.contributors)
    article.related_media = list(payload.related_media)


def get_article(db: Session, article_id: int) -> ArticleRead | None:
    article = db.query(Article).filter(Article.id == article_id).first()
    return build_article(article) if article else None


def list_articles(db: Session, *, page: int = 1, limit: int = 10) -> tuple[list[ArticleRead], int]:
    query = db.query(Article)
    total = query.count()
    rows = (
        query.order_by(Article.created_at.desc(), Article.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return [build_article(a) for a in rows], total


def list_articles_by_user(db: Session, user_id: int) -> list[ArticleRead]:
    rows = (
        db.query(Article)
        .filter(Article.user_id == user_id)
        .order_by(Article.created_at.desc(), Article.id.desc())
        .all()
    )
    return [build_article(a) for a in rows]


def create_article(db: Session, owner: User, payload: ArticleWrite) -> ArticleRead:
    now = utc_now()
    article = Article(user_id=owner.id, created_at=now, updated_at=now)
    _apply_scalars(article, payload)

    with persistence_guard(db, "article create"):
        db.add(article)
        db.flush()
        db.add_all(_section_rows(article.id, payload.sections))
        db.commit()

    db.expire_all()
    logger.info("created article id=%s user_id=%s sections=%d", article.id, owner.id, len(payload.sections))
    return build_article(_load(db, article.id))


def update_article(db: Session, article_id: int, actor: User, payload: ArticleWrite) -> ArticleRead:
    article = _load(db, article_id)
    ensure_owner(article.user_id, actor, "Not authorized to update this article")

    with persistence_guard(db, "article update"):
        _apply_scalars(article, payload)
        article.updated_at = utc_now()
        db.query(ArticleSection).filter(ArticleSection.article_id == article.id).delete(synchronize_session=False)
        db.flush()
        db.add_all(_section_rows(article.id, payload.sections))
        db.commit()

    db.expire_all()
    return build_article(_load(db, article_id))


def delete_article(db: Session, article_id: int, actor: User) -> None:
    article = _load(db, article_id)
    ensure_owner(article.user_id, actor, "Not authorized to delete this article")
    with persistence_guard(db, "article delete"):
        purge_entity(db, "article", article_id)
        db.delete(article)
        db.commit()


def set_section_media(
    db: Session,
    article_id: int,
    actor: User,
    section_index: int,
    upload: UploadFile | None,
) -> str:
    article = _load(db, article_id)
    ensure_owner(article.user_id, actor, "Not authorized to update this article")

    sections = list(article.sections)
    if section_index < 0 or section_index >= len(sections):
        raise ValidationError("Section not found")

    media_url = save_upload(upload, folder="articles", prefix="article")
    with persistence_guard(db, "article media update"):
        sections[section_index].media_url = media_url
        article.updated_at = utc_now()
        db.commit()
    return media_url
