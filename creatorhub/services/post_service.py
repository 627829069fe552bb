from __future__ import annotations

import logging

from fastapi import UploadFile
from sqlalchemy.orm import Session

from creatorhub.database import utc_now
from creatorhub.errors import NotFoundError, persistence_guard
from creatorhub.models.post import Post, PostComment
from creatorhub.models.user import User
from creatorhub.schemas.post import CommentRead, PostRead, PostWrite
from creatorhub.services.interaction_service import purge_entity
from creatorhub.services.ownership import ensure_owner
from creatorhub.services.storage import save_upload


logger = logging.getLogger(__name__)


def build_post(post: Post, *, with_comments: bool = True) -> PostRead:
    comments = []
    if with_comments:
        comments = [
            CommentRead(
                id=c.id,
                user_id=c.user_id,
                username=c.author.username if c.author else None,
                text=c.text,
                created_at=c.created_at,
            )
            for c in post.comments
        ]
    return PostRead(
        id=post.id,
        user_id=post.user_id,
        username=post.owner.username if post.owner else None,
        title=post.title,
        description=post.description or "",
        post_image_display=post.post_image_display or "url",
        post_image_url=post.post_image_url or "",
        post_image_upload=post.post_image_upload or "",
        media_url=post.media_url,
        tags=list(post.tags or []),
        likes=post.likes or 0,
        comment_count=post.comment_count or 0,
        comments=comments,
        likes_count=post.likes_count or 0,
        follows_count=post.follows_count or 0,
        watches_count=post.watches_count or 0,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def _load(db: Session, post_id: int) -> Post:
    post = db.query(Post).filter(Post.id == post_id).first()
    if post is None:
        raise NotFoundError("Post not found")
    return post


def get_post(db: Session, post_id: int) -> PostRead | None:
    post = db.query(Post).filter(Post.id == post_id).first()
    return build_post(post) if post else None


def list_posts(db: Session, *, page: int = 1, limit: int = 10) -> tuple[list[PostRead], int]:
    query = db.query(Post)
    total = query.count()
    rows = (
        query.order_by(Post.created_at.desc(), Post.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return [build_post(p, with_comments=False) for p in rows], total


def list_posts_by_user(db: Session, user_id: int) -> list[PostRead]:
    rows = (
        db.query(Post)
        .filter(Post.user_id == user_id)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .all()
    )
    return [build_post(p, with_comments=False) for p in rows]


def create_post(db: Session, owner: User, payload: PostWrite) -> PostRead:
    now = utc_now()
    post = Post(
        user_id=owner.id,
        title=payload.title.strip(),
        description=payload.description,
        post_image_display=payload.post_image_display,
        post_image_url=payload.post_image_url,
        tags=list(payload.tags),
        created_at=now,
        updated_at=now,
    )
    with persistence_guard(db, "post create"):
        db.add(post)
        db.commit()
    db.refresh(post)
    logger.info("created post id=%s user_id=%s", post.id, owner.id)
    return build_post(post)


def update_post(db: Session, post_id: int, actor: User, payload: PostWrite) -> PostRead:
    post = _load(db, post_id)
    ensure_owner(post.user_id, actor, "Not authorized to update this post")

    data = payload.model_dump(exclude_unset=True)
    with persistence_guard(db, "post update"):
        for field, value in data.items():
            if value is None:
                continue
            setattr(post, field, value.strip() if field == "title" else value)
        post.updated_at = utc_now()
        db.commit()
    db.refresh(post)
    return build_post(post)


def delete_post(db: Session, post_id: int, actor: User) -> None:
    post = _load(db, post_id)
    ensure_owner(post.user_id, actor, "Not authorized to delete this post")
    with persistence_guard(db, "post delete"):
        purge_entity(db, "post", post_id)
        db.delete(post)
        db.commit()


def like_post(db: Session, post_id: int) -> PostRead:
    post = _load(db, post_id)
    with persistence_guard(db, "post like"):
        # Increment in SQL so concurrent likes are not lost.
        db.query(Post).filter(Post.id == post_id).update(
            {Post.likes: Post.likes + 1}, synchronize_session=False
        )
        db.commit()
    db.refresh(post)
    return build_post(post)


def comment_on_post(db: Session, post_id: int, actor: User, text: str) -> PostRead:
    post = _load(db, post_id)
    text = (text or "").strip()
    with persistence_guard(db, "post comment"):
        db.add(PostComment(post_id=post.id, user_id=actor.id, text=text, created_at=utc_now()))
        db.query(Post).filter(Post.id == post_id).update(
            {Post.comment_count: Post.comment_count + 1}, synchronize_session=False
        )
        db.commit()
    db.expire_all()
    return build_post(_load(db, post_id))


def set_post_image(db: Session, post_id: int, actor: User, upload: UploadFile | None) -> str:
    post = _load(db, post_id)
    ensure_owner(post.user_id, actor, "Not authorized to update this post")

    image_url = save_upload(upload, folder="posts", prefix="post")
    with persistence_guard(db, "post image update"):
        post.post_image_upload = image_url
        post.post_image_display = "upload"
        post.updated_at = utc_now()
        db.commit()
    return image_url
