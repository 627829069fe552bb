from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from creatorhub.errors import NotFoundError, ValidationError, persistence_guard
from creatorhub.models.article import Article
from creatorhub.models.interaction import INTERACTION_KINDS
from creatorhub.models.post import Post
from creatorhub.models.project import Project
from creatorhub.models.user import User
from creatorhub.schemas.interaction import InteractionCount, InteractionRead, InteractionStatus, UserInteractions


logger = logging.getLogger(__name__)

ENTITY_MODELS: dict[str, Any] = {
    "user": User,
    "project": Project,
    "article": Article,
    "post": Post,
}


def _interaction_model(kind: str) -> tuple[Any, str]:
    try:
        return INTERACTION_KINDS[kind]
    except KeyError:
        raise ValidationError(f"Unknown interaction kind '{kind}'") from None


def _entity_model(entity_type: str) -> Any:
    model = ENTITY_MODELS.get(entity_type)
    if model is None:
        raise ValidationError(f"Unknown entity type '{entity_type}'")
    return model


def _bump_counter(db: Session, entity_type: str, entity_id: int, counter: str, delta: int) -> None:
    model = _entity_model(entity_type)
    column = getattr(model, counter)
    query = db.query(model).filter(model.id == entity_id)
    if delta < 0:
        # never below zero
        query = query.filter(column > 0)
    query.update({column: column + delta}, synchronize_session=False)


def _to_read(row: Any) -> InteractionRead:
    return InteractionRead(
        id=row.id,
        entityType=row.entity_type,
        entityId=row.entity_id,
        user_id=row.user_id,
        created_at=row.created_at,
    )


def get_count(db: Session, kind: str, entity_type: str, entity_id: int) -> InteractionCount:
    model, _ = _interaction_model(kind)
    _entity_model(entity_type)
    count = (
        db.query(model)
        .filter(model.entity_type == entity_type, model.entity_id == entity_id)
        .count()
    )
    return InteractionCount(entityType=entity_type, entityId=entity_id, count=count)


def check_status(db: Session, kind: str, entity_type: str, entity_id: int, user_id: int) -> InteractionStatus:
    model, _ = _interaction_model(kind)
    _entity_model(entity_type)
    exists = (
        db.query(model.id)
        .filter(
            model.entity_type == entity_type,
            model.entity_id == entity_id,
            model.user_id == user_id,
        )
        .first()
        is not None
    )
    return InteractionStatus(entityType=entity_type, entityId=entity_id, active=exists)


def create(db: Session, kind: str, entity_type: str, entity_id: int, user_id: int) -> InteractionRead:
    """Record an interaction and bump the target's counter.

    The unique constraint on (entity_type, entity_id, user_id) is the only
    duplicate check; a second request for the same triple is a 409.
    """

    model, counter = _interaction_model(kind)
    entity = _entity_model(entity_type)
    if db.query(entity.id).filter(entity.id == entity_id).first() is None:
        raise NotFoundError(f"{entity_type.capitalize()} not found")

    row = model(entity_type=entity_type, entity_id=entity_id, user_id=user_id)
    with persistence_guard(db, f"{kind} create", conflict_detail=f"Already in {kind}"):
        db.add(row)
        db.flush()
        _bump_counter(db, entity_type, entity_id, counter, 1)
        db.commit()
    db.refresh(row)
    logger.info("%s: user_id=%s -> %s:%s", kind, user_id, entity_type, entity_id)
    return _to_read(row)


def delete(db: Session, kind: str, entity_type: str, entity_id: int, user_id: int) -> None:
    model, counter = _interaction_model(kind)
    _entity_model(entity_type)
    row = (
        db.query(model)
        .filter(
            model.entity_type == entity_type,
            model.entity_id == entity_id,
            model.user_id == user_id,
        )
        .first()
    )
    if row is None:
        raise NotFoundError(f"No {kind} entry to remove")

    with persistence_guard(db, f"{kind} delete"):
        db.delete(row)
        _bump_counter(db, entity_type, entity_id, counter, -1)
        db.commit()


def list_user_interactions(db: Session, user_id: int) -> UserInteractions:
    result: dict[str, list[InteractionRead]] = {}
    for kind, (model, _) in INTERACTION_KINDS.items():
        rows = (
            db.query(model)
            .filter(model.user_id == user_id)
            .order_by(model.created_at.desc(), model.id.desc())
            .all()
        )
        result[kind] = [_to_read(r) for r in rows]
    return UserInteractions(**result)


def purge_entity(db: Session, entity_type: str, entity_id: int) -> None:
    """Drop every like/follow/watch pointing at an entity; the caller commits."""

    _entity_model(entity_type)
    for model, _ in INTERACTION_KINDS.values():
        db.query(model).filter(
            model.entity_type == entity_type,
            model.entity_id == entity_id,
        ).delete(synchronize_session=False)
