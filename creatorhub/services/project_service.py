from __future__ import annotations

import logging
from typing import Any

from fastapi import UploadFile
from sqlalchemy.orm import Session

from creatorhub.database import utc_now
from creatorhub.errors import NotFoundError, ValidationError, persistence_guard
from creatorhub.models.project import Project
from creatorhub.models.user import User
from creatorhub.schemas.project import ProjectRead, ProjectWrite
from creatorhub.services.codec import (
    PROJECT_JSON_FIELDS,
    decode_json_list,
    encode_json_list,
    model_to_row,
    project_to_nested,
    project_to_row,
)
from creatorhub.services.interaction_service import purge_entity
from creatorhub.services.ownership import ensure_owner
from creatorhub.services.storage import save_upload


logger = logging.getLogger(__name__)

_NULLABLE_FIELDS = {"project_image"}


def build_project(project: Project) -> ProjectRead:
    nested = project_to_nested(model_to_row(project))
    nested["username"] = project.owner.username if project.owner else None
    return ProjectRead.model_validate(nested)


def _load(db: Session, project_id: int) -> Project:
    project = db.query(Project).filter(Project.id == project_id).first()
    if project is None:
        raise NotFoundError("Project not found")
    return project


def get_project(db: Session, project_id: int) -> ProjectRead | None:
    project = db.query(Project).filter(Project.id == project_id).first()
    return build_project(project) if project else None


def list_projects(db: Session, *, page: int = 1, limit: int = 12) -> tuple[list[ProjectRead], int]:
    query = db.query(Project)
    total = query.count()
    rows = (
        query.order_by(Project.created_at.desc(), Project.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return [build_project(p) for p in rows], total


def list_projects_by_user(db: Session, user_id: int) -> list[ProjectRead]:
    rows = (
        db.query(Project)
        .filter(Project.user_id == user_id)
        .order_by(Project.created_at.desc(), Project.id.desc())
        .all()
    )
    return [build_project(p) for p in rows]


def _apply_row(project: Project, row: dict[str, Any]) -> None:
    for field, value in row.items():
        if value is None and field not in _NULLABLE_FIELDS:
            continue
        setattr(project, field, value)


def create_project(db: Session, owner: User, payload: ProjectWrite) -> ProjectRead:
    row = project_to_row(payload.model_dump(exclude_unset=True))
    now = utc_now()
    project = Project(user_id=owner.id, created_at=now, updated_at=now)
    _apply_row(project, row)

    with persistence_guard(db, "project create"):
        db.add(project)
        db.commit()
    db.refresh(project)
    logger.info("created project id=%s user_id=%s type=%s", project.id, owner.id, project.project_type)
    return build_project(project)


def update_project(db: Session, project_id: int, actor: User, payload: ProjectWrite) -> ProjectRead:
    project = _load(db, project_id)
    ensure_owner(project.user_id, actor, "Not authorized to update this project")

    data = payload.model_dump(exclude_unset=True)
    if not data:
        raise ValidationError("No update data provided")
    row = project_to_row(data, partial=True)

    with persistence_guard(db, "project update"):
        _apply_row(project, row)
        project.updated_at = utc_now()
        db.commit()
    db.refresh(project)
    return build_project(project)


def delete_project(db: Session, project_id: int, actor: User) -> None:
    project = _load(db, project_id)
    ensure_owner(project.user_id, actor, "Not authorized to delete this project")
    with persistence_guard(db, "project delete"):
        purge_entity(db, "project", project_id)
        db.delete(project)
        db.commit()
    logger.info("deleted project id=%s by user_id=%s", project_id, actor.id)


def set_project_image(db: Session, project_id: int, actor: User, upload: UploadFile | None) -> str:
    project = _load(db, project_id)
    ensure_owner(project.user_id, actor, "Not authorized to update this project")

    image_url = save_upload(upload, folder="projects", prefix="project")
    with persistence_guard(db, "project image update"):
        project.project_image = image_url
        project.updated_at = utc_now()
        db.commit()
    return image_url


def set_item_media(
    db: Session,
    project_id: int,
    actor: User,
    field: str,
    index: int,
    upload: UploadFile | None,
) -> str:
    """Attach an uploaded file to ``project.<field>[index].media``.

    Only the addressed element changes; the rest of the list is written back
    exactly as it was read.
    """

    if field not in PROJECT_JSON_FIELDS:
        raise ValidationError(f"Unknown project list '{field}'")

    project = _load(db, project_id)
    ensure_owner(project.user_id, actor, "Not authorized to update this project")

    items = decode_json_list(getattr(project, field), field=field)
    if index < 0 or index >= len(items):
        raise ValidationError(f"No {field} entry at index {index}")
    if not isinstance(items[index], dict):
        raise ValidationError(f"{field}[{index}] is not an object")

    media_url = save_upload(upload, folder="projects", prefix=f"{field}-{index}")
    items[index] = {**items[index], "media": media_url}

    with persistence_guard(db, "project media update"):
        setattr(project, field, encode_json_list(items))
        project.updated_at = utc_now()
        db.commit()
    return media_url
