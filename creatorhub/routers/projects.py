# projects.py
from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from creatorhub.database import get_db
from creatorhub.errors import NotFoundError
from creatorhub.models.user import User
from creatorhub.routers.dependencies import get_current_user, page_params
from creatorhub.schemas.common import MediaUploadResponse, MessageResponse
from creatorhub.schemas.project import ProjectImageResponse, ProjectListResponse, ProjectRead, ProjectWrite
from creatorhub.services import project_service


router = APIRouter()


@router.get("", response_model=ProjectListResponse)
def list_projects(paging: tuple[int, int] = Depends(page_params), db: Session = Depends(get_db)) -> ProjectListResponse:
    page, limit = paging
    items, total = project_service.list_projects(db, page=page, limit=limit)
    return ProjectListResponse(data=items, total=total, page=page, limit=limit)


@router.get("/user/{user_id}", response_model=list[ProjectRead])
def list_user_projects(user_id: int, db: Session = Depends(get_db)) -> list[ProjectRead]:
    return project_service.list_projects_by_user(db, user_id)


@router.get("/{project_id}", response_model=ProjectRead)
def read_project(project_id: int, db: Session = Depends(get_db)) -> ProjectRead:
    project = project_service.get_project(db, project_id)
    if project is None:
        raise NotFoundError("Project not found")
    return project


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(
    payload: ProjectWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProjectRead:
    return project_service.create_project(db, current_user, payload)


@router.put("/{project_id}", response_model=ProjectRead)
def update_project(
    project_id: int,
    payload: ProjectWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProjectRead:
    return project_service.update_project(db, project_id, current_user, payload)


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    project_service.delete_project(db, project_id, current_user)
    return MessageResponse(message="Project deleted")


@router.post("/{project_id}/image", response_model=ProjectImageResponse)
def upload_project_image(
    project_id: int,
    project_image: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProjectImageResponse:
    return ProjectImageResponse(imageUrl=project_service.set_project_image(db, project_id, current_user, project_image))


@router.post("/{project_id}/{field}/{index}/media", response_model=MediaUploadResponse)
def upload_item_media(
    project_id: int,
    field: str,
    index: int,
    media: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MediaUploadResponse:
    return MediaUploadResponse(url=project_service.set_item_media(db, project_id, current_user, field, index, media))
