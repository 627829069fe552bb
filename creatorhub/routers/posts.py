# posts.py
from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from creatorhub.database import get_db
from creatorhub.errors import NotFoundError
from creatorhub.models.user import User
from creatorhub.routers.dependencies import get_current_user, page_params
from creatorhub.schemas.common import MessageResponse
from creatorhub.schemas.post import CommentCreate, PostImageResponse, PostListResponse, PostRead, PostWrite
from creatorhub.services import post_service


router = APIRouter()


@router.get("", response_model=PostListResponse)
def list_posts(paging: tuple[int, int] = Depends(page_params), db: Session = Depends(get_db)) -> PostListResponse:
    page, limit = paging
    items, total = post_service.list_posts(db, page=page, limit=limit)
    return PostListResponse(posts=items, total=total, page=page, limit=limit)


@router.get("/{post_id}", response_model=PostRead)
def read_post(post_id: int, db: Session = Depends(get_db)) -> PostRead:
    post = post_service.get_post(db, post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PostRead:
    return post_service.create_post(db, current_user, payload)


@router.put("/{post_id}", response_model=PostRead)
def update_post(
    post_id: int,
    payload: PostWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PostRead:
    return post_service.update_post(db, post_id, current_user, payload)


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    post_service.delete_post(db, post_id, current_user)
    return MessageResponse(message="Post deleted")


@router.post("/{post_id}/like", response_model=PostRead)
def like_post(post_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> PostRead:
    return post_service.like_post(db, post_id)


@router.post("/{post_id}/comment", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def comment_on_post(
    post_id: int,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PostRead:
    return post_service.comment_on_post(db, post_id, current_user, payload.text)


@router.post("/{post_id}/image", response_model=PostImageResponse)
def upload_post_image(
    post_id: int,
    post_image: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PostImageResponse:
    return PostImageResponse(imageUrl=post_service.set_post_image(db, post_id, current_user, post_image))
