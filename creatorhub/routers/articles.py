# articles.py
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from creatorhub.database import get_db
from creatorhub.errors import NotFoundError
from creatorhub.models.user import User
from creatorhub.routers.dependencies import get_current_user, page_params
from creatorhub.schemas.article import ArticleListResponse, ArticleMediaResponse, ArticleRead, ArticleWrite
from creatorhub.schemas.common import MessageResponse
from creatorhub.services import article_service


router = APIRouter()


@router.get("", response_model=ArticleListResponse)
def list_articles(paging: tuple[int, int] = Depends(page_params), db: Session = Depends(get_db)) -> ArticleListResponse:
    page, limit = paging
    items, total = article_service.list_articles(db, page=page, limit=limit)
    return ArticleListResponse(data=items, total=total, page=page, limit=limit)


@router.get("/user/{user_id}", response_model=list[ArticleRead])
def list_user_articles(user_id: int, db: Session = Depends(get_db)) -> list[ArticleRead]:
    return article_service.list_articles_by_user(db, user_id)


@router.get("/{article_id}", response_model=ArticleRead)
def read_article(article_id: int, db: Session = Depends(get_db)) -> ArticleRead:
    article = article_service.get_article(db, article_id)
    if article is None:
        raise NotFoundError("Article not found")
    return article


@router.post("", response_model=ArticleRead, status_code=status.HTTP_201_CREATED)
def create_article(
    payload: ArticleWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ArticleRead:
    return article_service.create_article(db, current_user, payload)


@router.put("/{article_id}", response_model=ArticleRead)
def update_article(
    article_id: int,
    payload: ArticleWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ArticleRead:
    return article_service.update_article(db, article_id, current_user, payload)


@router.delete("/{article_id}", response_model=MessageResponse)
def delete_article(
    article_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    article_service.delete_article(db, article_id, current_user)
    return MessageResponse(message="Article deleted")


@router.post("/{article_id}/media", response_model=ArticleMediaResponse)
def upload_section_media(
    article_id: int,
    sectionIndex: int = Form(...),
    file: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ArticleMediaResponse:
    media_url = article_service.set_section_media(db, article_id, current_user, sectionIndex, file)
    return ArticleMediaResponse(mediaUrl=media_url)
