# users.py
from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from creatorhub.database import get_db
from creatorhub.errors import NotFoundError
from creatorhub.models.user import User
from creatorhub.routers.dependencies import get_current_user
from creatorhub.schemas.interaction import UserInteractions
from creatorhub.schemas.user import ProfileImageResponse, UserPortfolio, UserProfile, UserUpdate
from creatorhub.services.interaction_service import list_user_interactions
from creatorhub.services.user_service import (
    build_user_profile,
    get_user_aggregate,
    get_user_portfolio,
    set_profile_image,
    update_user_aggregate,
)


router = APIRouter()


@router.get("/me", response_model=UserProfile)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserProfile:
    return build_user_profile(current_user)


@router.get("/me/interactions", response_model=UserInteractions)
def read_my_interactions(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> UserInteractions:
    return list_user_interactions(db, current_user.id)


@router.get("/{user_id}", response_model=UserProfile)
def read_user(user_id: int, db: Session = Depends(get_db)) -> UserProfile:
    profile = get_user_aggregate(db, user_id)
    if profile is None:
        raise NotFoundError("User not found")
    return profile


@router.put("/{user_id}", response_model=UserProfile)
def update_user(
    user_id: int,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserProfile:
    return update_user_aggregate(db, user_id, current_user, payload)


@router.post("/{user_id}/profile-image", response_model=ProfileImageResponse)
def upload_profile_image(
    user_id: int,
    profile_image: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileImageResponse:
    return ProfileImageResponse(imageUrl=set_profile_image(db, user_id, current_user, profile_image))


@router.get("/{user_id}/portfolio", response_model=UserPortfolio)
def read_user_portfolio(user_id: int, db: Session = Depends(get_db)) -> UserPortfolio:
    return get_user_portfolio(db, user_id)
