# auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from creatorhub.database import get_db
from creatorhub.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from creatorhub.services.user_service import authenticate, build_user_profile, create_user
from creatorhub.utils.jwt_handler import create_user_token


router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(user_in: RegisterRequest, db: Session = Depends(get_db)) -> AuthResponse:
    user = create_user(db, username=user_in.username, email=user_in.email, password=user_in.password)
    return AuthResponse(user=build_user_profile(user), token=create_user_token(user))


@router.post("/login", response_model=AuthResponse)
def login_user(user_in: LoginRequest, db: Session = Depends(get_db)) -> AuthResponse:
    user = authenticate(db, email=user_in.email, password=user_in.password)
    return AuthResponse(user=build_user_profile(user), token=create_user_token(user))
