# dependencies.py
from typing import Callable

from fastapi import Depends, Query
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from creatorhub.config import settings
from creatorhub.database import SessionLocal, get_db
from creatorhub.errors import AuthenticationError
from creatorhub.models.user import User
from creatorhub.schemas.auth import TokenData
from creatorhub.utils.jwt_handler import decode_access_token


oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.api_prefix}/auth/login", auto_error=False)


def _user_from_token(db: Session, token: str) -> User:
    payload = decode_access_token(token)
    user_id = payload.get("id")
    if user_id is None:
        raise AuthenticationError("Invalid token payload")
    try:
        token_data = TokenData(user_id=int(user_id))
    except (TypeError, ValueError) as exc:
        raise AuthenticationError("Invalid token subject") from exc
    user = db.query(User).filter(User.id == token_data.user_id).first()
    if not user:
        raise AuthenticationError("User not found")
    return user


def get_current_user(db: Session = Depends(get_db), token: str | None = Depends(oauth2_scheme)) -> User:
    if not token:
        raise AuthenticationError("Not authenticated")
    return _user_from_token(db, token)


def get_session_factory() -> Callable[[], Session]:
    # Fan-out endpoints open one session per worker thread.
    return SessionLocal


def page_params(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_limit, ge=1, le=settings.max_page_limit),
) -> tuple[int, int]:
    return page, limit
