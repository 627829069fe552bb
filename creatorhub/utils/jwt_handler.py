# jwt_handler.py
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from creatorhub.config import require_jwt_secret, settings
from creatorhub.errors import AuthenticationError


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode["exp"] = expire
    return jwt.encode(to_encode, require_jwt_secret(settings), algorithm=settings.jwt_algorithm)


def create_user_token(user) -> str:
    return create_access_token({"id": user.id, "email": user.email, "username": user.username})


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, require_jwt_secret(settings), algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as exc:
        raise AuthenticationError("Token expired") from exc
    except JWTError as exc:
        raise AuthenticationError("Invalid token") from exc
