# auth.py
from pydantic import BaseModel, Field, field_validator

from creatorhub.schemas.common import validate_email_like
from creatorhub.schemas.user import UserProfile


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    email: str
    password: str = Field(min_length=6)

    @field_validator("username")
    @classmethod
    def _strip_username(cls, v: str) -> str:
        value = (v or "").strip()
        if not value:
            raise ValueError("username must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return validate_email_like(v)


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return validate_email_like(v)


class AuthResponse(BaseModel):
    user: UserProfile
    token: str
    token_type: str = "bearer"


class TokenData(BaseModel):
    user_id: int
