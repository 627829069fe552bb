from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)


def _normalize_email(value: str) -> str:
    return (value or "").strip().lower()


def _parse_list(raw: Any) -> list[str]:
    if raw is None:
        return []

    items: list[Any]
    if isinstance(raw, (list, tuple, set)):
        items = list(raw)
    elif isinstance(raw, str):
        s = raw.strip()
        if not s:
            return []

        # Support JSON array string or comma-separated string.
        if s.startswith("["):
            try:
                parsed = json.loads(s)
                items = parsed if isinstance(parsed, list) else [parsed]
            except ValueError:
                items = [p.strip() for p in s.split(",")]
        else:
            items = [p.strip() for p in s.split(",")]
    else:
        items = [raw]

    return [str(item).strip() for item in items if item is not None and str(item).strip()]


class Settings(BaseSettings):
    app_name: str = Field(default="Creatorhub API")
    api_prefix: str = Field(default="/api")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    db_url: str | None = Field(default=None, validation_alias="DB_URL")

    # No default: the app refuses to start without a signing secret.
    jwt_secret: str | None = Field(default=None, validation_alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60 * 24)

    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        validation_alias="CORS_ORIGINS",
    )

    # Admin accounts may edit any profile/project/article/post.
    # - JSON array string: ADMIN_EMAILS=["admin@example.com","ops@example.com"]
    # - Comma-separated:   ADMIN_EMAILS=admin@example.com,ops@example.com
    admin_emails: Annotated[list[str], NoDecode] = Field(default_factory=list, validation_alias="ADMIN_EMAILS")

    # Uploaded media lives on local disk and is served under /uploads.
    upload_dir: str = Field(default="uploads", validation_alias="UPLOAD_DIR")
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, validation_alias="MAX_UPLOAD_BYTES")
    default_avatar: str = Field(default="/placeholder.svg")

    default_page_limit: int = Field(default=12)
    max_page_limit: int = Field(default=100)
    featured_limit: int = Field(default=3)

    @field_validator("admin_emails", mode="before")
    @classmethod
    def _validate_admin_emails(cls, v: Any) -> list[str]:
        return [_normalize_email(e) for e in _parse_list(v)]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> list[str]:
        return _parse_list(v)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def build_sqlalchemy_db_url(settings: Settings) -> str:
    if settings.db_url:
        return settings.db_url
    return "sqlite:///./dev.db"


def require_jwt_secret(settings: Settings) -> str:
    secret = (settings.jwt_secret or "").strip()
    if not secret:
        raise RuntimeError("JWT_SECRET is not set; refusing to start without a token signing secret")
    return secret


def is_admin_email(email: str | None) -> bool:
    return _normalize_email(email or "") in set(settings.admin_emails or [])
