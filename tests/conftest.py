from __future__ import annotations

import os
import tempfile
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ.setdefault("DB_URL", "sqlite:///./test.db")
    os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
    os.environ.setdefault("ADMIN_EMAILS", '["admin@example.com"]')
    os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="creatorhub-uploads-"))

    # Ensure a local .env cannot leak into tests.
    os.environ["ENVIRONMENT"] = "test"


def reset_database() -> None:
    from creatorhub.database import Base, engine
    import creatorhub.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture()
def db_session() -> Any:
    from creatorhub.database import SessionLocal

    reset_database()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client() -> Any:
    from creatorhub.main import create_app

    reset_database()
    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def register(client: TestClient) -> Callable[..., dict[str, Any]]:
    """Register a user and return ``{"user", "token", "headers"}``."""

    def _register(username: str, email: str | None = None, password: str = "SecretPass123") -> dict[str, Any]:
        payload = {"username": username, "email": email or f"{username}@example.com", "password": password}
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        body = response.json()
        return {
            "user": body["user"],
            "token": body["token"],
            "headers": {"Authorization": f"Bearer {body['token']}"},
        }

    return _register
