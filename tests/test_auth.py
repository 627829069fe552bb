from jose import jwt

from creatorhub.config import settings


def test_register_login_and_profile_flow(client) -> None:
    register_payload = {
        "username": "tester",
        "email": "Tester@Example.com",
        "password": "SecretPass123",
    }
    register_response = client.post("/api/auth/register", json=register_payload)
    assert register_response.status_code == 201
    created = register_response.json()
    assert created["user"]["email"] == "tester@example.com"
    assert created["user"]["username"] == "tester"
    assert created["user"]["profile_image"] == settings.default_avatar
    assert "password_hash" not in created["user"]
    assert created["token"]

    login_payload = {"email": "tester@example.com", "password": register_payload["password"]}
    login_response = client.post("/api/auth/login", json=login_payload)
    assert login_response.status_code == 200
    token_body = login_response.json()
    assert token_body["token_type"] == "bearer"

    claims = jwt.decode(token_body["token"], settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    assert claims["id"] == created["user"]["id"]
    assert claims["email"] == "tester@example.com"
    assert claims["username"] == "tester"
    assert "exp" in claims

    headers = {"Authorization": f"Bearer {token_body['token']}"}
    me = client.get("/api/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == "tester@example.com"
    assert me.json()["is_admin"] is False


def test_register_duplicate_email_is_conflict(client) -> None:
    payload = {"username": "first", "email": "dup@example.com", "password": "SecretPass123"}
    assert client.post("/api/auth/register", json=payload).status_code == 201

    again = client.post(
        "/api/auth/register",
        json={"username": "second", "email": "DUP@example.com", "password": "SecretPass123"},
    )
    assert again.status_code == 409


def test_register_missing_fields_is_bad_request(client) -> None:
    response = client.post("/api/auth/register", json={"email": "nouser@example.com"})
    assert response.status_code == 400


def test_register_ignores_admin_fields(client) -> None:
    register_payload = {
        "username": "evil",
        "email": "evil@example.com",
        "password": "SecretPass123",
        "is_admin": True,
        "user_type": "admin",
    }
    response = client.post("/api/auth/register", json=register_payload)
    assert response.status_code == 201
    assert response.json()["user"]["is_admin"] is False
    assert response.json()["user"]["user_type"] == "user"


def test_login_wrong_password_is_unauthorized(client, register) -> None:
    register("alice")
    response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "wrong-pass"})
    assert response.status_code == 401

    unknown = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "whatever"})
    assert unknown.status_code == 401


def test_protected_routes_require_valid_token(client) -> None:
    assert client.get("/api/users/me").status_code == 401
    bad = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert bad.status_code == 401
    assert bad.json()["detail"] == "Invalid token"


def test_admin_email_is_flagged(client, register) -> None:
    admin = register("boss", email="admin@example.com")
    assert admin["user"]["is_admin"] is True


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
