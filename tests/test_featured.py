import asyncio

from sqlalchemy.exc import OperationalError

from creatorhub.database import SessionLocal
from creatorhub.services import featured_service


def _seed(client, register) -> None:
    alice = register("alice")
    register("bob")
    for i in range(4):
        client.post(
            "/api/projects",
            json={"project_name": f"P{i}", "project_tags": ["t"], "skills_required": ["edit"], "project_timeline": "Q3"},
            headers=alice["headers"],
        )
    client.post(
        "/api/articles",
        json={
            "title": "With media",
            "sections": [
                {"type": "full-width-text", "text": "Opening paragraph"},
                {"type": "full-width-media", "mediaUrl": "/uploads/articles/a.png"},
            ],
        },
        headers=alice["headers"],
    )
    client.post("/api/posts", json={"title": "Hi", "post_image_url": "https://cdn/p.png"}, headers=alice["headers"])


def test_featured_returns_latest_of_each_kind(client, register) -> None:
    _seed(client, register)
    response = client.get("/api/featured")
    assert response.status_code == 200
    body = response.json()

    assert [u["username"] for u in body["users"]] == ["bob", "alice"]
    assert [p["project_name"] for p in body["projects"]] == ["P3", "P2", "P1"]
    project = body["projects"][0]
    assert project["tags"] == ["t"]
    assert project["skills"] == ["edit"]
    assert project["timeline"] == "Q3"
    assert project["users"]["username"] == "alice"

    article = body["articles"][0]
    assert article["excerpt"] == "Opening paragraph..."
    assert article["mediaUrl"] == "/uploads/articles/a.png"
    assert body["posts"][0]["mediaUrl"] == "https://cdn/p.png"


def test_failing_kind_degrades_to_empty(client, register, monkeypatch) -> None:
    _seed(client, register)

    def broken(db, limit):
        raise OperationalError("SELECT posts", {}, Exception("table missing"))

    monkeypatch.setattr(featured_service, "_latest_posts", broken)
    response = client.get("/api/featured")
    assert response.status_code == 200
    body = response.json()
    assert body["posts"] == []
    assert len(body["projects"]) == 3
    assert len(body["users"]) == 2


def test_featured_service_respects_limit(client, register) -> None:
    _seed(client, register)
    content = asyncio.run(featured_service.get_featured_content(SessionLocal, limit=1))
    assert len(content.projects) == 1
    assert content.projects[0].project_name == "P3"
    assert len(content.users) == 1
