import pytest

from creatorhub.errors import ConflictError
from creatorhub.models.interaction import Like
from creatorhub.services import interaction_service


def _project(client, headers) -> int:
    return client.post("/api/projects", json={"project_name": "Target"}, headers=headers).json()["id"]


@pytest.mark.parametrize("kind", ["likes", "follows", "watches"])
def test_interaction_lifecycle(client, register, kind) -> None:
    alice = register("alice")
    bob = register("bob")
    project_id = _project(client, alice["headers"])
    target = {"entityType": "project", "entityId": project_id}

    created = client.post(f"/api/{kind}", json=target, headers=bob["headers"])
    assert created.status_code == 201, created.text
    assert created.json()["user_id"] == bob["user"]["id"]

    assert client.get(f"/api/{kind}/count", params=target).json()["count"] == 1
    assert client.get(f"/api/{kind}/status", params=target, headers=bob["headers"]).json()["active"] is True
    assert client.get(f"/api/{kind}/status", params=target, headers=alice["headers"]).json()["active"] is False
    assert client.get(f"/api/projects/{project_id}").json()[f"{kind}_count"] == 1

    removed = client.delete(f"/api/{kind}", params=target, headers=bob["headers"])
    assert removed.status_code == 200
    assert client.get(f"/api/{kind}/count", params=target).json()["count"] == 0
    assert client.get(f"/api/projects/{project_id}").json()[f"{kind}_count"] == 0

    again = client.delete(f"/api/{kind}", params=target, headers=bob["headers"])
    assert again.status_code == 404


def test_duplicate_like_is_conflict_and_stores_one_row(client, register) -> None:
    alice = register("alice")
    bob = register("bob")
    project_id = _project(client, alice["headers"])
    target = {"entityType": "project", "entityId": project_id}

    assert client.post("/api/likes", json=target, headers=bob["headers"]).status_code == 201
    duplicate = client.post("/api/likes", json=target, headers=bob["headers"])
    assert duplicate.status_code == 409

    assert client.get("/api/likes/count", params=target).json()["count"] == 1
    assert client.get(f"/api/projects/{project_id}").json()["likes_count"] == 1


def test_unique_constraint_is_the_guard(client, register) -> None:
    from creatorhub.database import SessionLocal

    alice = register("alice")
    post_id = client.post("/api/posts", json={"title": "p"}, headers=alice["headers"]).json()["id"]

    with SessionLocal() as db:
        interaction_service.create(db, "likes", "post", post_id, alice["user"]["id"])
        with pytest.raises(ConflictError):
            interaction_service.create(db, "likes", "post", post_id, alice["user"]["id"])
        assert db.query(Like).filter(Like.entity_type == "post", Like.entity_id == post_id).count() == 1


def test_missing_target_and_bad_entity_type(client, register) -> None:
    bob = register("bob")
    missing = client.post("/api/follows", json={"entityType": "article", "entityId": 999}, headers=bob["headers"])
    assert missing.status_code == 404

    bad_type = client.post("/api/follows", json={"entityType": "planet", "entityId": 1}, headers=bob["headers"])
    assert bad_type.status_code == 400


def test_interactions_require_auth(client) -> None:
    target = {"entityType": "user", "entityId": 1}
    assert client.post("/api/watches", json=target).status_code == 401
    assert client.get("/api/watches/status", params=target).status_code == 401
    assert client.get("/api/watches/count", params=target).status_code == 200


def test_follow_a_user_and_list_my_interactions(client, register) -> None:
    alice = register("alice")
    bob = register("bob")
    target = {"entityType": "user", "entityId": alice["user"]["id"]}

    client.post("/api/follows", json=target, headers=bob["headers"])
    client.post("/api/watches", json=target, headers=bob["headers"])

    assert client.get(f"/api/users/{alice['user']['id']}").json()["follows_count"] == 1

    mine = client.get("/api/users/me/interactions", headers=bob["headers"])
    assert mine.status_code == 200
    body = mine.json()
    assert [(f["entityType"], f["entityId"]) for f in body["follows"]] == [("user", alice["user"]["id"])]
    assert len(body["watches"]) == 1
    assert body["likes"] == []


@pytest.mark.parametrize(
    "entity_type, path, body",
    [
        ("project", "/api/projects", {"project_name": "Gone"}),
        ("article", "/api/articles", {"title": "Gone"}),
        ("post", "/api/posts", {"title": "Gone"}),
    ],
)
def test_deleting_entity_drops_its_interactions(client, register, entity_type, path, body) -> None:
    alice = register("alice")
    bob = register("bob")
    entity_id = client.post(path, json=body, headers=alice["headers"]).json()["id"]
    target = {"entityType": entity_type, "entityId": entity_id}
    for kind in ("likes", "follows", "watches"):
        assert client.post(f"/api/{kind}", json=target, headers=bob["headers"]).status_code == 201

    assert client.delete(f"{path}/{entity_id}", headers=alice["headers"]).status_code == 200

    for kind in ("likes", "follows", "watches"):
        assert client.get(f"/api/{kind}/count", params=target).json()["count"] == 0
        assert client.get(f"/api/{kind}/status", params=target, headers=bob["headers"]).json()["active"] is False
    mine = client.get("/api/users/me/interactions", headers=bob["headers"]).json()
    assert mine["likes"] == mine["follows"] == mine["watches"] == []

    # A fresh entity that reuses the id starts clean.
    reused_id = client.post(path, json=body, headers=alice["headers"]).json()["id"]
    fresh = {"entityType": entity_type, "entityId": reused_id}
    assert client.post("/api/likes", json=fresh, headers=bob["headers"]).status_code == 201
    assert client.get("/api/likes/count", params=fresh).json()["count"] == 1
    assert client.get(f"{path}/{reused_id}").json()["likes_count"] == 1
