import io

from creatorhub.config import settings


def _work(title: str) -> dict:
    return {"title": title, "company": "Acme", "years": "2020-2022"}


def test_partial_update_leaves_unmentioned_data_alone(client, register) -> None:
    alice = register("alice")
    user_id = alice["user"]["id"]

    first = client.put(
        f"/api/users/{user_id}",
        json={
            "bio": "Video editor",
            "social_links": {"youtube": "yt/alice"},
            "work_experience": [_work("Editor"), _work("Producer")],
            "education": [{"degree": "BA", "school": "State", "year": "2019"}],
        },
        headers=alice["headers"],
    )
    assert first.status_code == 200, first.text

    second = client.put(f"/api/users/{user_id}", json={"career_title": "Lead"}, headers=alice["headers"])
    assert second.status_code == 200
    body = second.json()
    assert body["career_title"] == "Lead"
    assert body["bio"] == "Video editor"
    assert body["social_links"]["youtube"] == "yt/alice"
    assert [w["title"] for w in body["work_experience"]] == ["Editor", "Producer"]
    assert body["education"][0]["school"] == "State"


def test_collection_replace_is_wholesale_and_ordered(client, register) -> None:
    alice = register("alice")
    user_id = alice["user"]["id"]
    client.put(
        f"/api/users/{user_id}",
        json={"work_experience": [_work("A"), _work("B"), _work("C")]},
        headers=alice["headers"],
    )

    response = client.put(
        f"/api/users/{user_id}",
        json={"work_experience": [_work("C"), _work("A")], "endorsements": []},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    body = response.json()
    assert [w["title"] for w in body["work_experience"]] == ["C", "A"]
    assert body["endorsements"] == []

    fetched = client.get(f"/api/users/{user_id}").json()
    assert [w["title"] for w in fetched["work_experience"]] == ["C", "A"]


def test_string_counts_are_coerced(client, register) -> None:
    alice = register("alice")
    response = client.put(
        f"/api/users/{alice['user']['id']}",
        json={"career_experience": "7", "social_media_followers": "15000"},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    assert response.json()["career_experience"] == 7
    assert response.json()["social_media_followers"] == 15000


def test_empty_update_is_rejected(client, register) -> None:
    alice = register("alice")
    response = client.put(f"/api/users/{alice['user']['id']}", json={}, headers=alice["headers"])
    assert response.status_code == 400


def test_only_owner_or_admin_can_update(client, register) -> None:
    alice = register("alice")
    mallory = register("mallory")
    admin = register("boss", email="admin@example.com")
    url = f"/api/users/{alice['user']['id']}"

    assert client.put(url, json={"bio": "hacked"}).status_code == 401
    assert client.put(url, json={"bio": "hacked"}, headers=mallory["headers"]).status_code == 403
    assert client.get(url).json()["bio"] != "hacked"

    by_admin = client.put(url, json={"bio": "moderated"}, headers=admin["headers"])
    assert by_admin.status_code == 200
    assert by_admin.json()["bio"] == "moderated"


def test_username_clash_on_update_is_conflict(client, register) -> None:
    register("alice")
    bob = register("bob")
    response = client.put(f"/api/users/{bob['user']['id']}", json={"username": "alice"}, headers=bob["headers"])
    assert response.status_code == 409


def test_unknown_user_is_not_found(client, register) -> None:
    alice = register("alice")
    assert client.get("/api/users/9999").status_code == 404
    assert client.put("/api/users/9999", json={"bio": "x"}, headers=alice["headers"]).status_code == 404


def test_profile_image_upload(client, register) -> None:
    alice = register("alice")
    user_id = alice["user"]["id"]
    response = client.post(
        f"/api/users/{user_id}/profile-image",
        files={"profile_image": ("me.png", io.BytesIO(b"\x89PNG fake"), "image/png")},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    image_url = response.json()["imageUrl"]
    assert image_url.startswith("/uploads/profiles/")
    assert image_url.endswith(".png")
    assert client.get(f"/api/users/{user_id}").json()["profile_image"] == image_url
    assert client.get(image_url).status_code == 200


def test_profile_image_requires_a_file(client, register) -> None:
    alice = register("alice")
    response = client.post(f"/api/users/{alice['user']['id']}/profile-image", headers=alice["headers"])
    assert response.status_code == 400


def test_portfolio_lists_users_content(client, register) -> None:
    alice = register("alice")
    client.post("/api/projects", json={"project_name": "Doc"}, headers=alice["headers"])
    client.post("/api/posts", json={"title": "Hello"}, headers=alice["headers"])

    response = client.get(f"/api/users/{alice['user']['id']}/portfolio")
    assert response.status_code == 200
    body = response.json()
    assert [p["project_name"] for p in body["projects"]] == ["Doc"]
    assert [p["title"] for p in body["posts"]] == ["Hello"]
    assert body["articles"] == []


def test_failed_update_changes_nothing(client, register) -> None:
    register("alice")
    bob = register("bob")
    url = f"/api/users/{bob['user']['id']}"
    client.put(url, json={"bio": "Original", "work_experience": [_work("Keep")]}, headers=bob["headers"])

    response = client.put(
        url,
        json={"username": "alice", "bio": "Changed", "work_experience": [_work("Lose")]},
        headers=bob["headers"],
    )
    assert response.status_code == 409

    body = client.get(url).json()
    assert body["username"] == "bob"
    assert body["bio"] == "Original"
    assert [w["title"] for w in body["work_experience"]] == ["Keep"]


def test_oversized_upload_is_rejected(client, register, monkeypatch) -> None:
    monkeypatch.setattr(settings, "max_upload_bytes", 4)
    alice = register("alice")
    user_id = alice["user"]["id"]
    response = client.post(
        f"/api/users/{user_id}/profile-image",
        files={"profile_image": ("big.png", io.BytesIO(b"\x89PNG too big"), "image/png")},
        headers=alice["headers"],
    )
    assert response.status_code == 413
    assert "too large" in response.json()["detail"]
    assert client.get(f"/api/users/{user_id}").json()["profile_image"] == settings.default_avatar
