import io

from creatorhub.services.article_service import (
    insert_section,
    make_excerpt,
    move_section,
    remove_section,
)


def _sections(*texts: str) -> list[dict]:
    return [{"type": "full-width-text", "text": text} for text in texts]


def test_create_fills_order_and_default_title(client, register) -> None:
    alice = register("alice")
    response = client.post(
        "/api/articles",
        json={"title": "  ", "tags": ["craft"], "sections": _sections("one", "two", "three")},
        headers=alice["headers"],
    )
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["title"] == "Untitled Article"
    assert [s["order"] for s in body["sections"]] == [0, 1, 2]
    assert [s["text"] for s in body["sections"]] == ["one", "two", "three"]


def test_sections_are_sorted_and_renumbered_densely(client, register) -> None:
    alice = register("alice")
    sections = [
        {"type": "full-width-text", "text": "last", "order": 9},
        {"type": "full-width-media", "mediaUrl": "/m.png", "mediaSubtext": "cap", "order": 2},
        {"type": "left-text-right-media", "text": "middle", "order": 5},
    ]
    body = client.post("/api/articles", json={"title": "Ordered", "sections": sections}, headers=alice["headers"]).json()
    assert [s["order"] for s in body["sections"]] == [0, 1, 2]
    assert [s["type"] for s in body["sections"]] == ["full-width-media", "left-text-right-media", "full-width-text"]
    assert body["sections"][0]["mediaUrl"] == "/m.png"
    assert body["sections"][0]["mediaSubtext"] == "cap"


def test_update_replaces_all_sections(client, register) -> None:
    alice = register("alice")
    article = client.post(
        "/api/articles",
        json={"title": "Draft", "sections": _sections("a", "b", "c")},
        headers=alice["headers"],
    ).json()

    reordered = [{**s, "order": i} for i, s in enumerate([article["sections"][2], article["sections"][0]])]
    response = client.put(
        f"/api/articles/{article['id']}",
        json={"title": "Final", "sections": reordered},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Final"
    assert [s["text"] for s in body["sections"]] == ["c", "a"]
    assert [s["order"] for s in body["sections"]] == [0, 1]

    fetched = client.get(f"/api/articles/{article['id']}").json()
    assert [s["text"] for s in fetched["sections"]] == ["c", "a"]


def test_invalid_section_type_is_rejected(client, register) -> None:
    alice = register("alice")
    response = client.post(
        "/api/articles",
        json={"title": "Bad", "sections": [{"type": "carousel"}]},
        headers=alice["headers"],
    )
    assert response.status_code == 400


def test_article_ownership_and_delete(client, register) -> None:
    alice = register("alice")
    mallory = register("mallory")
    article_id = client.post("/api/articles", json={"title": "Mine"}, headers=alice["headers"]).json()["id"]

    assert client.put(f"/api/articles/{article_id}", json={"title": "Theirs"}, headers=mallory["headers"]).status_code == 403
    assert client.delete(f"/api/articles/{article_id}", headers=mallory["headers"]).status_code == 403
    assert client.delete(f"/api/articles/{article_id}", headers=alice["headers"]).status_code == 200
    assert client.get(f"/api/articles/{article_id}").status_code == 404
    assert client.delete(f"/api/articles/{article_id}", headers=alice["headers"]).status_code == 404


def test_list_articles_paginates(client, register) -> None:
    alice = register("alice")
    for i in range(3):
        client.post("/api/articles", json={"title": f"A{i}"}, headers=alice["headers"])

    body = client.get("/api/articles", params={"page": 2, "limit": 2}).json()
    assert body["total"] == 3
    assert body["page"] == 2
    assert [a["title"] for a in body["data"]] == ["A0"]


def test_section_media_upload(client, register) -> None:
    alice = register("alice")
    article = client.post(
        "/api/articles",
        json={"title": "Media", "sections": _sections("intro", "body")},
        headers=alice["headers"],
    ).json()

    response = client.post(
        f"/api/articles/{article['id']}/media",
        files={"file": ("shot.gif", io.BytesIO(b"gif"), "image/gif")},
        data={"sectionIndex": "1"},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    sections = client.get(f"/api/articles/{article['id']}").json()["sections"]
    assert sections[1]["mediaUrl"] == response.json()["mediaUrl"]
    assert sections[0]["mediaUrl"] is None

    bad = client.post(
        f"/api/articles/{article['id']}/media",
        files={"file": ("shot.gif", io.BytesIO(b"gif"), "image/gif")},
        data={"sectionIndex": "7"},
        headers=alice["headers"],
    )
    assert bad.status_code == 400


def test_editor_helpers_keep_orders_dense() -> None:
    sections = [{"text": t, "order": i} for i, t in enumerate("abc")]

    moved = move_section(sections, 2, "up")
    assert [s["text"] for s in moved] == ["a", "c", "b"]
    assert [s["order"] for s in moved] == [0, 1, 2]

    assert [s["text"] for s in move_section(sections, 0, "up")] == ["a", "b", "c"]

    inserted = insert_section(sections, 1, {"text": "new"})
    assert [s["text"] for s in inserted] == ["a", "new", "b", "c"]
    assert [s["order"] for s in inserted] == [0, 1, 2, 3]

    removed = remove_section(sections, 0)
    assert [s["text"] for s in removed] == ["b", "c"]
    assert [s["order"] for s in removed] == [0, 1]


def test_excerpt() -> None:
    assert make_excerpt(None) == "No content available"
    assert make_excerpt("short") == "short..."
    assert make_excerpt("x" * 200) == "x" * 150 + "..."


def test_section_media_requires_section_index(client, register) -> None:
    alice = register("alice")
    article_id = client.post(
        "/api/articles",
        json={"title": "Media", "sections": _sections("intro")},
        headers=alice["headers"],
    ).json()["id"]

    response = client.post(
        f"/api/articles/{article_id}/media",
        files={"file": ("shot.gif", io.BytesIO(b"gif"), "image/gif")},
        headers=alice["headers"],
    )
    assert response.status_code == 400
