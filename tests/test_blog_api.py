"""End-to-end tests for /api/blogs through the HTTP layer."""

import asyncio

from fastapi.testclient import TestClient

from main import create_app

NEW_BLOG = {
    "title": "TDD harms architecture",
    "author": "Robert C. Martin",
    "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
    "likes": 0,
}

UPDATED_BLOG = {
    "title": "title",
    "author": "author",
    "url": "https://fullstackopen.com/en/part4/",
    "likes": 67,
}


def _list(client):
    resp = client.get("/api/blogs")
    assert resp.status_code == 200
    return resp.json()


# --- GET /api/blogs ---

def test_list_returns_all_blogs_as_json(client, initial_blogs):
    resp = client.get("/api/blogs")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert len(resp.json()) == len(initial_blogs)


def test_unique_identifier_is_named_id(client):
    blogs = _list(client)
    assert len(blogs) > 0
    for blog in blogs:
        assert isinstance(blog["id"], str)
        assert "_id" not in blog
        assert "__v" not in blog


def test_list_keeps_storage_order(client, initial_blogs):
    ids = [blog["id"] for blog in _list(client)]
    assert ids == [doc["_id"] for doc in initial_blogs]


def test_list_empty_store(client, store):
    asyncio.run(store.delete_all())
    assert _list(client) == []


# --- POST /api/blogs ---

def test_create_blog(client):
    initial_length = len(_list(client))

    resp = client.post("/api/blogs", json=NEW_BLOG)
    assert resp.status_code == 201
    assert resp.headers["content-type"].startswith("application/json")
    created = resp.json()
    assert isinstance(created["id"], str)
    assert "_id" not in created
    assert {k: created[k] for k in NEW_BLOG} == NEW_BLOG

    blogs = _list(client)
    assert len(blogs) == initial_length + 1
    assert any(blog["id"] == created["id"] for blog in blogs)


def test_create_defaults_likes_to_zero(client):
    body = {k: v for k, v in NEW_BLOG.items() if k != "likes"}
    resp = client.post("/api/blogs", json=body)
    assert resp.status_code == 201
    assert resp.json()["likes"] == 0


def test_create_missing_title_is_rejected(client, initial_blogs):
    body = {k: v for k, v in NEW_BLOG.items() if k != "title"}
    resp = client.post("/api/blogs", json=body)
    assert resp.status_code == 400
    assert len(_list(client)) == len(initial_blogs)


def test_create_missing_url_is_rejected(client):
    body = {k: v for k, v in NEW_BLOG.items() if k != "url"}
    resp = client.post("/api/blogs", json=body)
    assert resp.status_code == 400


def test_create_blank_author_is_rejected(client):
    resp = client.post("/api/blogs", json={**NEW_BLOG, "author": "   "})
    assert resp.status_code == 400


def test_create_negative_likes_is_rejected(client):
    resp = client.post("/api/blogs", json={**NEW_BLOG, "likes": -1})
    assert resp.status_code == 400


def test_create_invalid_json_is_rejected(client):
    resp = client.post(
        "/api/blogs",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400


# --- GET /api/blogs/{id} ---

def test_get_single_blog(client, initial_blogs):
    first = initial_blogs[0]
    resp = client.get(f"/api/blogs/{first['_id']}")
    assert resp.status_code == 200
    assert resp.json() == {
        "id": first["_id"],
        "title": first["title"],
        "author": first["author"],
        "url": first["url"],
        "likes": first["likes"],
    }


def test_get_unknown_blog_is_404(client):
    resp = client.get("/api/blogs/5a422a851b54a676234d0000")
    assert resp.status_code == 404


def test_get_malformed_id_is_400(client):
    resp = client.get("/api/blogs/not-an-id")
    assert resp.status_code == 400
    assert resp.json() == {"detail": "malformatted id"}


# --- DELETE /api/blogs/{id} ---

def test_delete_blog(client):
    blogs = _list(client)
    blog_to_delete = blogs[0]

    resp = client.delete(f"/api/blogs/{blog_to_delete['id']}")
    assert resp.status_code == 204
    assert resp.content == b""

    remaining = _list(client)
    assert len(remaining) == len(blogs) - 1
    assert not any(blog["id"] == blog_to_delete["id"] for blog in remaining)


def test_delete_twice_is_idempotent(client, initial_blogs):
    blog_id = initial_blogs[0]["_id"]
    assert client.delete(f"/api/blogs/{blog_id}").status_code == 204
    assert client.delete(f"/api/blogs/{blog_id}").status_code == 204
    assert len(_list(client)) == len(initial_blogs) - 1


def test_delete_unknown_id_leaves_list_untouched(client, initial_blogs):
    resp = client.delete("/api/blogs/5a422a851b54a676234d0000")
    assert resp.status_code == 204
    assert len(_list(client)) == len(initial_blogs)


def test_delete_malformed_id_is_400(client):
    resp = client.delete("/api/blogs/12345")
    assert resp.status_code == 400


def test_id_with_trailing_newline_is_malformed(client, initial_blogs):
    blog_id = initial_blogs[0]["_id"]
    assert client.delete(f"/api/blogs/{blog_id}%0A").status_code == 400
    assert client.get(f"/api/blogs/{blog_id}%0A").status_code == 400
    resp = client.put(f"/api/blogs/{blog_id}%0A", json=UPDATED_BLOG)
    assert resp.status_code == 400
    assert resp.json() == {"detail": "malformatted id"}
    assert len(_list(client)) == len(initial_blogs)


# --- PUT /api/blogs/{id} ---

def test_update_blog(client):
    blog_to_update = _list(client)[0]

    resp = client.put(f"/api/blogs/{blog_to_update['id']}", json=UPDATED_BLOG)
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    body = resp.json()
    for field, value in UPDATED_BLOG.items():
        assert body[field] == value
    assert body["id"] == blog_to_update["id"]

    from_list = next(b for b in _list(client) if b["id"] == blog_to_update["id"])
    for field, value in UPDATED_BLOG.items():
        assert from_list[field] == value


def test_ids_are_case_insensitive(client, initial_blogs):
    blog_id = initial_blogs[0]["_id"]
    upper_id = blog_id.upper()

    resp = client.put(f"/api/blogs/{upper_id}", json=UPDATED_BLOG)
    assert resp.status_code == 200
    assert resp.json()["id"] == blog_id

    assert client.get(f"/api/blogs/{upper_id}").json()["title"] == UPDATED_BLOG["title"]

    assert client.delete(f"/api/blogs/{upper_id}").status_code == 204
    assert all(blog["id"] != blog_id for blog in _list(client))


def test_update_unknown_id_is_404(client):
    resp = client.put("/api/blogs/5a422a851b54a676234d0000", json=UPDATED_BLOG)
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Blog not found"}


def test_update_malformed_id_is_400(client):
    resp = client.put("/api/blogs/xyz", json=UPDATED_BLOG)
    assert resp.status_code == 400


def test_update_requires_every_field(client, initial_blogs):
    blog_id = initial_blogs[0]["_id"]
    body = {k: v for k, v in UPDATED_BLOG.items() if k != "likes"}
    resp = client.put(f"/api/blogs/{blog_id}", json=body)
    assert resp.status_code == 400


# --- GET /api/blogs/stats ---

def test_stats(client):
    resp = client.get("/api/blogs/stats")
    assert resp.status_code == 200
    assert resp.json() == {
        "count": 3,
        "total_likes": 24,
        "favorite_blog": {
            "title": "Canonical string reduction",
            "author": "Edsger W. Dijkstra",
            "likes": 12,
        },
        "most_blogs": {"author": "Edsger W. Dijkstra", "blogs": 2},
        "most_likes": {"author": "Edsger W. Dijkstra", "likes": 17},
    }


# --- Misc ---

def test_health_check(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_store_failure_is_500(store, monkeypatch):
    async def broken():
        raise RuntimeError("storage down")

    monkeypatch.setattr(store, "list_blogs", broken)
    with TestClient(create_app(store=store), raise_server_exceptions=False) as c:
        resp = c.get("/api/blogs")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error: RuntimeError"}
