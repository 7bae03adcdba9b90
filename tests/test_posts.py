"""Tests for posts, likes, comments and tags."""
from studio.models import UserRole


def _create_post(client, user, **overrides):
    body = {"title": "Hello", "content": "First post", "published": True, **overrides}
    r = client.post("/api/posts", json=body, headers=user["headers"])
    assert r.status_code == 201, r.text
    return r.json()["data"]["post"]


def _create_tag(client, admin, name, color=None):
    r = client.post("/api/tags", json={"name": name, "color": color}, headers=admin["headers"])
    assert r.status_code == 201, r.text
    return r.json()["data"]["tag"]


def test_create_requires_auth(client):
    r = client.post("/api/posts", json={"title": "x", "content": "y"})
    assert r.status_code == 401


def test_listing_shows_published_only(client, make_user):
    alice = make_user("alice")
    _create_post(client, alice, title="Public")
    _create_post(client, alice, title="Draft", published=False)

    r = client.get("/api/posts")
    assert r.status_code == 200
    data = r.json()["data"]
    assert [p["title"] for p in data["posts"]] == ["Public"]
    assert data["pagination"] == {"page": 1, "limit": 10, "total": 1, "pages": 1}

    r = client.get("/api/posts/user/me", headers=alice["headers"])
    assert {p["title"] for p in r.json()["data"]["posts"]} == {"Public", "Draft"}


def test_pagination(client, make_user):
    alice = make_user("alice")
    for i in range(5):
        _create_post(client, alice, title=f"Post {i}")
    r = client.get("/api/posts", params={"page": 2, "limit": 2})
    data = r.json()["data"]
    assert len(data["posts"]) == 2
    assert data["pagination"]["total"] == 5
    assert data["pagination"]["pages"] == 3


def test_page_number_is_bounded(client, make_user):
    alice = make_user("alice")
    for path, headers in (("/api/posts", {}), ("/api/posts/user/me", alice["headers"])):
        r = client.get(path, params={"page": 10**19}, headers=headers)
        assert r.status_code == 400, path
        assert r.json()["success"] is False
        assert client.get(path, params={"page": 10_001}, headers=headers).status_code == 400
        assert client.get(path, params={"page": 10_000}, headers=headers).status_code == 200


def test_search_and_tag_filter(client, make_user):
    admin = make_user("boss", role=UserRole.ADMIN)
    alice = make_user("alice")
    design = _create_tag(client, admin, "Design", "#ff0000")
    _create_post(client, alice, title="Logo refresh", content="Branding work", tagIds=[design["id"]])
    _create_post(client, alice, title="Server migration", content="Moved to a new host")

    r = client.get("/api/posts", params={"search": "LOGO"})
    assert [p["title"] for p in r.json()["data"]["posts"]] == ["Logo refresh"]

    r = client.get("/api/posts", params={"search": "new host"})
    assert [p["title"] for p in r.json()["data"]["posts"]] == ["Server migration"]

    r = client.get("/api/posts", params={"tagId": design["id"]})
    posts = r.json()["data"]["posts"]
    assert [p["title"] for p in posts] == ["Logo refresh"]
    assert posts[0]["tags"] == [{"id": design["id"], "name": "Design", "color": "#ff0000"}]


def test_unknown_tag_is_rejected(client, make_user):
    alice = make_user("alice")
    r = client.post(
        "/api/posts",
        json={"title": "x", "content": "y", "tagIds": ["missing"]},
        headers=alice["headers"],
    )
    assert r.status_code == 400


def test_draft_visible_to_author_only(client, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    admin = make_user("boss", role=UserRole.ADMIN)
    draft = _create_post(client, alice, published=False)

    assert client.get(f"/api/posts/{draft['id']}").status_code == 404
    assert client.get(f"/api/posts/{draft['id']}", headers=bob["headers"]).status_code == 404
    r = client.get(f"/api/posts/{draft['id']}", headers=alice["headers"])
    assert r.status_code == 200
    assert r.json()["data"]["post"]["authorId"] == alice["id"]
    assert client.get(f"/api/posts/{draft['id']}", headers=admin["headers"]).status_code == 200


def test_non_owner_cannot_modify_post(client, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    post = _create_post(client, alice, title="Original")

    r = client.put(f"/api/posts/{post['id']}", json={"title": "Hijacked"}, headers=bob["headers"])
    assert r.status_code == 403
    r = client.delete(f"/api/posts/{post['id']}", headers=bob["headers"])
    assert r.status_code == 403

    r = client.get(f"/api/posts/{post['id']}")
    assert r.status_code == 200
    assert r.json()["data"]["post"]["title"] == "Original"


def test_owner_updates_and_admin_deletes(client, make_user):
    alice = make_user("alice")
    admin = make_user("boss", role=UserRole.ADMIN)
    post = _create_post(client, alice)

    r = client.put(
        f"/api/posts/{post['id']}",
        json={"title": "Edited", "published": False},
        headers=alice["headers"],
    )
    assert r.status_code == 200
    assert r.json()["data"]["post"]["title"] == "Edited"
    assert r.json()["data"]["post"]["published"] is False

    r = client.delete(f"/api/posts/{post['id']}", headers=admin["headers"])
    assert r.status_code == 200
    assert client.get(f"/api/posts/{post['id']}", headers=alice["headers"]).status_code == 404


def test_missing_post_is_404(client, make_user):
    alice = make_user("alice")
    assert client.get("/api/posts/nope").status_code == 404
    assert client.put("/api/posts/nope", json={"title": "x"}, headers=alice["headers"]).status_code == 404
    assert client.post("/api/posts/nope/like", headers=alice["headers"]).status_code == 404


def test_like_toggles(client, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    post = _create_post(client, alice)
    url = f"/api/posts/{post['id']}/like"

    assert client.post(url, headers=bob["headers"]).json()["data"]["liked"] is True
    assert client.post(url, headers=bob["headers"]).json()["data"]["liked"] is False
    assert client.post(url, headers=bob["headers"]).json()["data"]["liked"] is True

    r = client.get(f"/api/posts/{post['id']}")
    assert r.json()["data"]["post"]["likeCount"] == 1


def test_comments(client, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    carol = make_user("carol")
    post = _create_post(client, alice)

    r = client.post(f"/api/posts/{post['id']}/comments", json={"content": "Nice!"}, headers=bob["headers"])
    assert r.status_code == 201
    comment = r.json()["data"]["comment"]
    assert comment["author"]["username"] == "bob"

    r = client.put(
        f"/api/posts/{post['id']}/comments/{comment['id']}",
        json={"content": "Edited by someone else"},
        headers=carol["headers"],
    )
    assert r.status_code == 403

    r = client.get(f"/api/posts/{post['id']}")
    detail = r.json()["data"]["post"]
    assert detail["commentCount"] == 1
    assert detail["comments"][0]["content"] == "Nice!"

    r = client.delete(f"/api/posts/{post['id']}/comments/{comment['id']}", headers=bob["headers"])
    assert r.status_code == 200
    assert client.get(f"/api/posts/{post['id']}").json()["data"]["post"]["commentCount"] == 0


def test_deleting_post_removes_likes_and_comments(client, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    post = _create_post(client, alice)
    client.post(f"/api/posts/{post['id']}/like", headers=bob["headers"])
    client.post(f"/api/posts/{post['id']}/comments", json={"content": "hi"}, headers=bob["headers"])

    assert client.delete(f"/api/posts/{post['id']}", headers=alice["headers"]).status_code == 200


def test_tags_admin_only(client, make_user):
    alice = make_user("alice")
    admin = make_user("boss", role=UserRole.ADMIN)

    r = client.post("/api/tags", json={"name": "Design"}, headers=alice["headers"])
    assert r.status_code == 403

    tag = _create_tag(client, admin, "Design")
    r = client.post("/api/tags", json={"name": "Design"}, headers=admin["headers"])
    assert r.status_code == 409

    r = client.get("/api/tags")
    assert [t["name"] for t in r.json()["data"]["tags"]] == ["Design"]

    assert client.delete(f"/api/tags/{tag['id']}", headers=admin["headers"]).status_code == 200
    assert client.get("/api/tags").json()["data"]["tags"] == []
