"""End-to-end HTTP tests through the FastAPI app with an in-memory database."""

import asyncio
import io
import json
import re
import time
import zipfile

import pytest

API = "/api/v1"


async def _create_category(client, headers, name="技术") -> dict:
    response = await client.post(
        f"{API}/categories", json={"name": name, "description": "技术相关文章"}, headers=headers
    )
    assert response.status_code == 201
    return response.json()["data"]


async def _create_tag(client, headers, name, color=None) -> dict:
    body = {"name": name}
    if color is not None:
        body["color"] = color
    response = await client.post(f"{API}/tags", json=body, headers=headers)
    assert response.status_code == 201
    return response.json()["data"]


async def _create_article(client, headers, **fields) -> dict:
    body = {"title": "Go语言入门", "content": "这是一篇关于Go语言的入门文章", **fields}
    response = await client.post(f"{API}/articles", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


# ── Authentication ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_login_rejects_wrong_password(client):
    response = await client.post(
        f"{API}/auth/login", json={"username": "admin", "password": "wrong"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_returns_token(client):
    response = await client.post(
        f"{API}/auth/login", json={"username": "admin", "password": "admin123"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "admin"
    assert body["token"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("post", "/articles"),
        ("put", "/articles/1"),
        ("delete", "/articles/1"),
        ("get", "/articles/backup"),
        ("post", "/categories"),
        ("delete", "/categories/1"),
        ("post", "/tags"),
        ("put", "/tags/1"),
    ],
)
async def test_write_endpoints_require_token(client, method, path):
    response = await client.request(method.upper(), f"{API}{path}", json={})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_invalid_token_is_rejected(client):
    response = await client.post(
        f"{API}/categories",
        json={"name": "x"},
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 401


# ── Categories and tags ──────────────────────────────────────────────


@pytest.mark.asyncio
async def test_category_crud(client, auth_headers):
    created = await _create_category(client, auth_headers)
    assert created["name"] == "技术"
    assert created["description"] == "技术相关文章"

    duplicate = await client.post(
        f"{API}/categories", json={"name": "技术"}, headers=auth_headers
    )
    assert duplicate.status_code == 400

    same_name = await client.put(
        f"{API}/categories/{created['id']}",
        json={"name": "技术", "description": "更新"},
        headers=auth_headers,
    )
    assert same_name.status_code == 200
    assert same_name.json()["data"]["description"] == "更新"

    listed = await client.get(f"{API}/categories")
    assert [c["name"] for c in listed.json()["data"]] == ["技术"]

    deleted = await client.delete(f"{API}/categories/{created['id']}", headers=auth_headers)
    assert deleted.status_code == 200
    missing = await client.get(f"{API}/categories/{created['id']}")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_tag_default_color_and_validation(client, auth_headers):
    plain = await _create_tag(client, auth_headers, "编程")
    assert plain["color"] == "#007bff"

    colored = await _create_tag(client, auth_headers, "Go语言", "#00ADD8")
    assert colored["color"] == "#00ADD8"

    bad_color = await client.post(
        f"{API}/tags", json={"name": "bad", "color": "blue"}, headers=auth_headers
    )
    assert bad_color.status_code == 422

    renamed = await client.put(
        f"{API}/tags/{plain['id']}", json={"name": "Go语言"}, headers=auth_headers
    )
    assert renamed.status_code == 400


# ── Articles ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_article_with_category_and_tags(client, auth_headers):
    category = await _create_category(client, auth_headers)
    go = await _create_tag(client, auth_headers, "Go语言")

    article = await _create_article(
        client, auth_headers, category_id=category["id"], tag_ids=[go["id"]], published=True
    )

    assert article["category"]["name"] == "技术"
    assert [t["name"] for t in article["tags"]] == ["Go语言"]

    fetched = await client.get(f"{API}/articles/{article['id']}")
    assert fetched.status_code == 200
    body = fetched.json()
    assert body["code"] == 200
    assert body["message"] == "success"
    assert body["data"]["title"] == "Go语言入门"


@pytest.mark.asyncio
async def test_create_article_with_unknown_tag_persists_nothing(client, auth_headers):
    tag = await _create_tag(client, auth_headers, "Go语言")

    response = await client.post(
        f"{API}/articles",
        json={"title": "t", "content": "c", "tag_ids": [tag["id"], tag["id"] + 100]},
        headers=auth_headers,
    )
    assert response.status_code == 400

    listed = await client.get(f"{API}/articles")
    assert listed.json()["data"] == []


@pytest.mark.asyncio
async def test_create_article_with_unknown_category_is_not_found(client, auth_headers):
    response = await client.post(
        f"{API}/articles",
        json={"title": "t", "content": "c", "category_id": 42},
        headers=auth_headers,
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_article_validates_body(client, auth_headers):
    response = await client.post(
        f"{API}/articles", json={"title": "", "content": "c"}, headers=auth_headers
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_articles_paged_envelope(client, auth_headers):
    for i in range(3):
        await _create_article(client, auth_headers, title=f"Post {i}", published=i != 1)

    unpaged = await client.get(f"{API}/articles")
    body = unpaged.json()
    assert "meta" not in body
    assert [a["title"] for a in body["data"]] == ["Post 2", "Post 1", "Post 0"]

    paged = await client.get(f"{API}/articles", params={"page": 1, "limit": 2})
    body = paged.json()
    assert len(body["data"]) == 2
    assert body["meta"] == {"page": 1, "limit": 2, "total": 3, "total_page": 2}

    published = await client.get(
        f"{API}/articles", params={"page": 1, "limit": 10, "published": "true"}
    )
    assert published.json()["meta"]["total"] == 2

    lenient = await client.get(f"{API}/articles", params={"page": "abc", "limit": "500"})
    assert lenient.status_code == 200
    assert "meta" not in lenient.json()


@pytest.mark.asyncio
async def test_search_articles(client, auth_headers):
    await _create_article(client, auth_headers, title="Go语言入门")
    await _create_article(client, auth_headers, title="Docker容器化部署", content="部署指南")

    response = await client.get(f"{API}/articles", params={"search": "docker"})
    assert [a["title"] for a in response.json()["data"]] == ["Docker容器化部署"]


@pytest.mark.asyncio
async def test_scoped_listings(client, auth_headers):
    category = await _create_category(client, auth_headers)
    tag = await _create_tag(client, auth_headers, "Docker")
    await _create_article(client, auth_headers, title="in category", category_id=category["id"])
    await _create_article(client, auth_headers, title="tagged", tag_ids=[tag["id"]])

    by_category = await client.get(f"{API}/articles/category/{category['id']}")
    assert [a["title"] for a in by_category.json()["data"]] == ["in category"]

    by_tag = await client.get(f"{API}/articles/tag/{tag['id']}", params={"page": 1})
    body = by_tag.json()
    assert [a["title"] for a in body["data"]] == ["tagged"]
    assert body["meta"]["limit"] == 10

    assert (await client.get(f"{API}/articles/category/999")).status_code == 404
    assert (await client.get(f"{API}/articles/tag/999")).status_code == 404


@pytest.mark.asyncio
async def test_update_and_delete_article(client, auth_headers):
    article = await _create_article(client, auth_headers)

    updated = await client.put(
        f"{API}/articles/{article['id']}",
        json={"title": "Go语言进阶", "content": "新内容", "published": True},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["title"] == "Go语言进阶"
    assert updated.json()["data"]["published"] is True

    missing = await client.put(
        f"{API}/articles/999", json={"title": "x", "content": "y"}, headers=auth_headers
    )
    assert missing.status_code == 404

    deleted = await client.delete(f"{API}/articles/{article['id']}", headers=auth_headers)
    assert deleted.status_code == 200
    again = await client.delete(f"{API}/articles/{article['id']}", headers=auth_headers)
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_deleting_category_keeps_articles(client, auth_headers):
    category = await _create_category(client, auth_headers)
    article = await _create_article(client, auth_headers, category_id=category["id"])

    await client.delete(f"{API}/categories/{category['id']}", headers=auth_headers)

    fetched = await client.get(f"{API}/articles/{article['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["category"] is None


# ── Backup ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_backup_download(client, auth_headers):
    tag = await _create_tag(client, auth_headers, "Go语言")
    await _create_article(client, auth_headers, title="Go语言入门", tag_ids=[tag["id"]])
    await _create_article(client, auth_headers, title="a/b: c?")

    response = await client.get(f"{API}/articles/backup", headers=auth_headers)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/zip"
    assert re.fullmatch(
        r'attachment; filename="articles_backup_\d{8}_\d{6}\.zip"',
        response.headers["content-disposition"],
    )
    assert int(response.headers["content-length"]) == len(response.content)

    with zipfile.ZipFile(io.BytesIO(response.content)) as zf:
        names = zf.namelist()
        manifest = json.loads(zf.read("articles_backup.json"))
        info = zf.read("backup_info.txt").decode("utf-8")

    assert manifest["article_count"] == 2
    assert [a["title"] for a in manifest["articles"]] == ["a/b: c?", "Go语言入门"]
    assert "文章总数: 2" in info
    assert sorted(n for n in names if n.startswith("articles/")) == [
        "articles/1_Go____.json",
        "articles/2_a_b_ c_.json",
    ]


@pytest.mark.asyncio
async def test_scoped_listings_ignore_search(client, auth_headers):
    category = await _create_category(client, auth_headers)
    tag = await _create_tag(client, auth_headers, "Docker")
    await _create_article(
        client, auth_headers, title="scoped", category_id=category["id"], tag_ids=[tag["id"]]
    )

    by_category = await client.get(
        f"{API}/articles/category/{category['id']}", params={"search": "nomatch"}
    )
    by_tag = await client.get(f"{API}/articles/tag/{tag['id']}", params={"search": "nomatch"})

    assert [a["title"] for a in by_category.json()["data"]] == ["scoped"]
    assert [a["title"] for a in by_tag.json()["data"]] == ["scoped"]


# ── Error envelope ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_not_found_uses_envelope(client):
    response = await client.get(f"{API}/articles/999")

    assert response.status_code == 404
    assert response.json() == {"code": 404, "message": "Article with id '999' not found"}


@pytest.mark.asyncio
async def test_unauthorized_uses_envelope(client):
    response = await client.post(f"{API}/categories", json={"name": "x"})

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    body = response.json()
    assert body["code"] == 401
    assert body["message"]
    assert "detail" not in body


@pytest.mark.asyncio
async def test_validation_error_uses_envelope(client, auth_headers):
    response = await client.post(
        f"{API}/articles", json={"title": "", "content": "c"}, headers=auth_headers
    )

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == 422
    assert body["message"] == "invalid request"
    assert body["data"][0]["loc"][-1] == "title"


@pytest.mark.asyncio
async def test_unknown_route_uses_envelope(client):
    response = await client.get("/api/v1/nowhere")

    assert response.status_code == 404
    assert response.json()["code"] == 404


# ── Concurrency ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_logins_do_not_block_event_loop(client):
    ticks = 0
    stop = asyncio.Event()

    async def ticker():
        nonlocal ticks
        while not stop.is_set():
            await asyncio.sleep(0.005)
            ticks += 1

    ticker_task = asyncio.create_task(ticker())
    started = time.perf_counter()
    responses = await asyncio.gather(
        *(
            client.post(f"{API}/auth/login", json={"username": "admin", "password": "admin123"})
            for _ in range(4)
        )
    )
    elapsed = time.perf_counter() - started
    stop.set()
    await ticker_task

    assert all(r.status_code == 200 for r in responses)
    # A free loop ticks roughly every 5 ms; allow generous scheduling slack.
    assert ticks >= (elapsed / 0.005) * 0.25
