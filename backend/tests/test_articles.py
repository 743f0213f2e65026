"""Tests for article endpoints and derived-field persistence."""

import pytest

pytestmark = pytest.mark.asyncio


async def _create(client, headers, payload):
    response = await client.post("/articles/create", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_requires_admin(async_client, article_payload):
    response = await async_client.post("/articles/create", json=article_payload())
    assert response.status_code == 401


async def test_create_derives_fields(async_client, admin_headers, article_payload):
    data = await _create(async_client, admin_headers, article_payload())

    assert data["slug"] == "scaling-ai-in-the-enterprise"
    assert data["word_count"] == 450
    assert data["read_time_minutes"] == 2
    assert data["status"] == "draft"
    assert data["published_at"] is None
    assert data["views"] == 0
    assert data["likes"] == 0


async def test_create_published_sets_published_at(async_client, admin_headers, article_payload):
    data = await _create(async_client, admin_headers, article_payload(status="published"))
    assert data["published_at"] is not None


async def test_explicit_read_time_is_kept(async_client, admin_headers, article_payload):
    data = await _create(async_client, admin_headers, article_payload(read_time_minutes=15))
    assert data["read_time_minutes"] == 15


async def test_duplicate_slug_conflicts(async_client, admin_headers, article_payload):
    await _create(async_client, admin_headers, article_payload())
    response = await async_client.post(
        "/articles/create", json=article_payload(), headers=admin_headers
    )
    assert response.status_code == 409


async def test_title_without_slug_characters_is_rejected(
    async_client, admin_headers, article_payload
):
    response = await async_client.post(
        "/articles/create", json=article_payload(title="!!! ??? ***"), headers=admin_headers
    )
    assert response.status_code == 400


async def test_too_many_tags(async_client, admin_headers, article_payload):
    response = await async_client.post(
        "/articles/create",
        json=article_payload(tags=[f"t{i}" for i in range(9)]),
        headers=admin_headers,
    )
    assert response.status_code == 422


async def test_publish_once_keeps_first_date(async_client, admin_headers, article_payload):
    created = await _create(async_client, admin_headers, article_payload())

    first = await async_client.put(
        f"/articles/{created['id']}", json={"status": "published"}, headers=admin_headers
    )
    assert first.status_code == 200
    published_at = first.json()["published_at"]
    assert published_at is not None

    await async_client.put(
        f"/articles/{created['id']}", json={"status": "draft"}, headers=admin_headers
    )
    again = await async_client.put(
        f"/articles/{created['id']}", json={"status": "published"}, headers=admin_headers
    )
    assert again.json()["published_at"] == published_at


async def test_update_title_keeps_slug(async_client, admin_headers, article_payload):
    created = await _create(async_client, admin_headers, article_payload())

    response = await async_client.put(
        f"/articles/{created['id']}",
        json={"title": "A Completely Different Title"},
        headers=admin_headers,
    )
    assert response.json()["slug"] == created["slug"]
    assert response.json()["title"] == "A Completely Different Title"


async def test_update_content_recomputes_counts(async_client, admin_headers, article_payload):
    created = await _create(async_client, admin_headers, article_payload())

    response = await async_client.put(
        f"/articles/{created['id']}",
        json={"content": " ".join(["word"] * 1000)},
        headers=admin_headers,
    )
    assert response.json()["word_count"] == 1000
    assert response.json()["read_time_minutes"] == 5


async def test_public_listings(async_client, admin_headers, article_payload):
    draft = await _create(async_client, admin_headers, article_payload())
    published = await _create(
        async_client,
        admin_headers,
        article_payload(
            title="Responsible AI Adoption",
            category="AI Ethics",
            status="published",
            is_featured=True,
        ),
    )

    everything = await async_client.get("/articles")
    assert everything.json()["total"] == 2

    for path in (
        "/articles/published",
        "/articles/featured",
        "/articles/recent",
        "/articles/category/AI Ethics",
    ):
        response = await async_client.get(path)
        assert [a["id"] for a in response.json()["items"]] == [published["id"]], path

    search = await async_client.get("/articles/search", params={"q": "responsible"})
    assert [a["id"] for a in search.json()["items"]] == [published["id"]]

    by_slug = await async_client.get(f"/articles/slug/{draft['slug']}")
    assert by_slug.json()["id"] == draft["id"]


async def test_engagement_counters(async_client, admin_headers, article_payload):
    created = await _create(async_client, admin_headers, article_payload())
    article_id = created["id"]

    response = await async_client.post(f"/articles/{article_id}/view")
    assert response.json()["views"] == 1

    await async_client.post(f"/articles/{article_id}/like")
    response = await async_client.post(f"/articles/{article_id}/like")
    assert response.json()["likes"] == 2

    await async_client.post(f"/articles/{article_id}/unlike")
    await async_client.post(f"/articles/{article_id}/unlike")
    response = await async_client.post(f"/articles/{article_id}/unlike")
    assert response.json()["likes"] == 0


async def test_unknown_article_is_404(async_client):
    response = await async_client.post(
        "/articles/00000000-0000-0000-0000-000000000000/like"
    )
    assert response.status_code == 404


async def test_delete_article(async_client, admin_headers, article_payload):
    created = await _create(async_client, admin_headers, article_payload())

    response = await async_client.delete(f"/articles/{created['id']}", headers=admin_headers)
    assert response.status_code == 200

    response = await async_client.get(f"/articles/{created['id']}")
    assert response.status_code == 404


async def test_zero_read_time_is_estimated(async_client, admin_headers, article_payload):
    data = await _create(async_client, admin_headers, article_payload(read_time_minutes=0))
    assert data["read_time_minutes"] == 2
