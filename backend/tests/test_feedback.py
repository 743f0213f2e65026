"""Tests for client feedback endpoints."""

import pytest

pytestmark = pytest.mark.asyncio


def _payload(**overrides):
    payload = {
        "name": "Katherine Johnson",
        "company_name": "NASA",
        "job_title": "Mathematician",
        "rating": 5,
        "comment": "The team delivered exactly what we needed.",
    }
    payload.update(overrides)
    return payload


async def test_create_feedback_starts_unapproved(async_client):
    response = await async_client.post("/feedback/create", json=_payload())
    assert response.status_code == 201
    data = response.json()
    assert data["is_approved"] is False
    assert data["submitted_at"]


@pytest.mark.parametrize("rating", [-1, 6])
async def test_rating_out_of_range(async_client, rating):
    response = await async_client.post("/feedback/create", json=_payload(rating=rating))
    assert response.status_code == 422


async def test_approval_controls_public_list(async_client, admin_headers):
    created = (await async_client.post("/feedback/create", json=_payload())).json()

    approved = await async_client.get("/feedback/approved")
    assert approved.json()["total"] == 0

    response = await async_client.patch(
        f"/feedback/{created['id']}/approve", headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["is_approved"] is True

    approved = await async_client.get("/feedback/approved")
    assert [f["id"] for f in approved.json()["items"]] == [created["id"]]

    response = await async_client.patch(
        f"/feedback/{created['id']}/approve",
        json={"is_approved": False},
        headers=admin_headers,
    )
    assert response.json()["is_approved"] is False


async def test_approve_requires_admin(async_client):
    created = (await async_client.post("/feedback/create", json=_payload())).json()
    response = await async_client.patch(f"/feedback/{created['id']}/approve")
    assert response.status_code == 401


async def test_find_by_name_and_company(async_client):
    await async_client.post("/feedback/create", json=_payload())
    await async_client.post(
        "/feedback/create", json=_payload(name="Dorothy Vaughan", company_name="Langley")
    )

    by_name = await async_client.get("/feedback/name/katherine")
    assert [f["name"] for f in by_name.json()["items"]] == ["Katherine Johnson"]

    by_company = await async_client.get("/feedback/company/lang")
    assert [f["name"] for f in by_company.json()["items"]] == ["Dorothy Vaughan"]

    everything = await async_client.get("/feedback")
    assert everything.json()["total"] == 2

    recent = await async_client.get("/feedback/recent", params={"limit": 1})
    assert recent.json()["total"] == 1


async def test_update_and_delete(async_client, admin_headers):
    created = (await async_client.post("/feedback/create", json=_payload())).json()

    response = await async_client.put(
        f"/feedback/{created['id']}", json={"rating": 3}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["rating"] == 3
    assert response.json()["name"] == "Katherine Johnson"

    response = await async_client.delete(f"/feedback/{created['id']}", headers=admin_headers)
    assert response.status_code == 200

    response = await async_client.get(f"/feedback/{created['id']}")
    assert response.status_code == 404
