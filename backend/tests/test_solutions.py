"""Tests for solution endpoints."""

import pytest

pytestmark = pytest.mark.asyncio


def _payload(**overrides):
    payload = {
        "icon": "Shield",
        "title": "AI Governance",
        "description": "Policies, audits and tooling for responsible AI programmes.",
        "features": ["Model inventory", "Risk reviews"],
        "badge": "Enterprise",
        "color": "accent",
    }
    payload.update(overrides)
    return payload


async def test_crud_lifecycle(async_client, admin_headers):
    response = await async_client.post("/solutions/create", json=_payload())
    assert response.status_code == 401

    response = await async_client.post(
        "/solutions/create", json=_payload(), headers=admin_headers
    )
    assert response.status_code == 201
    created = response.json()
    assert created["is_active"] is False
    assert created["features"] == ["Model inventory", "Risk reviews"]

    response = await async_client.get(f"/solutions/{created['id']}")
    assert response.json()["title"] == "AI Governance"

    response = await async_client.put(
        f"/solutions/{created['id']}", json={"badge": ""}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["badge"] == ""

    response = await async_client.delete(f"/solutions/{created['id']}", headers=admin_headers)
    assert response.status_code == 200
    response = await async_client.get(f"/solutions/{created['id']}")
    assert response.status_code == 404


async def test_active_list_only_shows_visible(async_client, admin_headers):
    hidden = (
        await async_client.post("/solutions/create", json=_payload(), headers=admin_headers)
    ).json()
    shown = (
        await async_client.post(
            "/solutions/create",
            json=_payload(title="Chat Assistants", is_active=True),
            headers=admin_headers,
        )
    ).json()

    active = await async_client.get("/solutions/active")
    assert [s["id"] for s in active.json()["items"]] == [shown["id"]]

    response = await async_client.patch(
        f"/solutions/{hidden['id']}/visibility",
        json={"is_active": True},
        headers=admin_headers,
    )
    assert response.json()["is_active"] is True

    active = await async_client.get("/solutions/active")
    assert active.json()["total"] == 2


async def test_invalid_icon(async_client, admin_headers):
    response = await async_client.post(
        "/solutions/create", json=_payload(icon="Rocket"), headers=admin_headers
    )
    assert response.status_code == 422
