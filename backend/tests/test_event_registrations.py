"""Tests for event registration endpoints and the dedup key."""

import pytest

from app.core.exceptions import ConflictError
from app.models.event_registration import EventRegistration
from app.schemas.event_registration import RegistrationCreate
from app.services.event_registration import EventRegistrationService

pytestmark = pytest.mark.asyncio


async def _register(client, payload, **kwargs):
    response = await client.post("/event-registrations/create", json=payload, **kwargs)
    assert response.status_code == 201, response.text
    return response.json()


async def test_register_records_key_and_metadata(async_client, registration_payload):
    data = await _register(
        async_client,
        registration_payload(email="Ada@Example.com"),
        headers={"User-Agent": "pytest-agent"},
    )

    assert data["event_key"] == "ai summit - 2025"
    assert data["email"] == "ada@example.com"
    assert data["email_sent"] is False
    assert data["user_agent"] == "pytest-agent"
    assert data["ip"] == "127.0.0.1"


async def test_camel_case_body_is_accepted(async_client):
    data = await _register(
        async_client,
        {
            "eventTitle": "Data Day",
            "fullName": "Ada Lovelace",
            "email": "ada@example.com",
            "consent": True,
        },
    )
    assert data["event_title"] == "Data Day"
    assert data["full_name"] == "Ada Lovelace"


async def test_consent_is_required(async_client, registration_payload):
    response = await async_client.post(
        "/event-registrations/create", json=registration_payload(consent=False)
    )
    assert response.status_code == 422


@pytest.mark.parametrize(
    "title",
    ["AI Summit - 2025", "  ai summit — 2025 ", "AI   SUMMIT – 2025"],
)
async def test_duplicate_for_equivalent_title_conflicts(async_client, registration_payload, title):
    await _register(async_client, registration_payload())

    response = await async_client.post(
        "/event-registrations/create",
        json=registration_payload(event_title=title, email="ADA@example.com"),
    )
    assert response.status_code == 409


async def test_same_email_other_event_is_allowed(async_client, registration_payload):
    await _register(async_client, registration_payload())
    await _register(async_client, registration_payload(event_title="Data Day"))

    response = await async_client.get("/event-registrations/count")
    assert response.json() == {"count": 2}


async def test_service_duplicate_raises_conflict(db_session):
    service = EventRegistrationService(db_session)
    data = RegistrationCreate(
        event_title="AI Summit - 2025",
        full_name="Ada Lovelace",
        email="ada@example.com",
        consent=True,
    )
    await service.create(data)

    with pytest.raises(ConflictError):
        await service.create(data.model_copy(update={"event_title": "ai summit — 2025"}))


async def test_lookups_by_event_key_and_email(async_client, registration_payload):
    created = await _register(async_client, registration_payload())
    await _register(
        async_client,
        registration_payload(event_title="Data Day", email="grace@example.com"),
    )

    by_event = await async_client.get("/event-registrations/by-event/ai summit — 2025")
    assert [r["id"] for r in by_event.json()["items"]] == [created["id"]]

    by_key = await async_client.get("/event-registrations/by-key/AI SUMMIT - 2025")
    assert [r["id"] for r in by_key.json()["items"]] == [created["id"]]

    by_email = await async_client.get(
        "/event-registrations/by-email/AI Summit - 2025/ADA@example.com"
    )
    assert by_email.status_code == 200
    assert by_email.json()["id"] == created["id"]

    missing = await async_client.get(
        "/event-registrations/by-email/Data Day/ada@example.com"
    )
    assert missing.status_code == 404


async def test_reports_filtered_by_event(async_client, registration_payload):
    await _register(async_client, registration_payload())
    await _register(
        async_client,
        registration_payload(email="grace@example.com", company="Navy Labs", location="Arlington"),
    )
    await _register(
        async_client,
        registration_payload(event_title="Data Day", email="alan@example.com"),
    )

    count = await async_client.get("/event-registrations/count", params={"event": "AI Summit - 2025"})
    assert count.json() == {"count": 2}

    search = await async_client.get(
        "/event-registrations/search", params={"q": "navy", "event": "ai summit - 2025"}
    )
    assert [r["email"] for r in search.json()["items"]] == ["grace@example.com"]

    recent = await async_client.get("/event-registrations/recent", params={"limit": 2})
    assert recent.json()["total"] == 2

    locations = await async_client.get(
        "/event-registrations/stats/location", params={"event": "AI Summit - 2025"}
    )
    assert sorted((s["key"], s["count"]) for s in locations.json()) == [
        ("Arlington", 1),
        ("London", 1),
    ]

    companies = await async_client.get("/event-registrations/stats/company")
    assert {s["key"]: s["count"] for s in companies.json()} == {
        "Analytical Engines": 2,
        "Navy Labs": 1,
    }

    trend = await async_client.get("/event-registrations/trend/daily")
    days = trend.json()
    assert len(days) == 1
    assert days[0]["count"] == 3
    assert len(days[0]["key"]) == 10


async def test_paginated(async_client, registration_payload):
    for i in range(5):
        await _register(async_client, registration_payload(email=f"user{i}@example.com"))

    page = await async_client.get(
        "/event-registrations/paginated", params={"page": 2, "page_size": 2}
    )
    data = page.json()
    assert data["total"] == 5
    assert data["pages"] == 3
    assert data["page"] == 2
    assert len(data["items"]) == 2

    filtered = await async_client.get(
        "/event-registrations/paginated", params={"q": "user3"}
    )
    assert filtered.json()["total"] == 1

    empty = await async_client.get(
        "/event-registrations/paginated", params={"event": "No Such Event"}
    )
    assert empty.json()["total"] == 0
    assert empty.json()["pages"] == 0


async def test_admin_update_rederives_key(async_client, admin_headers, registration_payload):
    created = await _register(async_client, registration_payload())

    response = await async_client.patch(
        f"/event-registrations/{created['id']}",
        json={"eventTitle": "Data Day"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["event_key"] == "data day"


async def test_admin_update_conflict(async_client, admin_headers, registration_payload):
    await _register(async_client, registration_payload())
    other = await _register(async_client, registration_payload(email="grace@example.com"))

    response = await async_client.patch(
        f"/event-registrations/{other['id']}",
        json={"email": "ada@example.com"},
        headers=admin_headers,
    )
    assert response.status_code == 409


async def test_mark_email_sent_and_delete(async_client, admin_headers, registration_payload):
    created = await _register(async_client, registration_payload())

    response = await async_client.patch(f"/event-registrations/{created['id']}/email-sent")
    assert response.status_code == 401

    response = await async_client.patch(
        f"/event-registrations/{created['id']}/email-sent", headers=admin_headers
    )
    assert response.json()["email_sent"] is True

    response = await async_client.delete(
        f"/event-registrations/{created['id']}", headers=admin_headers
    )
    assert response.status_code == 200

    response = await async_client.get(f"/event-registrations/{created['id']}")
    assert response.status_code == 404


async def test_long_accented_title_is_stored(async_client, registration_payload):
    # Each "é" decomposes into two code points, so the key outgrows the title
    title = "é" * 200
    data = await _register(async_client, registration_payload(event_title=title))

    assert len(data["event_key"]) == 400
    assert data["event_title"] == title


async def test_event_key_column_is_unbounded():
    assert EventRegistration.__table__.c.event_key.type.length is None
