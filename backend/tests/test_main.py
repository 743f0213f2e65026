"""Tests for application wiring: error mapping, root endpoint, background tasks."""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.exceptions import ConflictError
from app.main import create_app, task_done_callback

pytestmark = pytest.mark.asyncio


@pytest.fixture
def failing_app(database):
    app = create_app()
    app.state.database = database

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("secret internals")

    @app.get("/conflict")
    async def conflict() -> None:
        raise ConflictError("Already exists")

    return app


async def test_unhandled_exception_is_hidden(failing_app):
    transport = ASGITransport(app=failing_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "secret" not in response.text


async def test_service_error_maps_to_status(failing_app):
    transport = ASGITransport(app=failing_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/conflict")

    assert response.status_code == 409
    assert response.json() == {"detail": "Already exists"}


async def test_root_reports_name_and_version(async_client):
    response = await async_client.get("/")
    assert response.status_code == 200
    assert set(response.json()) == {"name", "version"}


async def test_unknown_route_is_404(async_client):
    response = await async_client.get("/nope")
    assert response.status_code == 404


async def test_task_done_callback_logs_failure(caplog):
    async def fail() -> None:
        raise ValueError("sweep failed")

    task = asyncio.create_task(fail(), name="token-blacklist-sweep")
    with pytest.raises(ValueError):
        await task

    task_done_callback(task)
    assert "token-blacklist-sweep failed: sweep failed" in caplog.text
