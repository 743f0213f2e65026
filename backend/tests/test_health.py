"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient

from app.core import Database

pytestmark = pytest.mark.asyncio


class TestHealthEndpoints:
    """Test suite for health check functionality."""

    @pytest.mark.parametrize("path", ["/health", "/api/health"])
    async def test_healthy(self, async_client: AsyncClient, path):
        response = await async_client.get(path)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "connected"
        assert data["version"]

    async def test_unreachable_database_returns_503(self, async_client: AsyncClient, database):
        from app.main import app

        # Never connected, so ping fails
        app.state.database = Database("sqlite+aiosqlite:///:memory:")
        try:
            response = await async_client.get("/health")
        finally:
            app.state.database = database

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"

    async def test_health_needs_no_auth(self, async_client: AsyncClient):
        response = await async_client.get("/api/health", headers={"Authorization": "Bearer junk"})
        assert response.status_code == 200
