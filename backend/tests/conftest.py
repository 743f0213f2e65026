"""Pytest configuration and fixtures for backend tests.

Database Handling:
- Every test gets a fresh in-memory SQLite database (aiosqlite) with all
  tables created from the ORM metadata.
- The app under test reads it from ``app.state.database`` exactly like the
  lifespan-managed instance in production, so each request gets its own
  session and commit/rollback behave as they do in production.
"""

import os
import tempfile
from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

# Set test environment variables before importing app modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret-" + "0" * 40
os.environ["CLIENT_ORIGIN"] = "http://localhost:5173"
os.environ["UPLOAD_ROOT"] = tempfile.mkdtemp(prefix="cms-uploads-")
os.environ["LOG_LEVEL"] = "WARNING"

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Test admin credentials
TEST_ADMIN_USERNAME = "testadmin"
TEST_ADMIN_EMAIL = "testadmin@example.com"
TEST_ADMIN_PASSWORD = "testpassword123"


# --- Login Throttle Reset Fixture ---


@pytest.fixture(autouse=True)
def reset_login_throttle():
    """Clear failed-login bookkeeping so attempts never leak between tests."""
    from app.api.auth import reset_login_attempts

    reset_login_attempts()
    yield
    reset_login_attempts()


# --- Database Fixtures ---


@pytest_asyncio.fixture(scope="function")
async def database():
    """Connected in-memory database with all tables created."""
    from app.core import Database

    db = Database(TEST_DATABASE_URL)
    await db.connect()
    await db.create_all()
    yield db
    await db.disconnect()


@pytest_asyncio.fixture(scope="function")
async def db_session(database) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for service-level tests."""
    async with database.session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def async_client(database) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client bound to the test database."""
    from app.main import app

    app.state.database = database

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# --- Admin Fixtures ---


@pytest_asyncio.fixture
async def admin_user(database) -> Any:
    """Create a committed admin account."""
    from app.services.auth import AuthService

    async with database.session() as session:
        admin = await AuthService(session).create_admin(
            TEST_ADMIN_USERNAME, TEST_ADMIN_EMAIL, TEST_ADMIN_PASSWORD
        )
        await session.commit()
    return admin


@pytest.fixture
def admin_token(admin_user) -> str:
    """A valid session token for the test admin."""
    from app.services.auth import create_token

    return create_token(admin_user.id, admin_user.username)


@pytest.fixture
def admin_headers(admin_token) -> dict[str, str]:
    """Authorization headers for protected endpoints."""
    return {"Authorization": f"Bearer {admin_token}"}


# --- Payload Factories ---


ARTICLE_CONTENT = " ".join(["word"] * 450)


@pytest.fixture
def article_payload():
    """Factory for valid article create bodies."""

    def _make(**overrides) -> dict[str, Any]:
        payload = {
            "title": "Scaling AI in the Enterprise",
            "summary": "How large organisations move from pilots to production AI.",
            "content": ARTICLE_CONTENT,
            "category": "Business Strategy",
            "tags": ["ai", "strategy"],
            "author_name": "Jane Doe",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def registration_payload():
    """Factory for valid event registration bodies."""

    def _make(**overrides) -> dict[str, Any]:
        payload = {
            "event_title": "AI Summit - 2025",
            "full_name": "Ada Lovelace",
            "email": "ada@example.com",
            "phone": "+44 20 7946 0958",
            "company": "Analytical Engines",
            "location": "London",
            "consent": True,
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def contact_payload():
    """Factory for valid contact form bodies."""

    def _make(**overrides) -> dict[str, Any]:
        payload = {
            "name": "Grace Hopper",
            "email": "grace@example.com",
            "phone": "5551234567",
            "company_name": "Navy Labs",
            "country": "USA",
            "job_title": "Rear Admiral",
            "message": "We would like to discuss a compiler project.",
        }
        payload.update(overrides)
        return payload

    return _make
