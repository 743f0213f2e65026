"""Tests for admin account and session endpoints."""

import pytest

from tests.conftest import TEST_ADMIN_EMAIL, TEST_ADMIN_PASSWORD, TEST_ADMIN_USERNAME

pytestmark = pytest.mark.asyncio


async def test_create_admin(async_client):
    response = await async_client.post(
        "/admin/create",
        json={"username": "admin1", "email": "A@X.com", "password": "secret1"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["admin"]["username"] == "admin1"
    assert data["admin"]["email"] == "a@x.com"
    assert "password" not in data["admin"]
    assert "password_hash" not in data["admin"]


async def test_create_admin_duplicate_conflicts(async_client, admin_user):
    response = await async_client.post(
        "/admin/create",
        json={"username": TEST_ADMIN_USERNAME, "email": "other@x.com", "password": "secret1"},
    )
    assert response.status_code == 409


@pytest.mark.parametrize(
    "body",
    [
        {"username": "ab", "email": "a@x.com", "password": "secret1"},
        {"username": "admin1", "email": "not-an-email", "password": "secret1"},
        {"username": "admin1", "email": "a@x.com", "password": "short"},
    ],
)
async def test_create_admin_validation(async_client, body):
    response = await async_client.post("/admin/create", json=body)
    assert response.status_code == 422


async def test_login_by_username_sets_cookie(async_client, admin_user):
    response = await async_client.post(
        "/admin/login",
        json={"username": TEST_ADMIN_USERNAME, "password": TEST_ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["token_type"] == "bearer"
    assert data["admin"]["username"] == TEST_ADMIN_USERNAME

    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith("token=")
    assert "HttpOnly" in set_cookie
    assert "samesite=lax" in set_cookie.lower()


async def test_login_by_email(async_client, admin_user):
    response = await async_client.post(
        "/admin/login",
        json={"email": TEST_ADMIN_EMAIL.upper(), "password": TEST_ADMIN_PASSWORD},
    )
    assert response.status_code == 200


async def test_login_requires_identifier(async_client):
    response = await async_client.post("/admin/login", json={"password": "secret1"})
    assert response.status_code == 422


async def test_login_wrong_password_and_unknown_user_same_response(async_client, admin_user):
    wrong = await async_client.post(
        "/admin/login",
        json={"username": TEST_ADMIN_USERNAME, "password": "wrong-password"},
    )
    unknown = await async_client.post(
        "/admin/login",
        json={"username": "nobody", "password": TEST_ADMIN_PASSWORD},
    )
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"detail": "Invalid credentials"}


async def test_login_throttled_after_repeated_failures(async_client, admin_user):
    for _ in range(5):
        response = await async_client.post(
            "/admin/login",
            json={"username": TEST_ADMIN_USERNAME, "password": "wrong-password"},
        )
        assert response.status_code == 401

    response = await async_client.post(
        "/admin/login",
        json={"username": TEST_ADMIN_USERNAME, "password": TEST_ADMIN_PASSWORD},
    )
    assert response.status_code == 429


async def test_profile_with_bearer_token(async_client, admin_headers):
    response = await async_client.get("/admin/profile", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["admin"]["username"] == TEST_ADMIN_USERNAME


async def test_profile_with_cookie_from_login(async_client, admin_user):
    login = await async_client.post(
        "/admin/login",
        json={"username": TEST_ADMIN_USERNAME, "password": TEST_ADMIN_PASSWORD},
    )
    assert login.status_code == 200

    # The client keeps the session cookie
    response = await async_client.get("/admin/profile")
    assert response.status_code == 200


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Bearer not-a-token"},
        {"Authorization": "Basic dXNlcjpwYXNz"},
    ],
)
async def test_profile_rejected_uniformly(async_client, headers):
    response = await async_client.get("/admin/profile", headers=headers)
    assert response.status_code == 401
    assert response.json() == {"detail": "Access denied"}


async def test_logout_revokes_token(async_client, admin_headers):
    response = await async_client.post("/admin/logout", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Logged out successfully"

    response = await async_client.get("/admin/profile", headers=admin_headers)
    assert response.status_code == 401

    # A revoked token cannot log out again
    response = await async_client.get("/admin/logout", headers=admin_headers)
    assert response.status_code == 401
