"""Tests for the authentication service (accounts, tokens, sessions)."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from app.core import settings
from app.core.exceptions import ConflictError
from app.services.auth import (
    AuthService,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    TokenExpiredError,
    TokenRevokedError,
    UnknownAccountError,
    create_token,
    decode_token,
    hash_password,
    verify_password,
)

pytestmark = pytest.mark.asyncio


class TestPasswordHashing:
    async def test_hash_and_verify(self):
        hashed = hash_password("secret1")
        assert hashed != "secret1"
        assert hashed.startswith("$argon2id$")
        assert verify_password("secret1", hashed) is True
        assert verify_password("wrong", hashed) is False

    async def test_garbage_hash_does_not_raise(self):
        assert verify_password("secret1", "not-a-hash") is False


class TestTokens:
    async def test_roundtrip_claims(self):
        admin_id = uuid4()
        payload = decode_token(create_token(admin_id, "admin1"))
        assert payload["sub"] == str(admin_id)
        assert payload["username"] == "admin1"
        assert payload["exp"] > payload["iat"]

    async def test_two_tokens_differ(self):
        admin_id = uuid4()
        assert create_token(admin_id, "admin1") != create_token(admin_id, "admin1")

    async def test_expired_token(self):
        past = datetime.now(UTC) - timedelta(hours=2)
        token = jwt.encode(
            {"sub": str(uuid4()), "iat": past, "exp": past + timedelta(minutes=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        with pytest.raises(TokenExpiredError):
            decode_token(token)

    async def test_wrong_signature(self):
        token = jwt.encode(
            {"sub": str(uuid4()), "iat": datetime.now(UTC), "exp": datetime.now(UTC)},
            "another-secret-that-is-long-enough-000000",
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            decode_token(token)


class TestAuthService:
    async def test_scenario_create_login_verify_logout(self, db_session):
        service = AuthService(db_session)
        admin = await service.create_admin("admin1", "a@x.com", "secret1")

        logged_in, token = await service.login("admin1", "secret1")
        assert logged_in.id == admin.id
        assert logged_in.last_login_at is not None

        verified = await service.verify(token)
        assert verified.id == admin.id

        await service.logout(token)
        with pytest.raises(TokenRevokedError):
            await service.verify(token)

    async def test_login_by_email_is_case_insensitive(self, db_session):
        service = AuthService(db_session)
        admin = await service.create_admin("admin1", "A@X.com", "secret1")
        assert admin.email == "a@x.com"

        logged_in, _ = await service.login("A@x.COM", "secret1", by="email")
        assert logged_in.id == admin.id

    async def test_wrong_password_and_unknown_user_look_the_same(self, db_session):
        service = AuthService(db_session)
        await service.create_admin("admin1", "a@x.com", "secret1")

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await service.login("admin1", "nope-nope")
        with pytest.raises(InvalidCredentialsError) as unknown_user:
            await service.login("ghost", "secret1")
        assert str(wrong_password.value) == str(unknown_user.value)

    async def test_duplicate_username_or_email_conflicts(self, db_session):
        service = AuthService(db_session)
        await service.create_admin("admin1", "a@x.com", "secret1")

        with pytest.raises(ConflictError):
            await service.create_admin("admin1", "b@x.com", "secret1")
        with pytest.raises(ConflictError):
            await service.create_admin("admin2", "A@X.COM", "secret1")

    async def test_verify_missing_token(self, db_session):
        with pytest.raises(MissingTokenError):
            await AuthService(db_session).verify(None)
        with pytest.raises(MissingTokenError):
            await AuthService(db_session).verify("")

    async def test_verify_garbage_token(self, db_session):
        with pytest.raises(InvalidTokenError):
            await AuthService(db_session).verify("not.a.jwt")

    async def test_verify_unknown_account(self, db_session):
        token = create_token(uuid4(), "ghost")
        with pytest.raises(UnknownAccountError):
            await AuthService(db_session).verify(token)

    async def test_verify_non_uuid_subject(self, db_session):
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "not-a-uuid", "iat": now, "exp": now + timedelta(hours=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        with pytest.raises(InvalidTokenError):
            await AuthService(db_session).verify(token)

    async def test_logout_twice_is_harmless(self, db_session):
        service = AuthService(db_session)
        admin = await service.create_admin("admin1", "a@x.com", "secret1")
        token = create_token(admin.id, admin.username)

        await service.logout(token)
        await service.logout(token)

        with pytest.raises(TokenRevokedError):
            await service.verify(token)
