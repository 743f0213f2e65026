"""Authentication service for JWT-based admin sessions."""

import logging
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any, Literal
from uuid import UUID

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from fastapi.concurrency import run_in_threadpool
from jwt.exceptions import PyJWTError
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core import settings
from app.core.exceptions import ConflictError
from app.models.admin_user import AdminUser
from app.services.token_blacklist import TokenBlacklistService

logger = logging.getLogger(__name__)

# Argon2 password hasher with recommended parameters
# Memory: 64 MiB, Time: 3 iterations, Parallelism: 4
ph = PasswordHasher(
    time_cost=3,
    memory_cost=65536,
    parallelism=4,
    hash_len=32,
    salt_len=16,
)

_dummy_hash: str | None = None


class AuthError(Exception):
    """Base authentication error."""

    pass


class InvalidCredentialsError(AuthError):
    """Unknown account or wrong password."""

    pass


class MissingTokenError(AuthError):
    """No token supplied with the request."""

    pass


class TokenRevokedError(AuthError):
    """Token was logged out."""

    pass


class InvalidTokenError(AuthError):
    """Token signature or claims are invalid."""

    pass


class TokenExpiredError(InvalidTokenError):
    """Token is past its expiry time."""

    pass


class UnknownAccountError(AuthError):
    """Token is valid but its account no longer exists."""

    pass


def hash_password(password: str) -> str:
    """Hash a password using Argon2id."""
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash using constant-time comparison."""
    try:
        ph.verify(password_hash, password)
        return True
    except VerifyMismatchError:
        return False
    except (VerificationError, InvalidHashError):
        logger.warning("Stored password hash could not be verified")
        return False


def _get_dummy_hash() -> str:
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password(secrets.token_hex(16))
    return _dummy_hash


def create_token(admin_id: UUID, username: str) -> str:
    """Create a signed session token for an admin account."""
    now = datetime.now(UTC)
    payload = {
        "sub": str(admin_id),
        "username": username,
        "iat": now,
        "exp": now + timedelta(hours=settings.jwt_expire_hours),
        # Distinct tokens even for two logins within the same second
        "jti": secrets.token_hex(16),
    }
    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return str(token)


def decode_token(token: str) -> dict[str, Any]:
    """Decode and validate a session token."""
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token has expired") from e
    except PyJWTError as e:
        raise InvalidTokenError(f"Invalid token: {e}") from e


class AuthService:
    """Service for admin account and session operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.blacklist = TokenBlacklistService(session)

    async def get_by_username(self, username: str) -> AdminUser | None:
        result = await self.session.execute(select(AdminUser).where(AdminUser.username == username))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> AdminUser | None:
        result = await self.session.execute(
            select(AdminUser).where(AdminUser.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, admin_id: UUID) -> AdminUser | None:
        return await self.session.get(AdminUser, admin_id)

    async def create_admin(self, username: str, email: str, password: str) -> AdminUser:
        """Create an admin account.

        Raises ConflictError if the username or email is already taken.
        """
        email = email.strip().lower()
        result = await self.session.execute(
            select(AdminUser.id).where(
                or_(AdminUser.username == username, AdminUser.email == email)
            )
        )
        if result.first() is not None:
            raise ConflictError("An admin with this username or email already exists")

        admin = AdminUser(
            username=username,
            email=email,
            password_hash=await run_in_threadpool(hash_password, password),
        )
        self.session.add(admin)
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError("An admin with this username or email already exists") from e
        await self.session.refresh(admin)

        logger.info(f"Created admin user: {username}")
        return admin

    async def authenticate(
        self,
        identifier: str,
        password: str,
        by: Literal["username", "email"] = "username",
    ) -> AdminUser:
        """Check credentials and return the account.

        Raises InvalidCredentialsError for both "account not found" and
        "wrong password" to prevent account enumeration.
        """
        if by == "email":
            admin = await self.get_by_email(identifier)
        else:
            admin = await self.get_by_username(identifier)

        if admin is None:
            # Perform a dummy verification to prevent timing attacks
            await run_in_threadpool(verify_password, password, _get_dummy_hash())
            logger.info(f"Login failed: no admin with {by} {identifier!r}")
            raise InvalidCredentialsError("Invalid credentials")

        if not await run_in_threadpool(verify_password, password, admin.password_hash):
            logger.info(f"Login failed: wrong password for {admin.username}")
            raise InvalidCredentialsError("Invalid credentials")

        admin.last_login_at = datetime.now(UTC)
        await self.session.flush()
        return admin

    async def login(
        self,
        identifier: str,
        password: str,
        by: Literal["username", "email"] = "username",
    ) -> tuple[AdminUser, str]:
        """Authenticate and issue a session token."""
        admin = await self.authenticate(identifier, password, by)
        token = create_token(admin.id, admin.username)
        logger.info(f"Admin logged in: {admin.username}")
        return admin, token

    async def verify(self, token: str | None) -> AdminUser:
        """Resolve a session token to its admin account.

        Checks run in order: presence, revocation, signature and expiry,
        then account lookup. Each failure raises its own AuthError subclass.
        """
        if not token:
            raise MissingTokenError("No token supplied")

        if await self.blacklist.contains(token):
            raise TokenRevokedError("Token has been revoked")

        payload = decode_token(token)

        try:
            admin_id = UUID(str(payload["sub"]))
        except ValueError as e:
            raise InvalidTokenError("Token subject is not an account id") from e

        admin = await self.get_by_id(admin_id)
        if admin is None:
            raise UnknownAccountError("Account no longer exists")
        return admin

    async def logout(self, token: str) -> None:
        """Revoke a token. Logging out twice is harmless."""
        await self.blacklist.add(token)
