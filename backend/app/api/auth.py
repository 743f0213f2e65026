"""Admin authentication API endpoints."""

import logging
import time
from collections import defaultdict

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core import get_db, settings
from app.core.logging import request_context
from app.core.request_utils import TOKEN_COOKIE_NAME, extract_token, get_client_ip
from app.models.admin_user import AdminUser
from app.schemas.auth import (
    AdminCreateRequest,
    AdminCreateResponse,
    AdminResponse,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
)
from app.schemas.common import MessageResponse
from app.services.auth import AuthError, AuthService, InvalidCredentialsError

logger = logging.getLogger(__name__)

ACCESS_DENIED = "Access denied"

# Rate limiting for failed login attempts, per client IP
_login_attempts: dict[str, list[float]] = defaultdict(list)


def _check_login_rate_limit(client_ip: str) -> None:
    """Check if a client IP has exceeded the login attempt rate limit."""
    now = time.monotonic()
    attempts = _login_attempts[client_ip]
    _login_attempts[client_ip] = [t for t in attempts if now - t < settings.login_window_seconds]
    if len(_login_attempts[client_ip]) >= settings.login_max_attempts:
        logger.warning("Login rate limit exceeded for %s", client_ip)
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many login attempts. Please try again later.",
        )


def _record_login_attempt(client_ip: str) -> None:
    """Record a failed login attempt for rate limiting."""
    _login_attempts[client_ip].append(time.monotonic())


def reset_login_attempts() -> None:
    _login_attempts.clear()


router = APIRouter(prefix="/admin", tags=["admin"])


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """Dependency to get auth service."""
    return AuthService(db)


async def get_current_admin(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> AdminUser:
    """Dependency resolving the session token to the current admin.

    Every failure is reported to the client as the same 401; the specific
    reason is only logged.
    """
    token = extract_token(request)
    try:
        admin = await auth_service.verify(token)
    except AuthError as e:
        logger.info(
            f"Rejected request to {request.url.path}: {type(e).__name__}: {e}",
            extra=request_context(request),
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ACCESS_DENIED,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    request.state.token = token
    return admin


@router.post(
    "/create",
    response_model=AdminCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_admin(
    data: AdminCreateRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AdminCreateResponse:
    """Create an admin account.

    Returns 409 Conflict if the username or email is taken.
    """
    admin = await auth_service.create_admin(
        username=data.username,
        email=data.email,
        password=data.password,
    )
    return AdminCreateResponse(
        message="Administrator account created successfully",
        admin=AdminResponse.model_validate(admin),
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    request: Request,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Authenticate by username or email and start a session.

    The token is returned in the body and set as the ``token`` cookie.
    Rate limited per client IP.
    """
    client_ip = get_client_ip(request) or "unknown"
    _check_login_rate_limit(client_ip)

    if data.email:
        identifier, by = data.email, "email"
    else:
        identifier, by = data.username or "", "username"

    try:
        admin, token = await auth_service.login(identifier, data.password, by=by)
    except InvalidCredentialsError as e:
        _record_login_attempt(client_ip)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        ) from e

    response.set_cookie(
        key=TOKEN_COOKIE_NAME,
        value=token,
        max_age=settings.jwt_expire_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return LoginResponse(
        token=token,
        expires_in=settings.jwt_expire_seconds,
        admin=AdminResponse.model_validate(admin),
    )


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    current_admin: AdminUser = Depends(get_current_admin),
) -> ProfileResponse:
    """Get the current admin's account."""
    return ProfileResponse(admin=AdminResponse.model_validate(current_admin))


@router.api_route("/logout", methods=["GET", "POST"], response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    current_admin: AdminUser = Depends(get_current_admin),
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """End the session.

    The token is blacklisted so it cannot be reused for the rest of its
    lifetime, and the cookie is cleared.
    """
    await auth_service.logout(request.state.token)
    response.delete_cookie(
        key=TOKEN_COOKIE_NAME,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    logger.info(
        f"Admin logged out: {current_admin.username}",
        extra=request_context(request, admin_id=str(current_admin.id)),
    )
    return MessageResponse(message="Logged out successfully")
