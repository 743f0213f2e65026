"""Request helpers shared by the login throttle and registration metadata."""

import ipaddress
import logging

from fastapi import Request

logger = logging.getLogger(__name__)

TOKEN_COOKIE_NAME = "token"


def _is_valid_ip(ip_str: str) -> bool:
    try:
        ipaddress.ip_address(ip_str)
        return True
    except ValueError:
        return False


def get_client_ip(request: Request) -> str | None:
    """Get the client IP address from a request.

    X-Real-IP is only honoured when the direct peer is a local reverse
    proxy; X-Forwarded-For is never trusted since clients can set it.
    """
    if request.client and request.client.host in ("127.0.0.1", "::1", "localhost"):
        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            ip = real_ip.strip()
            if _is_valid_ip(ip):
                return ip
            logger.warning(f"Invalid X-Real-IP: {real_ip}")

    if request.client:
        return request.client.host

    return None


def get_user_agent(request: Request) -> str | None:
    user_agent = request.headers.get("User-Agent")
    return user_agent[:512] if user_agent else None


def extract_token(request: Request) -> str | None:
    """Extract the session token from the cookie or the Authorization header.

    The cookie wins when both are present.
    """
    token = request.cookies.get(TOKEN_COOKIE_NAME)
    if token:
        return token

    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[7:].strip() or None
    return None
