"""Token blacklist - revoked session tokens with a bounded visibility window.

A revoked token only matters until it would have expired on its own, so
entries older than the TTL are treated as absent on read and deleted by
the periodic sweep started in the application lifespan.
"""

import logging
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncSession

from app.core import settings
from app.models.base import utc_now
from app.models.token_blacklist import TokenBlacklist

logger = logging.getLogger(__name__)


class TokenBlacklistService:
    """Database-backed set of revoked tokens."""

    def __init__(self, db: AsyncSession, ttl: timedelta | None = None):
        self.db = db
        self.ttl = ttl if ttl is not None else timedelta(hours=settings.blacklist_ttl_hours)

    def _cutoff(self, now: datetime | None = None) -> datetime:
        return (now or utc_now()) - self.ttl

    async def add(self, token: str) -> None:
        """Revoke a token. Adding an already revoked token is a no-op."""
        existing = await self.db.get(TokenBlacklist, token)
        if existing is not None:
            return
        self.db.add(TokenBlacklist(token=token, created_at=utc_now()))
        await self.db.flush()

    async def contains(self, token: str) -> bool:
        """True if the token was revoked within the TTL window."""
        result = await self.db.execute(
            select(TokenBlacklist.token).where(
                TokenBlacklist.token == token,
                TokenBlacklist.created_at >= self._cutoff(),
            )
        )
        return result.scalar_one_or_none() is not None

    async def purge_expired(self) -> int:
        """Delete entries older than the TTL. Returns count removed."""
        result: CursorResult[Any] = await self.db.execute(  # type: ignore[assignment]
            delete(TokenBlacklist).where(TokenBlacklist.created_at < self._cutoff())
        )
        removed = result.rowcount or 0
        if removed:
            logger.info(f"Purged {removed} expired blacklist entries")
        return removed
