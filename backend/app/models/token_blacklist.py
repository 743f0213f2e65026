"""Revoked session tokens - survives process restarts."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.base import utc_now


class TokenBlacklist(Base):
    """A revoked session token, stored as the raw signed string.

    Entries are created on logout. Rows older than the blacklist TTL are
    ignored on read and removed by the periodic sweep.
    """

    __tablename__ = "token_blacklist"

    token: Mapped[str] = mapped_column(String(1024), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, index=True
    )
