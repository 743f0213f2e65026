"""Event model - upcoming and past events shown on the site."""

from typing import Any

from sqlalchemy import JSON, Boolean, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel

EVENT_KINDS = ("upcoming", "past")
EVENT_STATUSES = ("confirmed", "hosting", "tentative")

EventKind = Enum(*EVENT_KINDS, name="event_kind", create_constraint=True)
EventStatus = Enum(*EVENT_STATUSES, name="event_status", create_constraint=True)


class Event(BaseModel):
    """Event listing.

    ``date`` and ``time`` are free-form display strings. The optional
    banner fields come from the upload handler.
    """

    __tablename__ = "events"

    kind: Mapped[str] = mapped_column(EventKind, nullable=False, default="upcoming", index=True)
    title: Mapped[str] = mapped_column(String(150), nullable=False)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    date: Mapped[str] = mapped_column(String(100), nullable=False)
    time: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    location: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    audience: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    status: Mapped[str] = mapped_column(EventStatus, nullable=False, default="confirmed")
    topics: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    outcome: Mapped[str] = mapped_column(Text, nullable=False, default="")

    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    banner_filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
    banner_path: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    banner_mime: Mapped[str | None] = mapped_column(String(100), nullable=True)
    banner_size: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Event {self.title!r} ({self.kind})>"
