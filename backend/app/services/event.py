"""Event service - event listings and their banners.

Writes that touch a banner commit here rather than in ``get_db``: a
replaced banner is only removed once the new row state is durable, and a
freshly saved banner is removed again if the write does not commit.
"""

import builtins
import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.event import Event
from app.schemas.event import EventCreate, EventUpdate
from app.services.uploads import StoredFile, delete_upload, discard_upload

logger = logging.getLogger(__name__)


def _banner_fields(banner: StoredFile) -> dict:
    return {
        "banner_filename": banner.filename,
        "banner_path": banner.path,
        "banner_mime": banner.mime,
        "banner_size": banner.size,
    }


class EventService:
    """Service for managing events."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: EventCreate, banner: StoredFile | None = None) -> Event:
        fields = data.model_dump()
        if banner is not None:
            fields.update(_banner_fields(banner))
        event = Event(**fields)
        self.db.add(event)
        try:
            await self.db.commit()
        except BaseException:
            await self.db.rollback()
            await discard_upload(banner)
            raise
        await self.db.refresh(event)
        logger.info(f"Created event {event.id} ({event.kind})")
        return event

    async def get(self, event_id: UUID) -> Event:
        event = await self.db.get(Event, event_id)
        if event is None:
            raise NotFoundError("Event not found in records")
        return event

    async def list(self) -> builtins.list[Event]:
        result = await self.db.execute(
            select(Event).order_by(Event.order.desc(), Event.created_at.desc(), Event.id.desc())
        )
        return list(result.scalars().all())

    async def recent(self, kind: str, limit: int = 4) -> builtins.list[Event]:
        """Published, active events of one kind.

        Upcoming events come soonest first, past events latest first.
        """
        order = Event.date.asc() if kind == "upcoming" else Event.date.desc()
        result = await self.db.execute(
            select(Event)
            .where(Event.kind == kind, Event.published.is_(True), Event.is_active.is_(True))
            .order_by(order, Event.id.asc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def update(
        self,
        event_id: UUID,
        data: EventUpdate,
        banner: StoredFile | None = None,
    ) -> Event:
        """Update an event. A new banner replaces and removes the old one."""
        try:
            event = await self.get(event_id)
            old_banner = event.banner_path

            fields = {
                k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None
            }
            if banner is not None:
                fields.update(_banner_fields(banner))
            for field, value in fields.items():
                setattr(event, field, value)
            await self.db.commit()
        except BaseException:
            await self.db.rollback()
            await discard_upload(banner)
            raise
        await self.db.refresh(event)

        if banner is not None and old_banner and old_banner != banner.path:
            await delete_upload(old_banner)
        return event

    async def delete(self, event_id: UUID) -> None:
        event = await self.get(event_id)
        banner_path = event.banner_path
        await self.db.delete(event)
        await self.db.commit()
        await delete_upload(banner_path)
