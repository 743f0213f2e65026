"""EventRegistration service - sign-ups keyed by normalised event title."""

import builtins
import logging
from typing import Any
from uuid import UUID

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.models.event_registration import EventRegistration
from app.schemas.event_registration import RegistrationCreate, RegistrationUpdate
from app.services.derived_fields import event_key

logger = logging.getLogger(__name__)

_NEWEST_FIRST = (
    EventRegistration.submitted_at.desc(),
    EventRegistration.created_at.desc(),
    EventRegistration.id.desc(),
)

_SEARCH_COLUMNS = (
    EventRegistration.full_name,
    EventRegistration.email,
    EventRegistration.phone,
    EventRegistration.company,
    EventRegistration.location,
    EventRegistration.address,
    EventRegistration.message,
)

DUPLICATE_MESSAGE = "A registration for this event with this email already exists"


def _for_event(stmt: Select, event: str | None) -> Select:
    if event:
        stmt = stmt.where(EventRegistration.event_key == event_key(event))
    return stmt


class EventRegistrationService:
    """Service for managing event registrations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        data: RegistrationCreate,
        ip: str | None = None,
        user_agent: str | None = None,
    ) -> EventRegistration:
        """Register someone for an event.

        Raises ConflictError if the email is already registered for an event
        whose title normalises to the same key.
        """
        key = event_key(data.event_title)
        if await self._exists(key, data.email):
            raise ConflictError(DUPLICATE_MESSAGE)

        registration = EventRegistration(
            **data.model_dump(),
            event_key=key,
            ip=ip,
            user_agent=user_agent,
        )
        self.db.add(registration)
        await self._flush_unique()
        await self.db.refresh(registration)
        logger.info(f"Registration {registration.id} for event {key!r}")
        return registration

    async def get(self, registration_id: UUID) -> EventRegistration:
        registration = await self.db.get(EventRegistration, registration_id)
        if registration is None:
            raise NotFoundError("Registration not found")
        return registration

    async def get_for_event_by_email(self, event: str, email: str) -> EventRegistration:
        result = await self.db.execute(
            select(EventRegistration)
            .where(
                self._event_filter(event),
                EventRegistration.email == email.strip().lower(),
            )
            .order_by(*_NEWEST_FIRST)
            .limit(1)
        )
        registration = result.scalar_one_or_none()
        if registration is None:
            raise NotFoundError("Registration not found")
        return registration

    async def by_event(self, event: str) -> builtins.list[EventRegistration]:
        """Registrations whose key or exact title (any case) matches."""
        result = await self.db.execute(
            select(EventRegistration)
            .where(self._event_filter(event))
            .order_by(*_NEWEST_FIRST)
        )
        return list(result.scalars().all())

    async def by_key(self, key: str) -> builtins.list[EventRegistration]:
        result = await self.db.execute(
            select(EventRegistration)
            .where(EventRegistration.event_key == event_key(key))
            .order_by(*_NEWEST_FIRST)
        )
        return list(result.scalars().all())

    async def list(self) -> builtins.list[EventRegistration]:
        result = await self.db.execute(select(EventRegistration).order_by(*_NEWEST_FIRST))
        return list(result.scalars().all())

    async def search(
        self, query: str, event: str | None = None
    ) -> builtins.list[EventRegistration]:
        q = query.strip()
        stmt = select(EventRegistration).where(
            or_(*(c.icontains(q, autoescape=True) for c in _SEARCH_COLUMNS))
        )
        result = await self.db.execute(_for_event(stmt, event).order_by(*_NEWEST_FIRST))
        return list(result.scalars().all())

    async def count(self, event: str | None = None) -> int:
        stmt = _for_event(select(func.count(EventRegistration.id)), event)
        result = await self.db.execute(stmt)
        return result.scalar() or 0

    async def recent(
        self, limit: int = 5, event: str | None = None
    ) -> builtins.list[EventRegistration]:
        stmt = _for_event(select(EventRegistration), event)
        result = await self.db.execute(stmt.order_by(*_NEWEST_FIRST).limit(limit))
        return list(result.scalars().all())

    async def stats_by_location(self, event: str | None = None) -> builtins.list[dict[str, Any]]:
        return await self._group_count(EventRegistration.location, event)

    async def stats_by_company(self, event: str | None = None) -> builtins.list[dict[str, Any]]:
        return await self._group_count(EventRegistration.company, event)

    async def daily_trend(self, event: str | None = None) -> builtins.list[dict[str, Any]]:
        """Sign-ups per calendar day (UTC), oldest first."""
        day = func.date(EventRegistration.submitted_at).label("day")
        stmt = _for_event(select(day, func.count(EventRegistration.id).label("count")), event)
        result = await self.db.execute(stmt.group_by(day).order_by(day.asc()))
        return [{"key": str(d), "count": count} for d, count in result]

    async def paginated(
        self,
        page: int = 1,
        page_size: int = 20,
        event: str | None = None,
        query: str | None = None,
    ) -> tuple[builtins.list[EventRegistration], int]:
        """Returns a tuple of (registrations, total_count)."""
        conditions = []
        if event:
            conditions.append(EventRegistration.event_key == event_key(event))
        if query:
            q = query.strip()
            conditions.append(
                or_(*(c.icontains(q, autoescape=True) for c in _SEARCH_COLUMNS[:5]))
            )

        count_result = await self.db.execute(
            select(func.count(EventRegistration.id)).where(*conditions)
        )
        total = count_result.scalar() or 0

        offset = (page - 1) * page_size
        result = await self.db.execute(
            select(EventRegistration)
            .where(*conditions)
            .order_by(*_NEWEST_FIRST)
            .offset(offset)
            .limit(page_size)
        )
        return list(result.scalars().all()), total

    async def update(self, registration_id: UUID, data: RegistrationUpdate) -> EventRegistration:
        """Apply a partial update, re-deriving the event key if the title changes."""
        registration = await self.get(registration_id)
        changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}

        if "email" in changes or "event_title" in changes:
            new_email = changes.get("email", registration.email)
            new_key = event_key(changes.get("event_title", registration.event_title))
            if await self._exists(new_key, new_email, exclude_id=registration.id):
                raise ConflictError(
                    "Another registration with this email already exists for this event"
                )
            changes["event_key"] = new_key

        for field, value in changes.items():
            setattr(registration, field, value)
        await self._flush_unique()
        await self.db.refresh(registration)
        return registration

    async def mark_email_sent(self, registration_id: UUID) -> EventRegistration:
        registration = await self.get(registration_id)
        registration.email_sent = True
        await self.db.flush()
        await self.db.refresh(registration)
        return registration

    async def delete(self, registration_id: UUID) -> None:
        registration = await self.get(registration_id)
        await self.db.delete(registration)
        await self.db.flush()

    def _event_filter(self, event: str) -> Any:
        raw = event.strip()
        return or_(
            EventRegistration.event_key == event_key(raw),
            func.lower(EventRegistration.event_title) == raw.lower(),
        )

    async def _group_count(self, column: Any, event: str | None) -> builtins.list[dict[str, Any]]:
        stmt = _for_event(
            select(column.label("key"), func.count(EventRegistration.id).label("count")),
            event,
        )
        result = await self.db.execute(
            stmt.group_by(column).order_by(func.count(EventRegistration.id).desc())
        )
        return [{"key": key, "count": count} for key, count in result]

    async def _exists(self, key: str, email: str, exclude_id: UUID | None = None) -> bool:
        stmt = select(EventRegistration.id).where(
            EventRegistration.event_key == key,
            EventRegistration.email == email,
        )
        if exclude_id is not None:
            stmt = stmt.where(EventRegistration.id != exclude_id)
        result = await self.db.execute(stmt)
        return result.first() is not None

    async def _flush_unique(self) -> None:
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            raise ConflictError(DUPLICATE_MESSAGE) from e
