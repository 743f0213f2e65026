"""Contact service - business logic for contact form submissions."""

import builtins
import logging
from typing import Any
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.models.base import utc_now
from app.models.contact import Contact
from app.schemas.contact import ContactCreate, ContactUpdate

logger = logging.getLogger(__name__)


class ContactService:
    """Service for managing contacts."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: ContactCreate) -> tuple[Contact, bool]:
        """Record a contact form submission.

        A submission whose email, phone or company name matches an existing
        contact is appended to that contact's messages.

        Returns:
            (contact, created) where created is False for a merge.
        """
        entry = {"message": data.message, "submitted_at": utc_now().isoformat()}

        result = await self.db.execute(
            select(Contact)
            .where(
                or_(
                    Contact.email == data.email,
                    Contact.phone == data.phone,
                    Contact.company_name == data.company_name,
                )
            )
            .order_by(Contact.created_at.asc())
            .limit(1)
        )
        existing = result.scalar_one_or_none()
        if existing is not None:
            # Reassign so the JSON column is flagged dirty
            existing.messages = [*existing.messages, entry]
            await self.db.flush()
            await self.db.refresh(existing)
            logger.info(f"Appended message to contact {existing.id}")
            return existing, False

        contact = Contact(
            name=data.name,
            email=data.email,
            phone=data.phone,
            company_name=data.company_name,
            country=data.country,
            job_title=data.job_title,
            messages=[entry],
        )
        self.db.add(contact)
        await self._flush_unique()
        await self.db.refresh(contact)
        logger.info(f"Created contact {contact.id}")
        return contact, True

    async def get(self, contact_id: UUID) -> Contact:
        contact = await self.db.get(Contact, contact_id)
        if contact is None:
            raise NotFoundError("No matching contact found")
        return contact

    async def get_by_email(self, email: str) -> Contact:
        result = await self.db.execute(
            select(Contact).where(func.lower(Contact.email) == email.strip().lower())
        )
        contact = result.scalar_one_or_none()
        if contact is None:
            raise NotFoundError("No matching contact found")
        return contact

    async def get_by_phone(self, phone: str) -> Contact:
        result = await self.db.execute(select(Contact).where(Contact.phone == phone))
        contact = result.scalar_one_or_none()
        if contact is None:
            raise NotFoundError("No matching contact found")
        return contact

    async def find_by(self, field: str, value: str) -> builtins.list[Contact]:
        """Case-insensitive substring match on one text column."""
        column = getattr(Contact, field)
        result = await self.db.execute(
            select(Contact)
            .where(column.icontains(value, autoescape=True))
            .order_by(Contact.created_at.desc(), Contact.id.desc())
        )
        return list(result.scalars().all())

    async def list(self) -> builtins.list[Contact]:
        result = await self.db.execute(
            select(Contact).order_by(Contact.created_at.desc(), Contact.id.desc())
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(Contact.id)))
        return result.scalar() or 0

    async def search(self, query: str) -> builtins.list[Contact]:
        """Match the query against every text field."""
        columns = (
            Contact.name,
            Contact.email,
            Contact.phone,
            Contact.company_name,
            Contact.country,
            Contact.job_title,
        )
        result = await self.db.execute(
            select(Contact)
            .where(or_(*(c.icontains(query, autoescape=True) for c in columns)))
            .order_by(Contact.created_at.desc(), Contact.id.desc())
        )
        return list(result.scalars().all())

    async def recent(self, limit: int = 5) -> builtins.list[Contact]:
        result = await self.db.execute(
            select(Contact).order_by(Contact.created_at.desc(), Contact.id.desc()).limit(limit)
        )
        return list(result.scalars().all())

    async def stats_by_country(self) -> builtins.list[dict[str, Any]]:
        result = await self.db.execute(
            select(Contact.country, func.count(Contact.id).label("count"))
            .group_by(Contact.country)
            .order_by(func.count(Contact.id).desc(), Contact.country.asc())
        )
        return [{"key": country, "count": count} for country, count in result]

    async def update(self, contact_id: UUID, data: ContactUpdate) -> Contact:
        contact = await self.get(contact_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(contact, field, value)
        await self._flush_unique()
        await self.db.refresh(contact)
        return contact

    async def delete(self, contact_id: UUID) -> None:
        contact = await self.get(contact_id)
        await self.db.delete(contact)
        await self.db.flush()

    async def _flush_unique(self) -> None:
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            raise ConflictError("A contact with this email or phone already exists") from e
