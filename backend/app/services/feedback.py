"""Feedback service - client testimonials and their approval."""

import builtins
import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.feedback import Feedback
from app.schemas.feedback import FeedbackCreate, FeedbackUpdate

logger = logging.getLogger(__name__)

_NEWEST_FIRST = (Feedback.submitted_at.desc(), Feedback.id.desc())


class FeedbackService:
    """Service for managing feedback."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: FeedbackCreate) -> Feedback:
        feedback = Feedback(**data.model_dump())
        self.db.add(feedback)
        await self.db.flush()
        await self.db.refresh(feedback)
        logger.info(f"Feedback received from {feedback.name} (rating {feedback.rating})")
        return feedback

    async def get(self, feedback_id: UUID) -> Feedback:
        feedback = await self.db.get(Feedback, feedback_id)
        if feedback is None:
            raise NotFoundError("Feedback record not found")
        return feedback

    async def list(self) -> builtins.list[Feedback]:
        result = await self.db.execute(select(Feedback).order_by(*_NEWEST_FIRST))
        return list(result.scalars().all())

    async def recent(self, limit: int = 5) -> builtins.list[Feedback]:
        result = await self.db.execute(select(Feedback).order_by(*_NEWEST_FIRST).limit(limit))
        return list(result.scalars().all())

    async def approved(self) -> builtins.list[Feedback]:
        result = await self.db.execute(
            select(Feedback).where(Feedback.is_approved.is_(True)).order_by(*_NEWEST_FIRST)
        )
        return list(result.scalars().all())

    async def find_by_name(self, name: str) -> builtins.list[Feedback]:
        result = await self.db.execute(
            select(Feedback)
            .where(Feedback.name.icontains(name, autoescape=True))
            .order_by(*_NEWEST_FIRST)
        )
        return list(result.scalars().all())

    async def find_by_company(self, company: str) -> builtins.list[Feedback]:
        result = await self.db.execute(
            select(Feedback)
            .where(Feedback.company_name.icontains(company, autoescape=True))
            .order_by(*_NEWEST_FIRST)
        )
        return list(result.scalars().all())

    async def update(self, feedback_id: UUID, data: FeedbackUpdate) -> Feedback:
        feedback = await self.get(feedback_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(feedback, field, value)
        await self.db.flush()
        await self.db.refresh(feedback)
        return feedback

    async def set_approval(self, feedback_id: UUID, is_approved: bool) -> Feedback:
        feedback = await self.get(feedback_id)
        feedback.is_approved = is_approved
        await self.db.flush()
        await self.db.refresh(feedback)
        logger.info(f"Feedback {feedback_id} approval set to {is_approved}")
        return feedback

    async def delete(self, feedback_id: UUID) -> None:
        feedback = await self.get(feedback_id)
        await self.db.delete(feedback)
        await self.db.flush()
