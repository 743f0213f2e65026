"""Solution service."""

import builtins
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.showcase import Solution
from app.schemas.solution import SolutionCreate, SolutionUpdate


class SolutionService:
    """Service for managing solutions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: SolutionCreate) -> Solution:
        solution = Solution(**data.model_dump())
        self.db.add(solution)
        await self.db.flush()
        await self.db.refresh(solution)
        return solution

    async def get(self, solution_id: UUID) -> Solution:
        solution = await self.db.get(Solution, solution_id)
        if solution is None:
            raise NotFoundError("Solution not found")
        return solution

    async def list(self, active_only: bool = False) -> builtins.list[Solution]:
        stmt = select(Solution)
        if active_only:
            stmt = stmt.where(Solution.is_active.is_(True))
        result = await self.db.execute(
            stmt.order_by(Solution.created_at.desc(), Solution.id.desc())
        )
        return list(result.scalars().all())

    async def update(self, solution_id: UUID, data: SolutionUpdate) -> Solution:
        solution = await self.get(solution_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(solution, field, value)
        await self.db.flush()
        await self.db.refresh(solution)
        return solution

    async def set_visibility(self, solution_id: UUID, is_active: bool) -> Solution:
        solution = await self.get(solution_id)
        solution.is_active = is_active
        await self.db.flush()
        await self.db.refresh(solution)
        return solution

    async def delete(self, solution_id: UUID) -> None:
        solution = await self.get(solution_id)
        await self.db.delete(solution)
        await self.db.flush()
