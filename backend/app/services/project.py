"""Project service - portfolio projects and their visibility."""

import builtins
import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.showcase import Project
from app.schemas.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)

_NEWEST_FIRST = (Project.created_at.desc(), Project.id.desc())


class ProjectService:
    """Service for managing projects."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: ProjectCreate) -> Project:
        project = Project(**data.model_dump())
        self.db.add(project)
        await self.db.flush()
        await self.db.refresh(project)
        logger.info(f"Created project {project.id}")
        return project

    async def get(self, project_id: UUID) -> Project:
        project = await self.db.get(Project, project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    async def list(self, active_only: bool = False) -> builtins.list[Project]:
        stmt = select(Project)
        if active_only:
            stmt = stmt.where(Project.is_active.is_(True))
        result = await self.db.execute(stmt.order_by(*_NEWEST_FIRST))
        return list(result.scalars().all())

    async def update(self, project_id: UUID, data: ProjectUpdate) -> Project:
        project = await self.get(project_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(project, field, value)
        await self.db.flush()
        await self.db.refresh(project)
        return project

    async def set_visibility(self, project_id: UUID, is_active: bool) -> Project:
        project = await self.get(project_id)
        project.is_active = is_active
        await self.db.flush()
        await self.db.refresh(project)
        return project

    async def delete(self, project_id: UUID) -> None:
        project = await self.get(project_id)
        await self.db.delete(project)
        await self.db.flush()
