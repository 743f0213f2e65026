"""Project API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_admin
from app.core import get_db
from app.models.showcase import Project
from app.schemas.common import MessageResponse
from app.schemas.project import (
    ProjectCreate,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdate,
    VisibilityUpdate,
)
from app.services.project import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    """Dependency to get project service."""
    return ProjectService(db)


def _list_response(projects: list[Project]) -> ProjectListResponse:
    return ProjectListResponse(
        items=[ProjectResponse.model_validate(p) for p in projects],
        total=len(projects),
    )


@router.post(
    "/create",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
async def create_project(
    data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    return ProjectResponse.model_validate(await service.create(data))


@router.get("", response_model=ProjectListResponse)
async def list_projects(
    service: ProjectService = Depends(get_project_service),
) -> ProjectListResponse:
    return _list_response(await service.list())


@router.get("/active", response_model=ProjectListResponse)
async def active_projects(
    service: ProjectService = Depends(get_project_service),
) -> ProjectListResponse:
    """Projects shown on the public site."""
    return _list_response(await service.list(active_only=True))


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    return ProjectResponse.model_validate(await service.get(project_id))


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    dependencies=[Depends(get_current_admin)],
)
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    return ProjectResponse.model_validate(await service.update(project_id, data))


@router.patch(
    "/{project_id}/visibility",
    response_model=ProjectResponse,
    dependencies=[Depends(get_current_admin)],
)
async def set_project_visibility(
    project_id: UUID,
    data: VisibilityUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    return ProjectResponse.model_validate(
        await service.set_visibility(project_id, data.is_active)
    )


@router.delete(
    "/{project_id}",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_admin)],
)
async def delete_project(
    project_id: UUID,
    service: ProjectService = Depends(get_project_service),
) -> MessageResponse:
    await service.delete(project_id)
    return MessageResponse(message="Project deleted")
