"""Solution API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_admin
from app.core import get_db
from app.models.showcase import Solution
from app.schemas.common import MessageResponse
from app.schemas.project import VisibilityUpdate
from app.schemas.solution import (
    SolutionCreate,
    SolutionListResponse,
    SolutionResponse,
    SolutionUpdate,
)
from app.services.solution import SolutionService

router = APIRouter(prefix="/solutions", tags=["solutions"])


def get_solution_service(db: AsyncSession = Depends(get_db)) -> SolutionService:
    """Dependency to get solution service."""
    return SolutionService(db)


def _list_response(solutions: list[Solution]) -> SolutionListResponse:
    return SolutionListResponse(
        items=[SolutionResponse.model_validate(s) for s in solutions],
        total=len(solutions),
    )


@router.post(
    "/create",
    response_model=SolutionResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
async def create_solution(
    data: SolutionCreate,
    service: SolutionService = Depends(get_solution_service),
) -> SolutionResponse:
    return SolutionResponse.model_validate(await service.create(data))


@router.get("", response_model=SolutionListResponse)
async def list_solutions(
    service: SolutionService = Depends(get_solution_service),
) -> SolutionListResponse:
    return _list_response(await service.list())


@router.get("/active", response_model=SolutionListResponse)
async def active_solutions(
    service: SolutionService = Depends(get_solution_service),
) -> SolutionListResponse:
    return _list_response(await service.list(active_only=True))


@router.get("/{solution_id}", response_model=SolutionResponse)
async def get_solution(
    solution_id: UUID,
    service: SolutionService = Depends(get_solution_service),
) -> SolutionResponse:
    return SolutionResponse.model_validate(await service.get(solution_id))


@router.put(
    "/{solution_id}",
    response_model=SolutionResponse,
    dependencies=[Depends(get_current_admin)],
)
async def update_solution(
    solution_id: UUID,
    data: SolutionUpdate,
    service: SolutionService = Depends(get_solution_service),
) -> SolutionResponse:
    return SolutionResponse.model_validate(await service.update(solution_id, data))


@router.patch(
    "/{solution_id}/visibility",
    response_model=SolutionResponse,
    dependencies=[Depends(get_current_admin)],
)
async def set_solution_visibility(
    solution_id: UUID,
    data: VisibilityUpdate,
    service: SolutionService = Depends(get_solution_service),
) -> SolutionResponse:
    return SolutionResponse.model_validate(
        await service.set_visibility(solution_id, data.is_active)
    )


@router.delete(
    "/{solution_id}",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_admin)],
)
async def delete_solution(
    solution_id: UUID,
    service: SolutionService = Depends(get_solution_service),
) -> MessageResponse:
    await service.delete(solution_id)
    return MessageResponse(message="Solution deleted")
