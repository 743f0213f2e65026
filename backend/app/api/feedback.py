"""Feedback API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_admin
from app.core import get_db
from app.models.feedback import Feedback
from app.schemas.common import MessageResponse
from app.schemas.feedback import (
    FeedbackApproval,
    FeedbackCreate,
    FeedbackListResponse,
    FeedbackResponse,
    FeedbackUpdate,
)
from app.services.feedback import FeedbackService

router = APIRouter(prefix="/feedback", tags=["feedback"])


def get_feedback_service(db: AsyncSession = Depends(get_db)) -> FeedbackService:
    """Dependency to get feedback service."""
    return FeedbackService(db)


def _list_response(items: list[Feedback]) -> FeedbackListResponse:
    return FeedbackListResponse(
        items=[FeedbackResponse.model_validate(f) for f in items],
        total=len(items),
    )


@router.post("/create", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
async def create_feedback(
    data: FeedbackCreate,
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackResponse:
    """Submit feedback. New feedback is hidden until approved."""
    return FeedbackResponse.model_validate(await service.create(data))


@router.get("", response_model=FeedbackListResponse)
async def list_feedback(
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackListResponse:
    return _list_response(await service.list())


@router.get("/recent", response_model=FeedbackListResponse)
async def recent_feedback(
    limit: int = Query(5, ge=1, le=100),
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackListResponse:
    return _list_response(await service.recent(limit))


@router.get("/approved", response_model=FeedbackListResponse)
async def approved_feedback(
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackListResponse:
    return _list_response(await service.approved())


@router.get("/name/{name}", response_model=FeedbackListResponse)
async def find_feedback_by_name(
    name: str,
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackListResponse:
    return _list_response(await service.find_by_name(name))


@router.get("/company/{company}", response_model=FeedbackListResponse)
async def find_feedback_by_company(
    company: str,
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackListResponse:
    return _list_response(await service.find_by_company(company))


@router.get("/{feedback_id}", response_model=FeedbackResponse)
async def get_feedback(
    feedback_id: UUID,
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackResponse:
    return FeedbackResponse.model_validate(await service.get(feedback_id))


@router.put(
    "/{feedback_id}",
    response_model=FeedbackResponse,
    dependencies=[Depends(get_current_admin)],
)
async def update_feedback(
    feedback_id: UUID,
    data: FeedbackUpdate,
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackResponse:
    return FeedbackResponse.model_validate(await service.update(feedback_id, data))


@router.patch(
    "/{feedback_id}/approve",
    response_model=FeedbackResponse,
    dependencies=[Depends(get_current_admin)],
)
async def approve_feedback(
    feedback_id: UUID,
    data: FeedbackApproval | None = None,
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackResponse:
    """Approve feedback, or withdraw approval with ``{"is_approved": false}``."""
    is_approved = data.is_approved if data is not None else True
    return FeedbackResponse.model_validate(await service.set_approval(feedback_id, is_approved))


@router.delete(
    "/{feedback_id}",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_admin)],
)
async def delete_feedback(
    feedback_id: UUID,
    service: FeedbackService = Depends(get_feedback_service),
) -> MessageResponse:
    await service.delete(feedback_id)
    return MessageResponse(message="Feedback deleted")
