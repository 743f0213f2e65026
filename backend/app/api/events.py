"""Event API endpoints.

Create and update take a multipart form with an optional ``banner`` file.
The public site only reads the recent upcoming/past lists; everything
else requires an admin session.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_admin
from app.api.forms import parse_multipart
from app.core import get_db
from app.models.event import Event
from app.schemas.common import MessageResponse
from app.schemas.event import EventCreate, EventListResponse, EventResponse, EventUpdate
from app.services.event import EventService
from app.services.uploads import save_upload

router = APIRouter(prefix="/events", tags=["events"])

BANNER_FIELD = "banner"
BANNER_SUBDIR = "events"
LIST_FIELDS = ("topics",)


def get_event_service(db: AsyncSession = Depends(get_db)) -> EventService:
    """Dependency to get event service."""
    return EventService(db)


def _list_response(events: list[Event]) -> EventListResponse:
    return EventListResponse(
        items=[EventResponse.model_validate(e) for e in events],
        total=len(events),
    )


@router.post(
    "/create",
    response_model=EventResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
async def create_event(
    request: Request,
    service: EventService = Depends(get_event_service),
) -> EventResponse:
    """Create an event from a multipart form."""
    data, upload = await parse_multipart(request, EventCreate, BANNER_FIELD, LIST_FIELDS)
    banner = await save_upload(upload, BANNER_SUBDIR) if upload is not None else None
    return EventResponse.model_validate(await service.create(data, banner))


@router.get("", response_model=EventListResponse, dependencies=[Depends(get_current_admin)])
async def list_events(
    service: EventService = Depends(get_event_service),
) -> EventListResponse:
    return _list_response(await service.list())


@router.get("/recent/upcoming", response_model=EventListResponse)
async def recent_upcoming_events(
    limit: int = Query(4, ge=1, le=50),
    service: EventService = Depends(get_event_service),
) -> EventListResponse:
    return _list_response(await service.recent("upcoming", limit))


@router.get("/recent/past", response_model=EventListResponse)
async def recent_past_events(
    limit: int = Query(4, ge=1, le=50),
    service: EventService = Depends(get_event_service),
) -> EventListResponse:
    return _list_response(await service.recent("past", limit))


@router.get(
    "/{event_id}",
    response_model=EventResponse,
    dependencies=[Depends(get_current_admin)],
)
async def get_event(
    event_id: UUID,
    service: EventService = Depends(get_event_service),
) -> EventResponse:
    return EventResponse.model_validate(await service.get(event_id))


@router.put(
    "/{event_id}",
    response_model=EventResponse,
    dependencies=[Depends(get_current_admin)],
)
async def update_event(
    event_id: UUID,
    request: Request,
    service: EventService = Depends(get_event_service),
) -> EventResponse:
    """Update an event. A new banner replaces and removes the old one."""
    # 404 before anything is written to disk
    await service.get(event_id)
    data, upload = await parse_multipart(request, EventUpdate, BANNER_FIELD, LIST_FIELDS)
    banner = await save_upload(upload, BANNER_SUBDIR) if upload is not None else None
    return EventResponse.model_validate(await service.update(event_id, data, banner))


@router.delete(
    "/{event_id}",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_admin)],
)
async def delete_event(
    event_id: UUID,
    service: EventService = Depends(get_event_service),
) -> MessageResponse:
    await service.delete(event_id)
    return MessageResponse(message="Event deleted")
