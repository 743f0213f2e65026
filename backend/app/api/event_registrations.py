"""Event registration API endpoints.

Registering and the read/report endpoints are public; edits and deletes
require an admin session. The optional ``event`` query parameter on the
report endpoints accepts a title or key and is normalised the same way
registrations are.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_admin
from app.core import get_db
from app.core.request_utils import get_client_ip, get_user_agent
from app.models.event_registration import EventRegistration
from app.schemas.common import CountResponse, MessageResponse, StatBucket
from app.schemas.event_registration import (
    RegistrationCreate,
    RegistrationListResponse,
    RegistrationPageResponse,
    RegistrationResponse,
    RegistrationUpdate,
)
from app.services.event_registration import EventRegistrationService

router = APIRouter(prefix="/event-registrations", tags=["event-registrations"])


def get_registration_service(db: AsyncSession = Depends(get_db)) -> EventRegistrationService:
    """Dependency to get event registration service."""
    return EventRegistrationService(db)


def _list_response(registrations: list[EventRegistration]) -> RegistrationListResponse:
    return RegistrationListResponse(
        items=[RegistrationResponse.model_validate(r) for r in registrations],
        total=len(registrations),
    )


@router.post(
    "/create",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_registration(
    data: RegistrationCreate,
    request: Request,
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    """Register for an event.

    Returns 409 if this email is already registered for the event.
    """
    registration = await service.create(
        data,
        ip=get_client_ip(request),
        user_agent=get_user_agent(request),
    )
    return RegistrationResponse.model_validate(registration)


@router.get("", response_model=RegistrationListResponse)
async def list_registrations(
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationListResponse:
    return _list_response(await service.list())


@router.get("/count", response_model=CountResponse)
async def count_registrations(
    event: str | None = Query(None, max_length=200),
    service: EventRegistrationService = Depends(get_registration_service),
) -> CountResponse:
    return CountResponse(count=await service.count(event))


@router.get("/search", response_model=RegistrationListResponse)
async def search_registrations(
    q: str = Query("", max_length=200),
    event: str | None = Query(None, max_length=200),
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationListResponse:
    return _list_response(await service.search(q, event))


@router.get("/recent", response_model=RegistrationListResponse)
async def recent_registrations(
    limit: int = Query(5, ge=1, le=100),
    event: str | None = Query(None, max_length=200),
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationListResponse:
    return _list_response(await service.recent(limit, event))


@router.get("/stats/location", response_model=list[StatBucket])
async def registrations_by_location(
    event: str | None = Query(None, max_length=200),
    service: EventRegistrationService = Depends(get_registration_service),
) -> list[StatBucket]:
    return [StatBucket(**row) for row in await service.stats_by_location(event)]


@router.get("/stats/company", response_model=list[StatBucket])
async def registrations_by_company(
    event: str | None = Query(None, max_length=200),
    service: EventRegistrationService = Depends(get_registration_service),
) -> list[StatBucket]:
    return [StatBucket(**row) for row in await service.stats_by_company(event)]


@router.get("/trend/daily", response_model=list[StatBucket])
async def daily_signup_trend(
    event: str | None = Query(None, max_length=200),
    service: EventRegistrationService = Depends(get_registration_service),
) -> list[StatBucket]:
    """Sign-ups per day, oldest first. ``key`` is the date (YYYY-MM-DD)."""
    return [StatBucket(**row) for row in await service.daily_trend(event)]


@router.get("/paginated", response_model=RegistrationPageResponse)
async def paginated_registrations(
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=100, description="Items per page"),
    event: str | None = Query(None, max_length=200),
    q: str | None = Query(None, max_length=200),
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationPageResponse:
    registrations, total = await service.paginated(
        page=page, page_size=page_size, event=event, query=q
    )
    pages = (total + page_size - 1) // page_size if total > 0 else 0
    return RegistrationPageResponse(
        items=[RegistrationResponse.model_validate(r) for r in registrations],
        total=total,
        page=page,
        page_size=page_size,
        pages=pages,
    )


@router.get("/by-event/{event_title}", response_model=RegistrationListResponse)
async def registrations_by_event(
    event_title: str,
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationListResponse:
    return _list_response(await service.by_event(event_title))


@router.get("/by-key/{event_key}", response_model=RegistrationListResponse)
async def registrations_by_key(
    event_key: str,
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationListResponse:
    return _list_response(await service.by_key(event_key))


@router.get("/by-email/{event_title}/{email}", response_model=RegistrationResponse)
async def registration_by_email(
    event_title: str,
    email: str,
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    return RegistrationResponse.model_validate(
        await service.get_for_event_by_email(event_title, email)
    )


@router.get("/{registration_id}", response_model=RegistrationResponse)
async def get_registration(
    registration_id: UUID,
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    return RegistrationResponse.model_validate(await service.get(registration_id))


@router.patch(
    "/{registration_id}",
    response_model=RegistrationResponse,
    dependencies=[Depends(get_current_admin)],
)
async def update_registration(
    registration_id: UUID,
    data: RegistrationUpdate,
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    return RegistrationResponse.model_validate(await service.update(registration_id, data))


@router.patch(
    "/{registration_id}/email-sent",
    response_model=RegistrationResponse,
    dependencies=[Depends(get_current_admin)],
)
async def mark_registration_email_sent(
    registration_id: UUID,
    service: EventRegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    return RegistrationResponse.model_validate(await service.mark_email_sent(registration_id))


@router.delete(
    "/{registration_id}",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_admin)],
)
async def delete_registration(
    registration_id: UUID,
    service: EventRegistrationService = Depends(get_registration_service),
) -> MessageResponse:
    await service.delete(registration_id)
    return MessageResponse(message="Registration deleted")
