"""Contact API endpoints.

Submitting and reading contacts is public; editing and deleting requires
an admin session.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_admin
from app.core import get_db
from app.schemas.common import CountResponse, MessageResponse, StatBucket
from app.schemas.contact import (
    ContactCreate,
    ContactListResponse,
    ContactResponse,
    ContactUpdate,
)
from app.services.contact import ContactService

router = APIRouter(prefix="/contact", tags=["contacts"])


def get_contact_service(db: AsyncSession = Depends(get_db)) -> ContactService:
    """Dependency to get contact service."""
    return ContactService(db)


def _list_response(contacts: list) -> ContactListResponse:
    return ContactListResponse(
        items=[ContactResponse.model_validate(c) for c in contacts],
        total=len(contacts),
    )


@router.post("/create", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(
    data: ContactCreate,
    response: Response,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    """Submit the contact form.

    Returns 200 instead of 201 when the message was added to an existing contact.
    """
    contact, created = await service.create(data)
    if not created:
        response.status_code = status.HTTP_200_OK
    return ContactResponse.model_validate(contact)


@router.get("", response_model=ContactListResponse)
async def list_contacts(
    service: ContactService = Depends(get_contact_service),
) -> ContactListResponse:
    return _list_response(await service.list())


@router.get("/count", response_model=CountResponse)
async def count_contacts(service: ContactService = Depends(get_contact_service)) -> CountResponse:
    return CountResponse(count=await service.count())


@router.get("/search", response_model=ContactListResponse)
async def search_contacts(
    q: str = Query(..., min_length=1, max_length=200),
    service: ContactService = Depends(get_contact_service),
) -> ContactListResponse:
    return _list_response(await service.search(q))


@router.get("/recent", response_model=ContactListResponse)
async def recent_contacts(
    limit: int = Query(5, ge=1, le=100),
    service: ContactService = Depends(get_contact_service),
) -> ContactListResponse:
    return _list_response(await service.recent(limit))


@router.get("/stats", response_model=list[StatBucket])
async def contact_stats(service: ContactService = Depends(get_contact_service)) -> list[StatBucket]:
    """Contact counts per country, largest first."""
    return [StatBucket(**row) for row in await service.stats_by_country()]


@router.get("/email/{email}", response_model=ContactResponse)
async def get_contact_by_email(
    email: str,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    return ContactResponse.model_validate(await service.get_by_email(email))


@router.get("/phone/{phone}", response_model=ContactResponse)
async def get_contact_by_phone(
    phone: str,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    return ContactResponse.model_validate(await service.get_by_phone(phone))


@router.get("/name/{name}", response_model=ContactListResponse)
async def find_contacts_by_name(
    name: str,
    service: ContactService = Depends(get_contact_service),
) -> ContactListResponse:
    return _list_response(await service.find_by("name", name))


@router.get("/company/{company_name}", response_model=ContactListResponse)
async def find_contacts_by_company(
    company_name: str,
    service: ContactService = Depends(get_contact_service),
) -> ContactListResponse:
    return _list_response(await service.find_by("company_name", company_name))


@router.get("/job/{job_title}", response_model=ContactListResponse)
async def find_contacts_by_job_title(
    job_title: str,
    service: ContactService = Depends(get_contact_service),
) -> ContactListResponse:
    return _list_response(await service.find_by("job_title", job_title))


@router.get("/country/{country}", response_model=ContactListResponse)
async def find_contacts_by_country(
    country: str,
    service: ContactService = Depends(get_contact_service),
) -> ContactListResponse:
    return _list_response(await service.find_by("country", country))


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: UUID,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    return ContactResponse.model_validate(await service.get(contact_id))


@router.put(
    "/{contact_id}",
    response_model=ContactResponse,
    dependencies=[Depends(get_current_admin)],
)
async def update_contact(
    contact_id: UUID,
    data: ContactUpdate,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    return ContactResponse.model_validate(await service.update(contact_id, data))


@router.delete(
    "/{contact_id}",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_admin)],
)
async def delete_contact(
    contact_id: UUID,
    service: ContactService = Depends(get_contact_service),
) -> MessageResponse:
    await service.delete(contact_id)
    return MessageResponse(message="Contact deleted")
