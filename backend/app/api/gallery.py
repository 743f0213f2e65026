"""Gallery API endpoints.

Create and update take a multipart form with either an ``image`` file or
an ``image_url`` pointing at externally hosted media.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_admin
from app.api.forms import parse_multipart
from app.core import get_db
from app.models.gallery import GalleryItem
from app.schemas.common import MessageResponse
from app.schemas.gallery import (
    GalleryCreate,
    GalleryListResponse,
    GalleryResponse,
    GalleryUpdate,
)
from app.services.gallery import GalleryService
from app.services.uploads import save_upload

router = APIRouter(prefix="/gallery", tags=["gallery"])

IMAGE_FIELD = "image"
GALLERY_SUBDIR = "gallery"


def get_gallery_service(db: AsyncSession = Depends(get_db)) -> GalleryService:
    """Dependency to get gallery service."""
    return GalleryService(db)


def _list_response(items: list[GalleryItem]) -> GalleryListResponse:
    return GalleryListResponse(
        items=[GalleryResponse.model_validate(i) for i in items],
        total=len(items),
    )


@router.post(
    "/create",
    response_model=GalleryResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
async def create_gallery_item(
    request: Request,
    service: GalleryService = Depends(get_gallery_service),
) -> GalleryResponse:
    """Add media to the gallery. Returns 400 if neither a file nor a URL is given."""
    data, upload = await parse_multipart(request, GalleryCreate, IMAGE_FIELD)
    image = await save_upload(upload, GALLERY_SUBDIR) if upload is not None else None
    return GalleryResponse.model_validate(await service.create(data, image))


@router.get("", response_model=GalleryListResponse)
async def list_gallery_items(
    service: GalleryService = Depends(get_gallery_service),
) -> GalleryListResponse:
    return _list_response(await service.list())


@router.get("/recent", response_model=GalleryListResponse)
async def recent_gallery_items(
    limit: int = Query(5, ge=1, le=100),
    service: GalleryService = Depends(get_gallery_service),
) -> GalleryListResponse:
    return _list_response(await service.recent(limit))


@router.get("/{item_id}", response_model=GalleryResponse)
async def get_gallery_item(
    item_id: UUID,
    service: GalleryService = Depends(get_gallery_service),
) -> GalleryResponse:
    return GalleryResponse.model_validate(await service.get(item_id))


@router.put(
    "/{item_id}",
    response_model=GalleryResponse,
    dependencies=[Depends(get_current_admin)],
)
async def update_gallery_item(
    item_id: UUID,
    request: Request,
    service: GalleryService = Depends(get_gallery_service),
) -> GalleryResponse:
    await service.get(item_id)
    data, upload = await parse_multipart(request, GalleryUpdate, IMAGE_FIELD)
    image = await save_upload(upload, GALLERY_SUBDIR) if upload is not None else None
    return GalleryResponse.model_validate(await service.update(item_id, data, image))


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_admin)],
)
async def delete_gallery_item(
    item_id: UUID,
    service: GalleryService = Depends(get_gallery_service),
) -> MessageResponse:
    await service.delete(item_id)
    return MessageResponse(message="Gallery item deleted")
