"""Gallery service - uploaded or externally hosted media.

Like events, writes commit here so stored files and rows stay in step:
replaced files are removed after the commit, new ones if it fails.
"""

import builtins
import logging
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidInputError, NotFoundError
from app.models.gallery import GalleryItem
from app.schemas.gallery import GalleryCreate, GalleryUpdate
from app.services.uploads import StoredFile, delete_upload, discard_upload

logger = logging.getLogger(__name__)


def media_fields(
    image: StoredFile | None,
    image_url: str | None,
    media_type: str | None,
) -> dict[str, Any]:
    """Image columns for an uploaded file, or for an external media URL.

    An uploaded file wins over a URL. Returns an empty dict if neither is given.
    """
    if image is not None:
        return {
            "image_filename": image.filename,
            "image_path": image.path,
            "image_mime": image.mime,
            "image_size": image.size,
            "media_type": "video" if image.mime.startswith("video/") else "image",
        }
    if image_url:
        kind = media_type or "image"
        return {
            "image_filename": image_url.rstrip("/").rsplit("/", 1)[-1] or "external-media",
            "image_path": image_url,
            "image_mime": "video/youtube" if kind == "video" else "image/external",
            "image_size": 0,
            "media_type": kind,
        }
    return {}


class GalleryService:
    """Service for managing gallery items."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: GalleryCreate, image: StoredFile | None = None) -> GalleryItem:
        media = media_fields(image, data.image_url, data.media_type)
        if not media:
            raise InvalidInputError("An image file or media URL is required")

        fields = data.model_dump(exclude={"image_url"})
        fields.update(media)
        item = GalleryItem(**fields)
        self.db.add(item)
        try:
            await self.db.commit()
        except BaseException:
            await self.db.rollback()
            await discard_upload(image)
            raise
        await self.db.refresh(item)
        logger.info(f"Created gallery item {item.id} ({item.media_type})")
        return item

    async def get(self, item_id: UUID) -> GalleryItem:
        item = await self.db.get(GalleryItem, item_id)
        if item is None:
            raise NotFoundError("Gallery item not found")
        return item

    async def list(self) -> builtins.list[GalleryItem]:
        result = await self.db.execute(
            select(GalleryItem).order_by(GalleryItem.date.desc(), GalleryItem.id.desc())
        )
        return list(result.scalars().all())

    async def recent(self, limit: int = 5) -> builtins.list[GalleryItem]:
        result = await self.db.execute(
            select(GalleryItem)
            .where(GalleryItem.published.is_(True), GalleryItem.is_active.is_(True))
            .order_by(GalleryItem.date.desc(), GalleryItem.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def update(
        self,
        item_id: UUID,
        data: GalleryUpdate,
        image: StoredFile | None = None,
    ) -> GalleryItem:
        try:
            item = await self.get(item_id)
            old_path = item.image_path

            fields = {
                k: v
                for k, v in data.model_dump(exclude_unset=True, exclude={"image_url"}).items()
                if v is not None
            }
            media = media_fields(image, data.image_url, data.media_type)
            fields.update(media)
            for field, value in fields.items():
                setattr(item, field, value)
            await self.db.commit()
        except BaseException:
            await self.db.rollback()
            await discard_upload(image)
            raise
        await self.db.refresh(item)

        if media and old_path != item.image_path:
            await delete_upload(old_path)
        return item

    async def delete(self, item_id: UUID) -> None:
        item = await self.get(item_id)
        image_path = item.image_path
        await self.db.delete(item)
        await self.db.commit()
        await delete_upload(image_path)
