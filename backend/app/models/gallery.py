"""GalleryItem model - photos and videos from events and visits."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel

GALLERY_CATEGORIES = (
    "Conference",
    "Client_Visit",
    "Internal_Event",
    "Demo",
    "Recognition",
    "Partnership",
    "Keynote",
    "Milestone",
    "Office_Launch",
)
MEDIA_TYPES = ("image", "video")

GalleryCategory = Enum(*GALLERY_CATEGORIES, name="gallery_category", create_constraint=True)
MediaType = Enum(*MEDIA_TYPES, name="media_type", create_constraint=True)


class GalleryItem(BaseModel):
    """Gallery media entry.

    ``image_path`` is either the stored upload path or an external URL;
    external media have ``image_size`` 0.
    """

    __tablename__ = "gallery_items"

    title: Mapped[str] = mapped_column(String(120), nullable=False)
    category: Mapped[str] = mapped_column(GalleryCategory, nullable=False, default="Conference")
    content: Mapped[str] = mapped_column(Text, nullable=False)
    media_type: Mapped[str] = mapped_column(MediaType, nullable=False, default="image")
    image_filename: Mapped[str] = mapped_column(String(255), nullable=False)
    image_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    image_mime: Mapped[str | None] = mapped_column(String(100), nullable=True)
    image_size: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<GalleryItem {self.title!r}>"
