"""Pydantic schemas for gallery media."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

GalleryCategoryName = Literal[
    "Conference",
    "Client_Visit",
    "Internal_Event",
    "Demo",
    "Recognition",
    "Partnership",
    "Keynote",
    "Milestone",
    "Office_Launch",
]
MediaTypeName = Literal["image", "video"]

URL_PATTERN = r"^https?://\S+$"


class GalleryCreate(BaseModel):
    """Gallery form fields. Either an uploaded ``image`` or ``image_url`` is required."""

    title: str = Field(..., min_length=3, max_length=120)
    category: GalleryCategoryName = "Conference"
    content: str = Field(..., min_length=10, max_length=2000)
    media_type: MediaTypeName = "image"
    date: datetime
    location: str = Field("", max_length=120)
    published: bool = True
    featured: bool = False
    is_active: bool = True
    image_url: str | None = Field(
        None,
        max_length=1024,
        pattern=URL_PATTERN,
        validation_alias=AliasChoices("image_url", "imageUrl"),
    )


class GalleryUpdate(BaseModel):
    title: str | None = Field(None, min_length=3, max_length=120)
    category: GalleryCategoryName | None = None
    content: str | None = Field(None, min_length=10, max_length=2000)
    media_type: MediaTypeName | None = None
    date: datetime | None = None
    location: str | None = Field(None, max_length=120)
    published: bool | None = None
    featured: bool | None = None
    is_active: bool | None = None
    image_url: str | None = Field(
        None,
        max_length=1024,
        pattern=URL_PATTERN,
        validation_alias=AliasChoices("image_url", "imageUrl"),
    )


class GalleryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    category: str
    content: str
    media_type: str
    image_filename: str
    image_path: str
    image_mime: str | None
    image_size: int
    date: datetime
    location: str
    published: bool
    featured: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime


class GalleryListResponse(BaseModel):
    items: list[GalleryResponse]
    total: int
