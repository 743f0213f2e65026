"""Pydantic schemas for events.

Create and update arrive as multipart forms so a banner file can travel
with them; list fields are sent as repeated form keys.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

EventKindName = Literal["upcoming", "past"]
EventStatusName = Literal["confirmed", "hosting", "tentative"]


class EventCreate(BaseModel):
    kind: EventKindName = "upcoming"
    title: str = Field(..., min_length=5, max_length=150)
    type: str = Field(..., min_length=1, max_length=100)
    date: str = Field(..., min_length=1, max_length=100)
    time: str = Field("", max_length=100)
    location: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=10, max_length=2000)
    audience: str = Field("", max_length=200)
    status: EventStatusName = "confirmed"
    topics: list[str] = Field(default_factory=list)
    outcome: str = Field("", max_length=2000)
    published: bool = True
    featured: bool = False
    is_active: bool = True
    order: int = 0


class EventUpdate(BaseModel):
    kind: EventKindName | None = None
    title: str | None = Field(None, min_length=5, max_length=150)
    type: str | None = Field(None, min_length=1, max_length=100)
    date: str | None = Field(None, min_length=1, max_length=100)
    time: str | None = Field(None, max_length=100)
    location: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=10, max_length=2000)
    audience: str | None = Field(None, max_length=200)
    status: EventStatusName | None = None
    topics: list[str] | None = None
    outcome: str | None = Field(None, max_length=2000)
    published: bool | None = None
    featured: bool | None = None
    is_active: bool | None = None
    order: int | None = None


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    kind: str
    title: str
    type: str
    date: str
    time: str
    location: str
    description: str
    audience: str
    status: str
    topics: list[str]
    outcome: str
    published: bool
    featured: bool
    is_active: bool
    order: int
    banner_filename: str | None
    banner_path: str | None
    banner_mime: str | None
    banner_size: int | None
    created_at: datetime
    updated_at: datetime


class EventListResponse(BaseModel):
    items: list[EventResponse]
    total: int
