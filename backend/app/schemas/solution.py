"""Pydantic schemas for solutions."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.project import BadgeName, ColorName, IconName


class SolutionCreate(BaseModel):
    icon: IconName
    title: str = Field(..., min_length=2, max_length=200)
    description: str = Field(..., min_length=10, max_length=2000)
    features: list[str] = Field(default_factory=list)
    badge: BadgeName = ""
    color: ColorName = "primary"
    is_active: bool = False


class SolutionUpdate(BaseModel):
    icon: IconName | None = None
    title: str | None = Field(None, min_length=2, max_length=200)
    description: str | None = Field(None, min_length=10, max_length=2000)
    features: list[str] | None = None
    badge: BadgeName | None = None
    color: ColorName | None = None
    is_active: bool | None = None


class SolutionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    icon: str
    title: str
    description: str
    features: list[str]
    badge: str
    color: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


class SolutionListResponse(BaseModel):
    items: list[SolutionResponse]
    total: int
