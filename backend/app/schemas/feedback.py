"""Pydantic schemas for client feedback."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class FeedbackCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=50)
    company_name: str = Field(..., min_length=2, max_length=30)
    job_title: str = Field(..., min_length=2, max_length=30)
    rating: int = Field(..., ge=0, le=5)
    comment: str = Field(..., min_length=10, max_length=500)


class FeedbackUpdate(BaseModel):
    name: str | None = Field(None, min_length=3, max_length=50)
    company_name: str | None = Field(None, min_length=2, max_length=30)
    job_title: str | None = Field(None, min_length=2, max_length=30)
    rating: int | None = Field(None, ge=0, le=5)
    comment: str | None = Field(None, min_length=10, max_length=500)
    is_approved: bool | None = None


class FeedbackApproval(BaseModel):
    is_approved: bool = True


class FeedbackResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    company_name: str
    job_title: str
    rating: int
    comment: str
    is_approved: bool
    submitted_at: datetime
    created_at: datetime
    updated_at: datetime


class FeedbackListResponse(BaseModel):
    items: list[FeedbackResponse]
    total: int
