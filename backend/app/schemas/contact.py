"""Pydantic schemas for contacts."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

PHONE_PATTERN = r"^[0-9]{10}$"


class ContactCreate(BaseModel):
    """Contact form submission."""

    name: str = Field(..., min_length=3, max_length=30)
    email: EmailStr
    phone: str = Field(..., pattern=PHONE_PATTERN, description="Exactly 10 digits")
    company_name: str = Field(..., min_length=2, max_length=30)
    country: str = Field(..., min_length=2, max_length=30)
    job_title: str = Field(..., min_length=4, max_length=30)
    message: str = Field(..., min_length=10, max_length=50000)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class ContactUpdate(BaseModel):
    """Admin edit of a contact. Messages are append-only and not editable here."""

    name: str | None = Field(None, min_length=3, max_length=30)
    email: EmailStr | None = None
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    company_name: str | None = Field(None, min_length=2, max_length=30)
    country: str | None = Field(None, min_length=2, max_length=30)
    job_title: str | None = Field(None, min_length=4, max_length=30)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str | None) -> str | None:
        return v.lower() if v else v


class ContactMessage(BaseModel):
    message: str
    submitted_at: datetime | None = None


class ContactResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    phone: str
    company_name: str
    country: str
    job_title: str
    messages: list[ContactMessage]
    created_at: datetime
    updated_at: datetime


class ContactListResponse(BaseModel):
    items: list[ContactResponse]
    total: int
