"""Pydantic schemas for event registrations.

Request bodies accept both snake_case and the camelCase names used by the
public site's forms (``eventTitle``, ``fullName``).
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

PHONE_PATTERN = r"^[0-9+\-\s()]{7,}$"


def _strip(v: str | None) -> str | None:
    if v is None:
        return None
    return v.strip()


class _RegistrationFields(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("email", check_fields=False)
    @classmethod
    def lowercase_email(cls, v: str | None) -> str | None:
        return v.strip().lower() if v else v

    @field_validator(
        "event_title",
        "full_name",
        "company",
        "location",
        "address",
        "message",
        mode="before",
        check_fields=False,
    )
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip(v) if isinstance(v, str) else v

    @field_validator("phone", mode="before", check_fields=False)
    @classmethod
    def empty_phone_is_none(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class RegistrationCreate(_RegistrationFields):
    event_title: str = Field(..., min_length=1, max_length=200)
    full_name: str = Field(..., min_length=2, max_length=120)
    email: EmailStr
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    company: str | None = Field(None, max_length=160)
    location: str | None = Field(None, max_length=160)
    address: str | None = Field(None, max_length=240)
    message: str | None = Field(None, max_length=50000)
    consent: bool

    @field_validator("consent")
    @classmethod
    def consent_required(cls, v: bool) -> bool:
        if v is not True:
            raise ValueError("You must provide consent to continue")
        return v


class RegistrationUpdate(_RegistrationFields):
    event_title: str | None = Field(None, min_length=1, max_length=200)
    full_name: str | None = Field(None, min_length=2, max_length=120)
    email: EmailStr | None = None
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    company: str | None = Field(None, max_length=160)
    location: str | None = Field(None, max_length=160)
    address: str | None = Field(None, max_length=240)
    message: str | None = Field(None, max_length=50000)
    consent: bool | None = None
    email_sent: bool | None = None

    @field_validator("consent")
    @classmethod
    def consent_cannot_be_withdrawn(cls, v: bool | None) -> bool | None:
        if v is False:
            raise ValueError("You must agree to proceed")
        return v


class RegistrationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    event_key: str
    event_title: str
    full_name: str
    email: str
    phone: str | None
    company: str | None
    location: str | None
    address: str | None
    message: str | None
    consent: bool
    email_sent: bool
    submitted_at: datetime
    ip: str | None
    user_agent: str | None
    created_at: datetime
    updated_at: datetime


class RegistrationListResponse(BaseModel):
    items: list[RegistrationResponse]
    total: int


class RegistrationPageResponse(BaseModel):
    items: list[RegistrationResponse]
    total: int
    page: int
    page_size: int
    pages: int
