"""Pydantic schemas for admin authentication API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator


class AdminCreateRequest(BaseModel):
    """Request to create an admin account."""

    username: str = Field(
        ...,
        min_length=3,
        max_length=20,
        description="Username (3-20 chars)",
    )
    email: EmailStr
    password: str = Field(
        ...,
        min_length=6,
        max_length=100,
        description="Password (6-100 chars)",
    )

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Username must be at least 3 characters")
        return v

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class LoginRequest(BaseModel):
    """Request for login by username or email."""

    username: str | None = Field(None, min_length=1, max_length=20)
    email: EmailStr | None = None
    password: str = Field(..., min_length=6, max_length=100)

    @model_validator(mode="after")
    def require_identifier(self) -> "LoginRequest":
        if not self.username and not self.email:
            raise ValueError("Please supply either an email address or a username")
        return self


class AdminResponse(BaseModel):
    """Admin account as shown to clients (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: str
    last_login_at: datetime | None
    created_at: datetime


class AdminCreateResponse(BaseModel):
    """Response after creating an admin."""

    message: str
    admin: AdminResponse


class LoginResponse(BaseModel):
    """Response with the session token."""

    token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Token expiry in seconds")
    admin: AdminResponse


class ProfileResponse(BaseModel):
    """Response for the current admin."""

    admin: AdminResponse
