"""Pydantic schemas for projects, plus the card vocabulary shared with solutions."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

IconName = Literal["Brain", "Zap", "MessageSquare", "Lightbulb", "Cog", "Shield", "Globe", "Users"]
BadgeName = Literal["", "Popular", "Featured", "New", "Enterprise"]
ColorName = Literal["primary", "secondary", "accent"]

DurationName = Literal[
    "1 Month",
    "2 Month",
    "3 Month",
    "4 Month",
    "5 Month",
    "6 Month",
    "7 Month",
    "8 Month",
    "9 Month",
    "10 Month",
    "11 Month",
    "1 Year",
    "1 and Half Year",
    "2 Years",
]
TEAM_SIZE_PATTERN = r"^([1-9]|1[0-9]|20) specialists$"
ProcessName = Literal["Completed", "Ongoing"]


class VisibilityUpdate(BaseModel):
    """Show or hide a card on the public site."""

    is_active: bool = Field(..., validation_alias=AliasChoices("is_active", "isActive"))


class ProjectCreate(BaseModel):
    icon: IconName
    company_name: str = Field(..., min_length=2, max_length=300)
    title: str = Field(..., min_length=2, max_length=200)
    description: str = Field(..., min_length=10, max_length=2000)
    duration: DurationName
    team_size: str = Field(..., pattern=TEAM_SIZE_PATTERN)
    key_results: list[str] = Field(default_factory=list)
    technologies_used: list[str] = Field(default_factory=list)
    badge: BadgeName = ""
    color: ColorName = "primary"
    process: ProcessName = "Completed"
    dates: list[str] = Field(default_factory=list)
    is_active: bool = False


class ProjectUpdate(BaseModel):
    icon: IconName | None = None
    company_name: str | None = Field(None, min_length=2, max_length=300)
    title: str | None = Field(None, min_length=2, max_length=200)
    description: str | None = Field(None, min_length=10, max_length=2000)
    duration: DurationName | None = None
    team_size: str | None = Field(None, pattern=TEAM_SIZE_PATTERN)
    key_results: list[str] | None = None
    technologies_used: list[str] | None = None
    badge: BadgeName | None = None
    color: ColorName | None = None
    process: ProcessName | None = None
    dates: list[str] | None = None
    is_active: bool | None = None


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    icon: str
    company_name: str
    title: str
    description: str
    duration: str
    team_size: str
    key_results: list[str]
    technologies_used: list[str]
    badge: str
    color: str
    process: str
    dates: list[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ProjectListResponse(BaseModel):
    items: list[ProjectResponse]
    total: int
