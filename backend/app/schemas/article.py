"""Pydantic schemas for articles."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

ArticleCategoryName = Literal[
    "Industry Insights",
    "Technical Guide",
    "Business Strategy",
    "AI Ethics",
    "Workplace Innovation",
    "Healthcare AI",
    "Leadership",
]
ArticleStatusName = Literal["draft", "published", "archived"]

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


def _clean_tags(tags: list[str] | None) -> list[str] | None:
    if tags is None:
        return None
    cleaned = [t.strip() for t in tags if t and t.strip()]
    if len(cleaned) > 8:
        raise ValueError("At most 8 tags are allowed")
    return cleaned


class ArticleCreate(BaseModel):
    """Schema for creating an article.

    slug, word_count and published_at are derived. read_time_minutes is
    estimated from the content unless given here.
    """

    title: str = Field(..., min_length=5, max_length=150)
    slug: str | None = Field(None, max_length=160, pattern=SLUG_PATTERN)
    summary: str = Field(..., min_length=30, max_length=300)
    content: str = Field(..., min_length=100)
    category: ArticleCategoryName
    tags: list[str] = Field(default_factory=list)
    author_name: str = Field(..., min_length=2, max_length=60)
    status: ArticleStatusName = "draft"
    is_featured: bool = False
    featured_badge_text: str = Field("Featured Article", max_length=40)
    read_time_minutes: int | None = None
    seo_title: str | None = Field(None, max_length=70)
    seo_description: str | None = Field(None, max_length=160)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        return _clean_tags(v) or []


class ArticleUpdate(BaseModel):
    """Partial update. Changing the title does not regenerate the slug."""

    title: str | None = Field(None, min_length=5, max_length=150)
    slug: str | None = Field(None, max_length=160, pattern=SLUG_PATTERN)
    summary: str | None = Field(None, min_length=30, max_length=300)
    content: str | None = Field(None, min_length=100)
    category: ArticleCategoryName | None = None
    tags: list[str] | None = None
    author_name: str | None = Field(None, min_length=2, max_length=60)
    status: ArticleStatusName | None = None
    is_featured: bool | None = None
    featured_badge_text: str | None = Field(None, max_length=40)
    read_time_minutes: int | None = None
    seo_title: str | None = Field(None, max_length=70)
    seo_description: str | None = Field(None, max_length=160)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str] | None) -> list[str] | None:
        return _clean_tags(v)


class ArticleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    slug: str
    summary: str
    content: str
    category: str
    tags: list[str]
    author_name: str
    status: str
    is_featured: bool
    featured_badge_text: str
    published_at: datetime | None
    read_time_minutes: int
    word_count: int
    views: int
    likes: int
    time_spent_seconds: int
    engaged_sessions: int
    last_engaged_at: datetime | None
    seo_title: str | None
    seo_description: str | None
    created_at: datetime
    updated_at: datetime


class ArticleListResponse(BaseModel):
    items: list[ArticleResponse]
    total: int
