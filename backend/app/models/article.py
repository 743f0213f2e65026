"""Article model - long-form posts with derived slug and read-time fields."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Enum, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel

ARTICLE_CATEGORIES = (
    "Industry Insights",
    "Technical Guide",
    "Business Strategy",
    "AI Ethics",
    "Workplace Innovation",
    "Healthcare AI",
    "Leadership",
)

ARTICLE_STATUSES = ("draft", "published", "archived")

ArticleCategory = Enum(*ARTICLE_CATEGORIES, name="article_category", create_constraint=True)
ArticleStatus = Enum(*ARTICLE_STATUSES, name="article_status", create_constraint=True)


class Article(BaseModel):
    """Article.

    slug, word_count, read_time_minutes and published_at are written by
    ArticleService through app.services.derived_fields, never by callers
    directly (read_time_minutes may be overridden explicitly).
    """

    __tablename__ = "articles"

    __table_args__ = (
        Index("ix_articles_category_status_published", "category", "status", "published_at"),
    )

    title: Mapped[str] = mapped_column(String(150), nullable=False)
    slug: Mapped[str] = mapped_column(String(160), nullable=False, unique=True, index=True)
    summary: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    category: Mapped[str] = mapped_column(ArticleCategory, nullable=False, index=True)
    tags: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)

    author_name: Mapped[str] = mapped_column(String(60), nullable=False)

    status: Mapped[str] = mapped_column(ArticleStatus, nullable=False, default="draft", index=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    featured_badge_text: Mapped[str] = mapped_column(
        String(40), nullable=False, default="Featured Article"
    )
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    read_time_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    word_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Engagement counters
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    time_spent_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    engaged_sessions: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_engaged_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    seo_title: Mapped[str | None] = mapped_column(String(70), nullable=True)
    seo_description: Mapped[str | None] = mapped_column(String(160), nullable=True)

    def __repr__(self) -> str:
        return f"<Article {self.slug!r} ({self.status})>"
