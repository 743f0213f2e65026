"""Article service - articles with derived slug, read time and publish date."""

import builtins
import logging
from uuid import UUID

from sqlalchemy import case, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core import settings
from app.core.exceptions import ConflictError, InvalidInputError, NotFoundError
from app.models.article import Article
from app.models.base import utc_now
from app.schemas.article import ArticleCreate, ArticleUpdate
from app.services.derived_fields import apply_article_fields

logger = logging.getLogger(__name__)

_LATEST_PUBLISHED = (
    Article.published_at.desc().nulls_last(),
    Article.created_at.desc(),
    Article.id.desc(),
)


class ArticleService:
    """Service for managing articles."""

    def __init__(self, db: AsyncSession, words_per_minute: int | None = None):
        self.db = db
        self.words_per_minute = words_per_minute or settings.read_words_per_minute

    async def create(self, data: ArticleCreate) -> Article:
        fields = apply_article_fields(
            None, data.model_dump(), utc_now(), self.words_per_minute
        )
        if not fields["slug"].strip("-"):
            raise InvalidInputError("Title does not produce a usable slug")
        await self._ensure_slug_free(fields["slug"])

        article = Article(**fields)
        self.db.add(article)
        await self._flush_unique()
        await self.db.refresh(article)
        logger.info(f"Created article {article.slug} ({article.status})")
        return article

    async def get(self, article_id: UUID) -> Article:
        article = await self.db.get(Article, article_id)
        if article is None:
            raise NotFoundError("Article not found")
        return article

    async def get_by_slug(self, slug: str) -> Article:
        result = await self.db.execute(select(Article).where(Article.slug == slug))
        article = result.scalar_one_or_none()
        if article is None:
            raise NotFoundError("Article not found")
        return article

    async def list(self) -> builtins.list[Article]:
        result = await self.db.execute(select(Article).order_by(*_LATEST_PUBLISHED))
        return list(result.scalars().all())

    async def published(self) -> builtins.list[Article]:
        result = await self.db.execute(
            select(Article).where(Article.status == "published").order_by(*_LATEST_PUBLISHED)
        )
        return list(result.scalars().all())

    async def featured(self) -> builtins.list[Article]:
        result = await self.db.execute(
            select(Article)
            .where(Article.status == "published", Article.is_featured.is_(True))
            .order_by(*_LATEST_PUBLISHED)
        )
        return list(result.scalars().all())

    async def recent(self, limit: int = 5) -> builtins.list[Article]:
        result = await self.db.execute(
            select(Article)
            .where(Article.status == "published")
            .order_by(*_LATEST_PUBLISHED)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def by_category(self, category: str) -> builtins.list[Article]:
        result = await self.db.execute(
            select(Article)
            .where(Article.status == "published", Article.category == category)
            .order_by(*_LATEST_PUBLISHED)
        )
        return list(result.scalars().all())

    async def search(self, query: str) -> builtins.list[Article]:
        """Published articles whose title, summary or content contain the query."""
        result = await self.db.execute(
            select(Article)
            .where(
                Article.status == "published",
                or_(
                    Article.title.icontains(query, autoescape=True),
                    Article.summary.icontains(query, autoescape=True),
                    Article.content.icontains(query, autoescape=True),
                ),
            )
            .order_by(*_LATEST_PUBLISHED)
        )
        return list(result.scalars().all())

    async def update(self, article_id: UUID, data: ArticleUpdate) -> Article:
        article = await self.get(article_id)
        # Explicit nulls only make sense for the optional SEO fields
        changes = {
            k: v
            for k, v in data.model_dump(exclude_unset=True).items()
            if v is not None or k in ("seo_title", "seo_description", "read_time_minutes")
        }

        fields = apply_article_fields(article, changes, utc_now(), self.words_per_minute)
        if "slug" in fields and fields["slug"] != article.slug:
            await self._ensure_slug_free(fields["slug"])

        for field, value in fields.items():
            setattr(article, field, value)
        await self._flush_unique()
        await self.db.refresh(article)
        return article

    async def delete(self, article_id: UUID) -> None:
        article = await self.get(article_id)
        await self.db.delete(article)
        await self.db.flush()

    async def record_view(self, article_id: UUID) -> Article:
        return await self._bump(article_id, views=Article.views + 1)

    async def like(self, article_id: UUID) -> Article:
        return await self._bump(article_id, likes=Article.likes + 1)

    async def unlike(self, article_id: UUID) -> Article:
        # Never below zero
        return await self._bump(
            article_id,
            likes=case((Article.likes > 0, Article.likes - 1), else_=0),
        )

    async def _bump(self, article_id: UUID, **values) -> Article:
        result = await self.db.execute(
            update(Article)
            .where(Article.id == article_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError("Article not found")
        article = await self.get(article_id)
        await self.db.refresh(article)
        return article

    async def _ensure_slug_free(self, slug: str) -> None:
        result = await self.db.execute(select(Article.id).where(Article.slug == slug))
        if result.first() is not None:
            raise ConflictError(f"An article with slug '{slug}' already exists")

    async def _flush_unique(self) -> None:
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            raise ConflictError("An article with this slug already exists") from e
