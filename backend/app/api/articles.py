"""Article API endpoints.

Reading and engagement counters (view/like/unlike) are public; writes
require an admin session.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_admin
from app.core import get_db
from app.models.article import Article
from app.schemas.article import (
    ArticleCategoryName,
    ArticleCreate,
    ArticleListResponse,
    ArticleResponse,
    ArticleUpdate,
)
from app.schemas.common import MessageResponse
from app.services.article import ArticleService

router = APIRouter(prefix="/articles", tags=["articles"])


def get_article_service(db: AsyncSession = Depends(get_db)) -> ArticleService:
    """Dependency to get article service."""
    return ArticleService(db)


def _list_response(articles: list[Article]) -> ArticleListResponse:
    return ArticleListResponse(
        items=[ArticleResponse.model_validate(a) for a in articles],
        total=len(articles),
    )


@router.post(
    "/create",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create an article. Returns 409 if the slug is taken."""
    return ArticleResponse.model_validate(await service.create(data))


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    """All articles regardless of status, latest published first."""
    return _list_response(await service.list())


@router.get("/published", response_model=ArticleListResponse)
async def published_articles(
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    return _list_response(await service.published())


@router.get("/featured", response_model=ArticleListResponse)
async def featured_articles(
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    return _list_response(await service.featured())


@router.get("/recent", response_model=ArticleListResponse)
async def recent_articles(
    limit: int = Query(5, ge=1, le=100),
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    return _list_response(await service.recent(limit))


@router.get("/search", response_model=ArticleListResponse)
async def search_articles(
    q: str = Query(..., min_length=1, max_length=200),
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    return _list_response(await service.search(q))


@router.get("/category/{category}", response_model=ArticleListResponse)
async def articles_by_category(
    category: ArticleCategoryName,
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    return _list_response(await service.by_category(category))


@router.get("/slug/{slug}", response_model=ArticleResponse)
async def get_article_by_slug(
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    return ArticleResponse.model_validate(await service.get_by_slug(slug))


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: UUID,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    return ArticleResponse.model_validate(await service.get(article_id))


@router.put(
    "/{article_id}",
    response_model=ArticleResponse,
    dependencies=[Depends(get_current_admin)],
)
async def update_article(
    article_id: UUID,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an article.

    Changing content re-derives word count and read time; publishing for
    the first time stamps published_at.
    """
    return ArticleResponse.model_validate(await service.update(article_id, data))


@router.delete(
    "/{article_id}",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_admin)],
)
async def delete_article(
    article_id: UUID,
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse:
    await service.delete(article_id)
    return MessageResponse(message="Article deleted")


@router.post("/{article_id}/view", response_model=ArticleResponse)
async def record_article_view(
    article_id: UUID,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    return ArticleResponse.model_validate(await service.record_view(article_id))


@router.post("/{article_id}/like", response_model=ArticleResponse)
async def like_article(
    article_id: UUID,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    return ArticleResponse.model_validate(await service.like(article_id))


@router.post("/{article_id}/unlike", response_model=ArticleResponse)
async def unlike_article(
    article_id: UUID,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    return ArticleResponse.model_validate(await service.unlike(article_id))
