"""Health check endpoints.

Served at both ``/health`` and ``/api/health`` so container probes and the
client's API base URL can use the same check without authentication.
"""

from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel

from app.core import get_database, settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    database: str


async def _health(request: Request, response: Response) -> HealthResponse:
    db_healthy = await get_database(request).ping()

    # Set appropriate status code for container orchestration
    if not db_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if db_healthy else "unhealthy",
        version=settings.app_version,
        database="connected" if db_healthy else "disconnected",
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        status.HTTP_200_OK: {"description": "Service is healthy"},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"description": "Service is unhealthy"},
    },
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    """
    Health check endpoint.

    Returns 503 if the database is unavailable.
    """
    return await _health(request, response)


@router.get(
    "/api/health",
    response_model=HealthResponse,
    include_in_schema=False,
)
async def api_health_check(request: Request, response: Response) -> HealthResponse:
    return await _health(request, response)
