"""CMS Backend - FastAPI Application Factory."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import api_router
from app.api.health import router as health_router
from app.core import Database, settings, setup_logging
from app.core.exceptions import ServiceError
from app.core.logging import get_logger, request_context
from app.middleware import SecurityHeadersMiddleware
from app.services.token_blacklist import TokenBlacklistService

logger = get_logger("main")


def task_done_callback(task: asyncio.Task[None]) -> None:
    """Log unhandled exceptions from background tasks."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"Background task {task.get_name()} failed: {exc}")


def build_database() -> Database:
    return Database(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        connect_timeout=settings.db_connect_timeout,
        command_timeout=settings.db_command_timeout,
    )


async def sweep_token_blacklist(database: Database) -> int:
    """Delete expired blacklist entries once. Returns count removed."""
    async with database.session() as db:
        removed = await TokenBlacklistService(db).purge_expired()
        await db.commit()
    return removed


async def _token_blacklist_cleanup_loop(database: Database) -> None:
    """Periodically remove expired entries from the token blacklist."""
    while True:
        await asyncio.sleep(settings.blacklist_sweep_interval_seconds)
        try:
            await sweep_token_blacklist(database)
        except Exception:
            logger.exception("Error cleaning up token blacklist")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    setup_logging(
        level=settings.log_level,
        format_type="structured" if not settings.debug else "dev",
    )
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    database = build_database()
    await database.connect()
    app.state.database = database

    blacklist_task = asyncio.create_task(
        _token_blacklist_cleanup_loop(database), name="token-blacklist-sweep"
    )
    blacklist_task.add_done_callback(task_done_callback)

    yield

    # Shutdown
    logger.info("Shutting down...")
    blacklist_task.cancel()
    try:
        await blacklist_task
    except asyncio.CancelledError:
        pass
    await database.disconnect()


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Map domain errors raised by services to their HTTP status."""
    if exc.status_code >= 500:
        logger.error(
            f"Service error on {request.method} {request.url.path}: {exc.message}",
            extra=request_context(request, status_code=exc.status_code),
        )
    content: dict = {"detail": exc.message}
    if exc.errors:
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log and hide anything not mapped to a status code."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra=request_context(request, status_code=500),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Content management API for the AI solutions site",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    app.add_exception_handler(ServiceError, service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Security headers middleware
    app.add_middleware(SecurityHeadersMiddleware)

    # CORS middleware - MUST be outermost (added last in Starlette LIFO order)
    # so that CORS headers are present on ALL responses, including 401s.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "X-Request-ID",
        ],
    )

    # Include routers
    app.include_router(health_router)  # /health and /api/health
    app.include_router(api_router)  # Resources at root level (/admin, /articles, ...)

    # Root endpoint
    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
        }

    return app


# Application instance
app = create_app()
