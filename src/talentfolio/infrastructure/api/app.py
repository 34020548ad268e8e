"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
and lifecycle handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from talentfolio.core.config import get_settings
from talentfolio.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
)
from talentfolio.domain.exceptions import TalentfolioError
from talentfolio.infrastructure.api.errors import error_response, status_for
from talentfolio.infrastructure.persistence.database import (
    close_database,
    get_db_manager,
    init_database,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Configures logging and the database on startup and releases the
    database engine on shutdown.
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting Talentfolio",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down Talentfolio")
    await close_database()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Invite-only talent portfolio service",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints."""

    @app.get("/health", tags=["health"])
    async def health_check():
        """Returns 200 while the process is serving. No dependency checks."""
        return {
            "status": "healthy",
            "service": "Talentfolio",
            "version": get_settings().app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Returns 200 once the database answers, 503 otherwise."""
        if await get_db_manager().check_connection():
            return {
                "status": "ready",
                "service": "Talentfolio",
                "version": get_settings().app_version,
                "database": "connected",
            }
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "service": "Talentfolio",
                "database": "disconnected",
            },
        )


def register_routes(app: FastAPI) -> None:
    """Register API routes under the versioned prefix."""
    from talentfolio.infrastructure.api.routes import (
        admin_invites_router,
        admin_photos_router,
        admin_router,
        auth_router,
        gallery_router,
        invites_router,
        profile_router,
        talents_router,
    )

    prefix = get_settings().api_prefix

    app.include_router(auth_router, prefix=f"{prefix}/auth", tags=["auth"])
    # More specific admin prefix first
    app.include_router(
        admin_invites_router, prefix=f"{prefix}/admin/invites", tags=["admin", "invites"]
    )
    app.include_router(
        admin_photos_router, prefix=f"{prefix}/admin/photos", tags=["admin", "photos"]
    )
    app.include_router(admin_router, prefix=f"{prefix}/admin", tags=["admin"])
    app.include_router(invites_router, prefix=f"{prefix}/invites", tags=["invites"])
    app.include_router(profile_router, prefix=f"{prefix}/profile", tags=["profile"])
    app.include_router(talents_router, prefix=f"{prefix}/talents", tags=["talents"])
    app.include_router(gallery_router, prefix=f"{prefix}/gallery", tags=["gallery"])


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(TalentfolioError)
    async def domain_exception_handler(request: Request, exc: TalentfolioError):
        log = logger.error if status_for(exc) >= 500 else logger.info
        log(
            "Request rejected",
            path=request.url.path,
            method=request.method,
            error=exc.code,
        )
        return error_response(exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_error",
                "message": str(exc) if get_settings().debug else "An unexpected error occurred",
            },
        )


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware."""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log each request and tag it with a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID") or new_correlation_id()
        bind_correlation_id(correlation_id)

        logger.info("Request started", method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


app = create_app()
