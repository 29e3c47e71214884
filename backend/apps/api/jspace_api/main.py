"""
J/Space API - FastAPI application entry point.

This module initializes the FastAPI application and configures
middleware, routers, and lifecycle events.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jspace_core import get_logger, init_logging

from .config import settings
from .routers import projects, tasks

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle manager.

    Handles startup and shutdown events for the application.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    from jspace_database.session import close_database, init_database

    init_logging(settings.log_level, settings.log_format)
    logger.info("Starting J/Space API", extra={"version": settings.version})
    init_database(settings.database_url, echo=settings.debug)

    yield

    await close_database()
    logger.info("Shutting down J/Space API")


def create_app() -> FastAPI:
    """
    Build a new application instance.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title=settings.app_name,
        description="J/Space - Trilingual project and task management API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    app.include_router(projects.router, prefix="/api/projects", tags=["Projects"])
    app.include_router(tasks.router, prefix="/api/tasks", tags=["Tasks"])

    @app.get("/api/health")
    async def health_check() -> dict[str, str]:
        """
        Health check endpoint.

        Returns:
            Dictionary containing service status and version.
        """
        return {"status": "healthy", "version": settings.version}

    return app


app = create_app()
