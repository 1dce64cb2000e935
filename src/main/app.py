"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It builds the dependency container, creates the FastAPI app and
includes the API routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.main.config import AppSettings, get_settings
from src.main.container import AppContainer, app_lifespan, build_container
from src.presentation.controllers import items_router, system_router
from src.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first - before configuration is loaded
configure_logging()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Records the startup time and runs the container's resource lifecycle
    around the application's lifetime.
    """
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up", title=app.title)

    async with app_lifespan(app.state.container):
        yield

    logger.info("Application shutting down", title=app.title)


def create_app(
    settings: Optional[AppSettings] = None,
    container: Optional[AppContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment when omitted.
        container: Pre-built container; built from ``settings`` when omitted.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = settings or get_settings()
    container = container or build_container(settings)

    app = FastAPI(
        title=settings.service.title,
        description=settings.service.description,
        version=settings.service.version,
        debug=settings.service.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = container
    app.state.started_at = None

    # Set up CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(system_router)
    app.include_router(items_router)

    return app


def create_default_app() -> FastAPI:
    """Build the application from environment settings, with logging applied."""
    settings = get_settings()
    update_logging_from_settings(settings)
    return create_app(settings)


app = create_default_app()
