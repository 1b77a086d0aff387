"""
Main Application - Main Layer

Builds the FastAPI application around the dependency container. Settings
are resolved once per app: either passed in by the caller or loaded from
the environment, and the same instance drives logging, the container
and the OpenAPI metadata.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gridcast.main.config import AppSettings, get_settings
from gridcast.main.container import app_lifespan, init_container
from gridcast.presentation.controllers import forecast_router, system_router
from gridcast.shared import configure_logging, get_logger, update_logging_from_settings

# Environment-only logging until settings are loaded
configure_logging()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open storage on startup, close it on shutdown."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.starting", environment=app.state.settings.environment.value)

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.stopped")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app with; loaded from the
            environment when omitted.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = settings or get_settings()
    update_logging_from_settings(settings)
    init_container(settings)

    app = FastAPI(
        title=settings.ge.title,
        description=settings.ge.description,
        version=settings.ge.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (system_router, forecast_router):
        app.include_router(router)

    return app


app = create_app()
