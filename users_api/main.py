"""Users API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a problem details response
    - Settings built once per app and attached to app.state (no ambient singleton)
    - Logging configured on startup via lifespan context manager

Run:
    uvicorn users_api.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import users
from users_api.config import Settings, get_settings
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"{settings.service_name} started",
        extra={"service": settings.service_name},
    )
    yield
    logger.info(
        f"{settings.service_name} shutting down",
        extra={"service": settings.service_name},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around one Settings instance."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.service_name,
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(users.router)
    register_error_handlers(app)
    return app


app = create_app()
