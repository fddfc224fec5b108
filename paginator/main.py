"""FastAPI application factory wired with the paginator's error handling."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, FastAPI

from .config import Settings, get_settings
from .errors import register_exception_handlers

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
    logging.getLogger().setLevel(getattr(logging, settings.log_level))


def create_app(*routers: APIRouter, settings: Optional[Settings] = None) -> FastAPI:
    """Create a FastAPI application serving the given routers.

    Paginator errors, request validation errors and unexpected exceptions
    are all answered with RFC 9457 problem details.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)

    # Register exception handlers
    register_exception_handlers(app)

    for router in routers:
        app.include_router(router)

    @app.get("/health", tags=["Health"])
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name
        }

    logger.info(f"Created {settings.app_name} with {len(routers)} routers")
    return app
