"""
FastAPI application setup.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from travel_lens.config import get_settings
from travel_lens.core.error_handlers import setup_error_handlers
from travel_lens.core.logging import configure_logging
from travel_lens.middleware import RequestContextMiddleware

# Get application settings
settings = get_settings()

configure_logging(settings.log_level.value, settings.log_format)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup configuration and shutdown."""
    logger.info(
        f"Starting {settings.app_name} v{settings.app_version} "
        f"on port {settings.port} ({settings.environment.value})"
    )
    if not settings.geocoding.enabled:
        logger.warning(
            "OpenCage API key not configured, locations will use placeholders. "
            "Set OPENCAGE_API_KEY to enable reverse geocoding."
        )

    yield

    logger.info("Shutting down application")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from travel_lens.api.ai_endpoints import router as ai_router
    from travel_lens.api.health_endpoints import router as health_router
    app.include_router(ai_router)
    app.include_router(health_router)

    return app


# Create application instance
app = create_app()
