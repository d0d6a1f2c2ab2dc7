"""
Dependency providers for FastAPI.

Services are built from settings on each request; tests replace them through
``app.dependency_overrides``.
"""

from fastapi import Depends, Request
import logging

from travel_lens.config.settings import Settings, get_settings
from travel_lens.services.location_service import LocationResolver
from travel_lens.services.ai_service import ModelGateway


logger = logging.getLogger(__name__)


def get_location_resolver(settings: Settings = Depends(get_settings)) -> LocationResolver:
    """Dependency provider for the reverse-geocoding resolver."""
    return LocationResolver(settings.geocoding)


def get_model_gateway(
    resolver: LocationResolver = Depends(get_location_resolver),
    settings: Settings = Depends(get_settings),
) -> ModelGateway:
    """Dependency provider for the model gateway."""
    return ModelGateway(resolver, settings.ai_provider)


def get_request_id(request: Request) -> str:
    """
    Get request ID from request state.

    Args:
        request: FastAPI request object

    Returns:
        str: Request ID
    """
    return getattr(request.state, 'request_id', 'unknown')
