"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends
from typing import Dict, Any
import time
from datetime import datetime, timezone

from travel_lens.config.settings import Settings, get_settings
from travel_lens.core.error_handlers import error_handler

router = APIRouter(tags=["health"])

# Application start time for uptime calculation
_app_start_time = time.time()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Liveness plus the configuration switches that change behavior."""
    return {
        "status": "ok",
        "version": settings.app_version,
        "environment": settings.environment.value,
        "geocoding": "enabled" if settings.geocoding.enabled else "disabled",
        "uptime_seconds": round(time.time() - _app_start_time, 1),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "error_statistics": error_handler.get_error_statistics(),
    }
