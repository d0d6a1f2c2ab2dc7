# API endpoints and routers

from .ai_endpoints import router as ai_router
from .health_endpoints import router as health_router

__all__ = [
    "ai_router",
    "health_router",
]
