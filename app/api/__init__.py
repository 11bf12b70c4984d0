# API endpoints and routers

from .convert_endpoints import router as convert_router
from .corrections_endpoints import router as corrections_router
from .health_endpoints import router as health_router

__all__ = [
    "convert_router",
    "corrections_router",
    "health_router",
]
