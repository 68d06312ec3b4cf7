"""API routers package."""

from quote_proxy.api.routers.health import router as health_router
from quote_proxy.api.routers.quote import router as quote_router

__all__ = [
    "health_router",
    "quote_router",
]
