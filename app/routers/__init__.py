"""API routers."""

from .health import router as health_router
from .nasa import router as nasa_router
from .explain import router as explain_router

__all__ = [
    "health_router",
    "nasa_router",
    "explain_router",
]
