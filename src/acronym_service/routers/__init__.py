"""FastAPI routers for API endpoints."""

from .functions import router as functions_router
from .health import router as health_router

__all__ = [
    "functions_router",
    "health_router",
]
