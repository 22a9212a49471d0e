"""Route modules for the bezier_gap API."""

from fastapi import APIRouter

from .editor import router as editor_router
from .health import router as health_router
from .resample import router as resample_router


def create_api_router() -> APIRouter:
    """Create aggregated router with all API routes."""
    api_router = APIRouter()

    api_router.include_router(health_router)
    api_router.include_router(resample_router)
    api_router.include_router(editor_router)

    return api_router


__all__ = ["create_api_router"]
