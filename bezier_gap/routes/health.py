"""Health and version endpoints."""

import os

from fastapi import APIRouter

from bezier_gap import __version__

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/version")
async def version() -> dict[str, str | None]:
    """Version info endpoint."""
    return {
        "version": __version__,
        "commit": os.environ.get("APP_COMMIT"),
    }
