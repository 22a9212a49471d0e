"""FastAPI application."""

import logging
import traceback
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bezier_gap import __version__
from bezier_gap.config import settings
from bezier_gap.errors import CurveError
from bezier_gap.routes import create_api_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="bezier-gap",
    description="Bezier curve editing and gap-profile resampling",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(create_api_router())


@app.exception_handler(CurveError)
async def curve_error_handler(request: Request, exc: CurveError) -> JSONResponse:
    """Report malformed or degenerate curves as client errors."""
    logger.info(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


# Global exception handler to log all unhandled errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch all unhandled exceptions and log them with full traceback."""
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}\n{''.join(tb)}"
    )
    content: dict[str, Any] = {"detail": "Internal Server Error"}
    return JSONResponse(status_code=500, content=content)


def run() -> None:
    """Run the development server."""
    from bezier_gap.logging_config import setup_from_settings

    setup_from_settings()
    uvicorn.run(
        "bezier_gap.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.dev_mode,
    )


if __name__ == "__main__":
    run()
