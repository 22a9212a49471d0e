"""Editor session endpoints.

One shared in-memory session, created from settings on first use.
"""

import asyncio
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from bezier_gap.config import settings
from bezier_gap.editor import EditorSession
from bezier_gap.render import render_curves_to_png
from bezier_gap.resampler import SamplingFrame
from bezier_gap.types import PointId, PointSlot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/editor")

_session: EditorSession | None = None


def get_editor_session() -> EditorSession:
    """Get the shared editor session, creating it on first use."""
    global _session
    if _session is None:
        _session = EditorSession(
            frame=SamplingFrame(width=settings.canvas_width, height=settings.canvas_height),
            padding=settings.padding,
            sample_count=settings.sample_count,
            point_radius=settings.point_radius,
            dense_steps=settings.dense_steps,
        )
    return _session


def reset_editor_session() -> None:
    """Drop the shared session. The next request builds a fresh one."""
    global _session
    _session = None


Session = Annotated[EditorSession, Depends(get_editor_session)]


class MoveRequest(BaseModel):
    """Request body for POST /editor/points/move. Coordinates are in frame space."""

    path: int = Field(default=0, ge=0)
    segment: int = Field(ge=0)
    slot: PointSlot
    x: float
    y: float


def _session_payload(session: EditorSession) -> dict[str, Any]:
    return {
        "mode": session.mode.value,
        "sample_count": session.sample_count,
        "description": session.to_description(),
        "rows": [row.model_dump() for row in session.coords],
    }


@router.get("/curve")
async def get_curve(session: Session) -> dict[str, Any]:
    """Current curve description and rows."""
    return _session_payload(session)


@router.put("/curve")
async def put_curve(session: Session, description: Any = Body(...)) -> dict[str, Any]:
    """Load a new curve (list) or curve pair ({"curve1", "curve2"})."""
    session.load(description)
    return _session_payload(session)


@router.post("/points/move")
async def move_point(request: MoveRequest, session: Session) -> dict[str, Any]:
    """Move one point; its siblings follow and the rows are recomputed."""
    point_id = PointId(request.segment, request.slot)
    try:
        session.point(request.path, point_id)
    except (IndexError, KeyError) as e:
        logger.info(f"Move rejected for path {request.path} point {point_id}")
        raise HTTPException(status_code=404, detail=f"No such point: {e}") from e

    session.move_point(request.path, point_id, request.x, request.y)
    return _session_payload(session)


@router.get("/coords")
async def get_coords(session: Session) -> dict[str, Any]:
    """Latest rows."""
    return {
        "sample_count": session.sample_count,
        "rows": [row.model_dump() for row in session.coords],
    }


@router.put("/sample_count/{count}")
async def set_sample_count(count: int, session: Session) -> dict[str, Any]:
    """Change the number of rows."""
    session.set_sample_count(count)
    return _session_payload(session)


@router.get("/preview.png")
async def preview(session: Session) -> Response:
    """Render the session's curves and gap lines to PNG."""
    png_bytes = await asyncio.to_thread(
        render_curves_to_png,
        session.paths,
        session.coords,
        session.frame,
        int(session.padding),
    )
    return Response(content=png_bytes, media_type="image/png")
