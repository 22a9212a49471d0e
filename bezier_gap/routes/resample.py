"""Stateless resampling endpoint."""

import logging
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from bezier_gap.config import settings
from bezier_gap.errors import MalformedCurveDescription
from bezier_gap.path import Path
from bezier_gap.resampler import Resampler, SamplingFrame
from bezier_gap.types import CurveDescription

logger = logging.getLogger(__name__)

router = APIRouter()


class ResampleRequest(BaseModel):
    """Request body for POST /resample.

    Send either `curve` (single-curve rows) or both `curve1` and `curve2`
    (gap rows).
    """

    curve: CurveDescription | None = None
    curve1: CurveDescription | None = None
    curve2: CurveDescription | None = None
    sample_count: int = Field(default_factory=lambda: settings.sample_count)
    width: float = Field(default_factory=lambda: settings.canvas_width, gt=0)
    height: float = Field(default_factory=lambda: settings.canvas_height, gt=0)


def _paths_from_request(request: ResampleRequest) -> list[Path]:
    if request.curve is not None:
        if request.curve1 is not None or request.curve2 is not None:
            raise MalformedCurveDescription("send either curve or curve1 + curve2, not both")
        return [Path.from_description(request.curve)]
    if request.curve1 is None or request.curve2 is None:
        raise MalformedCurveDescription("curve1 and curve2 must be sent together")
    return [Path.from_description(request.curve1), Path.from_description(request.curve2)]


@router.post("/resample")
async def resample(request: ResampleRequest) -> dict[str, Any]:
    """Resample one curve, or the gap profile of two curves.

    Returns rows normalized to the frame, with the mode that produced them.
    """
    paths = _paths_from_request(request)
    resampler = Resampler(
        SamplingFrame(width=request.width, height=request.height),
        dense_steps=settings.dense_steps,
    )
    rows = resampler.compute(paths, request.sample_count)
    mode = "single" if len(paths) == 1 else "pair"
    logger.info(f"Resampled {mode} curve", extra={"sample_count": request.sample_count})
    return {
        "mode": mode,
        "count": len(rows),
        "rows": [row.model_dump() for row in rows],
    }
