"""Cubic bezier curve editing and gap-profile resampling.

Core entry points:
- load_path / Path: build and edit a multi-segment bezier curve
- Resampler: turn one curve, or an upper/lower pair, into N rows
- EditorSession: pointer-driven editing with resampling after every edit
"""

__version__ = "0.1.0"

from bezier_gap.editor import EditorMode, EditorSession
from bezier_gap.errors import (
    CurveError,
    DegenerateCurveError,
    InvalidSampleCount,
    MalformedCurveDescription,
)
from bezier_gap.path import DenseSamples, Path, load_curves, load_path
from bezier_gap.point import Point
from bezier_gap.resampler import Resampler, SamplingFrame
from bezier_gap.segment import Segment
from bezier_gap.types import GapRow, PointId, PointRole, PointSlot, PointState, SampleRow

__all__ = [
    "__version__",
    # Model
    "DenseSamples",
    "Path",
    "Point",
    "PointId",
    "PointRole",
    "PointSlot",
    "PointState",
    "Segment",
    "load_curves",
    "load_path",
    # Resampling
    "GapRow",
    "Resampler",
    "SampleRow",
    "SamplingFrame",
    # Editor
    "EditorMode",
    "EditorSession",
    # Errors
    "CurveError",
    "DegenerateCurveError",
    "InvalidSampleCount",
    "MalformedCurveDescription",
]
