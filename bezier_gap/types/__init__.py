"""Type definitions for bezier_gap.

This package contains the plain data types organized into focused modules:
- geometry: point roles, slots and states
- descriptions: serialized curve descriptions
- samples: resampler output rows
"""

from bezier_gap.types.descriptions import (
    Coordinate,
    CurveDescription,
    SegmentDescription,
    TwoCurveDescription,
    parse_curve_description,
    parse_two_curve_description,
)
from bezier_gap.types.geometry import (
    Axis,
    PointId,
    PointRole,
    PointSlot,
    PointState,
    clamp_value,
)
from bezier_gap.types.samples import GapRow, SampleRow

__all__ = [
    # Geometry
    "Axis",
    "PointId",
    "PointRole",
    "PointSlot",
    "PointState",
    "clamp_value",
    # Descriptions
    "Coordinate",
    "CurveDescription",
    "SegmentDescription",
    "TwoCurveDescription",
    "parse_curve_description",
    "parse_two_curve_description",
    # Samples
    "GapRow",
    "SampleRow",
]
