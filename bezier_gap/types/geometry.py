"""Core geometry types."""

from enum import Enum
from typing import NamedTuple


class PointRole(str, Enum):
    """Role of a point within a path."""

    ANCHOR = "anchor"  # On the curve
    CONTROL = "control"  # Shapes the curve, not on it


class PointState(str, Enum):
    """Visual state of a point. Owned by the editor."""

    BASE = "base"
    HOVER = "hover"
    ACTIVE = "active"


class PointSlot(str, Enum):
    """Where a point sits in its segment.

    Values match the keys of the serialized segment description:
    - PT: the segment's anchor
    - CP1: control point leaving the previous anchor (incoming arc control)
    - CP2: control point arriving at this segment's anchor
    """

    PT = "pt"
    CP1 = "cp1"
    CP2 = "cp2"


class PointId(NamedTuple):
    """Address of a point inside a path."""

    segment: int
    slot: PointSlot


class Axis(str, Enum):
    """Coordinate axis."""

    X = "x"
    Y = "y"


def clamp_value(value: float, low: float, high: float) -> float:
    """Clamp a value to a range [low, high]."""
    return max(low, min(high, value))
