"""Movable points of a bezier path."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field

from bezier_gap.bezier import distance
from bezier_gap.types import PointRole, PointState

# Called with the (dx, dy) of a non-silent position change
PositionChangeHandler = Callable[[float, float], None]

DEFAULT_RADIUS = 5.0


def _check_finite(*values: float) -> None:
    if not all(math.isfinite(v) for v in values):
        raise ValueError(f"point coordinates must be finite, got {values}")


@dataclass(eq=False)
class Point:
    """A 2D location with a role and an optional change handler.

    Points are owned by their segment. The handler is injected by the owning
    path and runs the smoothness propagation for this point.

    Example:
        p = Point(0.0, 0.0)
        p.set_position(10.0, 5.0)  # fires on_position_change(10.0, 5.0)
        p.set_offset(1.0, 1.0)  # silent
    """

    x: float
    y: float
    role: PointRole = PointRole.ANCHOR
    radius: float = DEFAULT_RADIUS
    state: PointState = PointState.BASE
    on_position_change: PositionChangeHandler | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        _check_finite(self.x, self.y)

    @property
    def is_control(self) -> bool:
        return self.role == PointRole.CONTROL

    def set_offset(self, dx: float, dy: float) -> None:
        """Translate by (dx, dy). Never notifies."""
        _check_finite(self.x + dx, self.y + dy)
        self.x += dx
        self.y += dy

    def set_position(self, x: float, y: float, silent: bool = False) -> None:
        """Move to (x, y) and notify the handler with the applied delta.

        Args:
            x: New x coordinate
            y: New y coordinate
            silent: Skip the change handler
        """
        _check_finite(x, y)
        dx = x - self.x
        dy = y - self.y
        self.x = float(x)
        self.y = float(y)

        if not silent and self.on_position_change is not None:
            self.on_position_change(dx, dy)

    def set_state(self, state: PointState) -> Point:
        self.state = state
        return self

    def distance_to(self, x: float, y: float) -> float:
        """Euclidean distance from this point to (x, y)."""
        return distance(self.x, self.y, x, y)

    def collides(self, x: float, y: float) -> bool:
        """Check if (x, y) is within the hit radius."""
        return self.distance_to(x, y) <= self.radius

    def to_pair(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_list(self) -> list[float]:
        return [self.x, self.y]
