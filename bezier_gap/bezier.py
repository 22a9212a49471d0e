"""Pure functions for cubic Bezier math.

Stateless helpers shared by the path model and the points. No side effects.
"""

import math


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two coordinates."""
    return math.hypot(x2 - x1, y2 - y1)


def cubic_bezier(p0: float, p1: float, p2: float, p3: float, t: float) -> float:
    """Evaluate one axis of a cubic bezier at t.

    B(t) = (1-t)^3 p0 + 3(1-t)^2 t p1 + 3(1-t) t^2 p2 + t^3 p3
    """
    one_minus_t = 1 - t
    return (
        one_minus_t**3 * p0
        + 3 * one_minus_t**2 * t * p1
        + 3 * one_minus_t * t**2 * p2
        + t**3 * p3
    )
