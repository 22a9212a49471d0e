"""Multi-segment cubic bezier paths."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

from bezier_gap.bezier import cubic_bezier
from bezier_gap.errors import MalformedCurveDescription
from bezier_gap.point import DEFAULT_RADIUS, Point, PositionChangeHandler
from bezier_gap.segment import Segment, link_segments, propagate
from bezier_gap.types import (
    Axis,
    CurveDescription,
    PointId,
    PointSlot,
    TwoCurveDescription,
    parse_curve_description,
    parse_two_curve_description,
)

logger = logging.getLogger(__name__)

DEFAULT_DENSE_STEPS = 1000


class DenseSamples:
    """Finite, restartable view of a path as (x, y) samples.

    Iterating walks the path lazily: the start anchor, then step_count
    evaluations (t = 0, 1/step_count, ... < 1) of every arc, then the end
    anchor once. Iterating again starts over and sees the current geometry.
    """

    def __init__(self, path: Path, step_count: int = DEFAULT_DENSE_STEPS) -> None:
        if step_count < 1:
            raise ValueError(f"step_count must be >= 1, got {step_count}")
        self.path = path
        self.step_count = step_count

    def __iter__(self) -> Iterator[tuple[float, float]]:
        segments = self.path.segments
        yield segments[0].anchor.to_pair()
        for segment in segments[1:]:
            for i in range(self.step_count):
                yield self.path.point_at(segment.index, i / self.step_count)
        yield segments[-1].anchor.to_pair()

    def __len__(self) -> int:
        return (len(self.path.segments) - 1) * self.step_count + 2


class Path:
    """An ordered chain of segments forming one continuous bezier curve.

    Built from a curve description. Points are never added or removed after a
    load; reset() swaps the whole chain.

    Example:
        path = Path.from_description([
            {"pt": [0, 0]},
            {"cp1": [100, 0], "cp2": [100, 250], "pt": [300, 250]},
        ])
        path.move_point(PointId(1, PointSlot.PT), 310, 245)
        path.serialize()
    """

    def __init__(self, segments: list[Segment], point_radius: float = DEFAULT_RADIUS) -> None:
        if not segments:
            raise ValueError("path needs at least one segment")
        self.point_radius = point_radius
        self._segments: list[Segment] = []
        self._points: list[tuple[PointId, Point]] | None = None
        self._install(segments)

    # ---- construction -------------------------------------------------------
    @classmethod
    def from_description(cls, description: Any, point_radius: float = DEFAULT_RADIUS) -> Path:
        """Build a path from a JSON string, plain data or CurveDescription.

        Raises:
            MalformedCurveDescription: if the description is invalid
        """
        segments = cls._build_segments(parse_curve_description(description), point_radius)
        return cls(segments, point_radius=point_radius)

    deserialize = from_description

    @staticmethod
    def _build_segments(description: CurveDescription, point_radius: float) -> list[Segment]:
        return [
            Segment.from_description(i, entry, radius=point_radius)
            for i, entry in enumerate(description.root)
        ]

    def _install(self, segments: list[Segment]) -> None:
        link_segments(segments)
        self._segments = segments
        self._points = None
        for point_id, point in self.all_points():
            point.on_position_change = self._make_handler(point_id)

    def _make_handler(self, point_id: PointId) -> PositionChangeHandler:
        def handler(dx: float, dy: float) -> None:
            self.propagate_move(point_id, dx, dy)

        return handler

    def reset(self, description: Any) -> None:
        """Replace every segment with a new description.

        The new chain is fully built before the old one is dropped, so a
        malformed description leaves the path untouched.
        """
        segments = self._build_segments(parse_curve_description(description), self.point_radius)
        self._install(segments)
        logger.debug(f"Path reset with {len(segments)} segments")

    # ---- structure ----------------------------------------------------------
    @property
    def segments(self) -> list[Segment]:
        return self._segments

    @property
    def head(self) -> Segment:
        return self._segments[0]

    @property
    def tail(self) -> Segment:
        return self._segments[-1]

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __repr__(self) -> str:
        return f"Path(segments={len(self._segments)})"

    def all_points(self) -> list[tuple[PointId, Point]]:
        """Every point with its id, ordered by segment (anchor, cp1, cp2).

        Cached until the next reset.
        """
        if self._points is None:
            self._points = [
                (PointId(segment.index, slot), point)
                for segment in self._segments
                for slot, point in segment.slots()
            ]
        return self._points

    def point(self, point_id: PointId) -> Point:
        return self._segments[point_id.segment].point(PointSlot(point_id.slot))

    def point_id(self, point: Point) -> PointId | None:
        """Find the id of a point object belonging to this path."""
        for point_id, candidate in self.all_points():
            if candidate is point:
                return point_id
        return None

    def hit_test(self, x: float, y: float) -> PointId | None:
        """First point whose hit radius contains (x, y)."""
        for point_id, point in self.all_points():
            if point.collides(x, y):
                return point_id
        return None

    def is_endpoint(self, point_id: PointId) -> bool:
        """Check if the id is the start or end anchor."""
        return point_id.slot == PointSlot.PT and point_id.segment in (0, len(self._segments) - 1)

    # ---- editing ------------------------------------------------------------
    def propagate_move(self, point_id: PointId, dx: float, dy: float) -> None:
        """Keep neighbouring arcs smooth after the point moved by (dx, dy)."""
        propagate(self._segments, PointId(point_id.segment, PointSlot(point_id.slot)), dx, dy)

    def move_point(self, point_id: PointId, x: float, y: float) -> None:
        """Move a point to (x, y), propagating to its siblings."""
        self.point(point_id).set_position(x, y)

    # ---- evaluation ---------------------------------------------------------
    def evaluate(self, index: int, t: float, axis: Axis | str) -> float:
        """Evaluate one axis of the arc ending at segment `index`.

        Raises:
            ValueError: for the first segment, which has no arc
        """
        segment = self._segments[index]
        if segment.prev is None or segment.cp1 is None or segment.cp2 is None:
            raise ValueError(f"segment {index} is the start anchor and has no arc")
        key = Axis(axis).value
        start = self._segments[segment.prev].anchor
        return cubic_bezier(
            getattr(start, key),
            getattr(segment.cp1, key),
            getattr(segment.cp2, key),
            getattr(segment.anchor, key),
            t,
        )

    def point_at(self, index: int, t: float) -> tuple[float, float]:
        return (self.evaluate(index, t, Axis.X), self.evaluate(index, t, Axis.Y))

    def sample_dense(self, step_count: int = DEFAULT_DENSE_STEPS) -> DenseSamples:
        return DenseSamples(self, step_count)

    def x_extent(self) -> tuple[float, float]:
        """Smallest and largest anchor x."""
        xs = [segment.anchor.x for segment in self._segments]
        return (min(xs), max(xs))

    # ---- serialization ------------------------------------------------------
    def serialize(self) -> list[dict[str, Any]]:
        return [segment.to_description() for segment in self._segments]

    def to_json(self) -> str:
        return json.dumps(self.serialize())

    def to_svg_d(self) -> str:
        """SVG path 'd' attribute for this curve."""
        head = self.head.anchor
        d_parts = [f"M {head.x} {head.y}"]
        for segment in self._segments[1:]:
            if segment.cp1 is None or segment.cp2 is None:
                continue
            d_parts.append(
                f"C {segment.cp1.x} {segment.cp1.y} "
                f"{segment.cp2.x} {segment.cp2.y} "
                f"{segment.anchor.x} {segment.anchor.y}"
            )
        return " ".join(d_parts)


def load_path(description: Any, point_radius: float = DEFAULT_RADIUS) -> Path:
    """Build a path from a curve description.

    Raises:
        MalformedCurveDescription: if the description is invalid
    """
    return Path.from_description(description, point_radius=point_radius)


def load_curves(description: Any, point_radius: float = DEFAULT_RADIUS) -> list[Path]:
    """Build one path from a curve list, or two from {"curve1", "curve2"}.

    Raises:
        MalformedCurveDescription: if the description is invalid
    """
    if isinstance(description, str | bytes):
        try:
            description = json.loads(description)
        except json.JSONDecodeError as e:
            raise MalformedCurveDescription(f"invalid JSON: {e}") from e

    if isinstance(description, dict | TwoCurveDescription):
        pair = parse_two_curve_description(description)
        return [
            Path.from_description(pair.curve1, point_radius=point_radius),
            Path.from_description(pair.curve2, point_radius=point_radius),
        ]
    return [Path.from_description(description, point_radius=point_radius)]
