"""Headless editor session.

Holds the curve(s) being edited and turns pointer input into core calls:
screen coordinates are clamped to the frame, shifted by the padding, and
handed to Point.set_position. Every edit is followed by a resample, and the
new rows are pushed to listeners. Drawing is left to whoever renders.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from bezier_gap.errors import CurveError
from bezier_gap.path import DEFAULT_DENSE_STEPS, Path, load_curves
from bezier_gap.point import DEFAULT_RADIUS, Point
from bezier_gap.resampler import Resampler, SamplingFrame
from bezier_gap.types import (
    GapRow,
    PointId,
    PointState,
    SampleRow,
    clamp_value,
)

logger = logging.getLogger(__name__)

CoordsListener = Callable[[list[Any]], None]

DEFAULT_CURVE: list[dict[str, Any]] = [
    {"pt": [0, 0]},
    {"cp1": [100, 0], "cp2": [100, 250], "pt": [300, 250]},
    {"cp1": [500, 250], "cp2": [500, 500], "pt": [600, 500]},
]


class EditorMode(str, Enum):
    """Number of curves being edited."""

    SINGLE = "single"
    PAIR = "pair"


class EditorSession:
    """Interactive editing state for one curve or an upper/lower pair.

    Coordinates passed to pointer_* methods are in screen space (frame plus
    padding). move_point works directly in frame space.

    Example:
        session = EditorSession({"curve1": upper, "curve2": lower})
        session.pointer_move(340, 290)  # hover
        session.pointer_down()
        session.pointer_move(350, 280)  # drag, resample, notify
        session.pointer_up()
        session.coords
    """

    def __init__(
        self,
        description: Any = None,
        *,
        frame: SamplingFrame | None = None,
        padding: float = 40.0,
        sample_count: int = 8,
        point_radius: float = DEFAULT_RADIUS,
        dense_steps: int = DEFAULT_DENSE_STEPS,
        pin_endpoints: bool = True,
    ) -> None:
        self.frame = frame or SamplingFrame()
        self.padding = padding
        self.point_radius = point_radius
        self.pin_endpoints = pin_endpoints
        self.resampler = Resampler(self.frame, dense_steps=dense_steps)

        self.mode = EditorMode.SINGLE
        self.paths: list[Path] = []
        self.coords: list[SampleRow] | list[GapRow] = []
        self.down = False
        self.hover: tuple[int, PointId] | None = None
        self._sample_count = sample_count
        self._listeners: list[CoordsListener] = []

        self.load(DEFAULT_CURVE if description is None else description)

    # ---- loading ------------------------------------------------------------
    def load(self, description: Any) -> None:
        """Replace the edited curve(s).

        A list is a single curve; a mapping with curve1/curve2 is a pair.
        The new curves are built and resampled before anything is replaced,
        so a failing load leaves the session as it was.

        Raises:
            MalformedCurveDescription: if the description is invalid
            DegenerateCurveError: if the new curves cannot be resampled
        """
        paths = load_curves(description, point_radius=self.point_radius)
        mode = EditorMode.PAIR if len(paths) == 2 else EditorMode.SINGLE
        coords = self.resampler.compute(paths, self._sample_count)

        self.mode = mode
        self.paths = paths
        self.down = False
        self.hover = None
        self._set_coords(coords)
        logger.info(
            f"Loaded {mode.value} curve",
            extra={"segments": [len(p) for p in paths]},
        )

    reset = load

    def to_description(self, stringify: bool = False) -> Any:
        """Current curve(s) in the same shape load() accepts."""
        if self.mode == EditorMode.PAIR:
            out: Any = {"curve1": self.paths[0].serialize(), "curve2": self.paths[1].serialize()}
        else:
            out = self.paths[0].serialize()
        if stringify:
            return json.dumps(out)
        return out

    # ---- resampling ---------------------------------------------------------
    @property
    def sample_count(self) -> int:
        return self._sample_count

    def set_sample_count(self, sample_count: int) -> None:
        """Change the number of rows and resample.

        Raises:
            InvalidSampleCount: if sample_count < 2
        """
        coords = self.resampler.compute(self.paths, sample_count)
        self._sample_count = sample_count
        self._set_coords(coords)

    def refresh(self) -> None:
        """Resample the current curve(s) and notify listeners."""
        self._set_coords(self.resampler.compute(self.paths, self._sample_count))

    def add_listener(self, listener: CoordsListener) -> None:
        """Register a callback receiving the rows after every resample."""
        self._listeners.append(listener)

    def remove_listener(self, listener: CoordsListener) -> None:
        self._listeners.remove(listener)

    def _set_coords(self, coords: list[SampleRow] | list[GapRow]) -> None:
        self.coords = coords
        for listener in list(self._listeners):
            listener(coords)

    def coords_json(self) -> str:
        return json.dumps([row.model_dump() for row in self.coords])

    # ---- editing ------------------------------------------------------------
    def point(self, path_index: int, point_id: PointId) -> Point:
        return self.paths[path_index].point(point_id)

    def move_point(self, path_index: int, point_id: PointId, x: float, y: float) -> None:
        """Move a point in frame space, keeping it inside the frame.

        With pin_endpoints, the first anchor stays on the left edge and the
        last anchor on the right edge. If the edited curves cannot be
        resampled, every point of the path is put back and the rows stay as
        they were.

        Raises:
            DegenerateCurveError: if the edited curves cannot be resampled
        """
        path = self.paths[path_index]
        x = clamp_value(x, 0.0, self.frame.width)
        y = clamp_value(y, 0.0, self.frame.height)
        if self.pin_endpoints and path.is_endpoint(point_id):
            x = 0.0 if point_id.segment == 0 else self.frame.width

        saved = [(point, point.x, point.y) for _, point in path.all_points()]
        path.move_point(point_id, x, y)
        try:
            coords = self.resampler.compute(self.paths, self._sample_count)
        except CurveError:
            for point, old_x, old_y in saved:
                point.set_position(old_x, old_y, silent=True)
            logger.info(f"Move of {point_id} on path {path_index} rolled back")
            raise
        self._set_coords(coords)

    def hit_test(self, x: float, y: float) -> tuple[int, PointId] | None:
        """First point of any path under frame coordinate (x, y)."""
        for path_index, path in enumerate(self.paths):
            point_id = path.hit_test(x, y)
            if point_id is not None:
                return (path_index, point_id)
        return None

    def to_frame(self, sx: float, sy: float) -> tuple[float, float]:
        return (sx - self.padding, sy - self.padding)

    def pointer_move(self, sx: float, sy: float) -> None:
        """Drag the active point, or update hover when not dragging."""
        x, y = self.to_frame(sx, sy)
        if self.down and self.hover is not None:
            path_index, point_id = self.hover
            self.move_point(path_index, point_id, x, y)
            return

        hover = self.hit_test(x, y)
        if self.hover is not None and self.hover != hover:
            self.point(*self.hover).set_state(PointState.BASE)
        if hover is not None:
            self.point(*hover).set_state(PointState.HOVER)
        self.hover = hover

    def pointer_down(self) -> bool:
        """Start dragging the hovered point. Returns False if nothing is hovered."""
        if self.hover is None:
            return False
        self.down = True
        self.point(*self.hover).set_state(PointState.ACTIVE)
        return True

    def pointer_up(self) -> None:
        if self.down and self.hover is not None:
            self.point(*self.hover).set_state(PointState.HOVER)
        self.down = False
