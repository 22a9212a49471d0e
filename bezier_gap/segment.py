"""Path segments and the smoothness propagation rule.

A path is stored as an ordered list of segments. Neighbours are referenced by
index (prev/next), never by object, so the list is the only owner.

Segment 0 is the start anchor and has no control points. Segment i > 0 is the
cubic arc (segments[i-1].anchor, cp1, cp2, anchor).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from bezier_gap.point import DEFAULT_RADIUS, Point
from bezier_gap.types import PointId, PointRole, PointSlot, SegmentDescription


@dataclass(eq=False)
class Segment:
    """One anchor plus the two control points of the arc arriving at it."""

    index: int
    anchor: Point
    cp1: Point | None = None
    cp2: Point | None = None
    prev: int | None = None
    next: int | None = None

    @classmethod
    def from_description(
        cls, index: int, description: SegmentDescription, radius: float = DEFAULT_RADIUS
    ) -> Segment:
        anchor = Point(*description.pt, role=PointRole.ANCHOR, radius=radius)
        cp1 = cp2 = None
        if description.cp1 is not None and description.cp2 is not None:
            cp1 = Point(*description.cp1, role=PointRole.CONTROL, radius=radius)
            cp2 = Point(*description.cp2, role=PointRole.CONTROL, radius=radius)
        return cls(index=index, anchor=anchor, cp1=cp1, cp2=cp2)

    @property
    def is_first(self) -> bool:
        return self.prev is None

    @property
    def is_last(self) -> bool:
        return self.next is None

    @property
    def has_arc(self) -> bool:
        return self.cp1 is not None and self.cp2 is not None

    def point(self, slot: PointSlot) -> Point:
        """Get the point in a slot.

        Raises:
            KeyError: if the slot is empty (control slots of the first segment)
        """
        match slot:
            case PointSlot.PT:
                point = self.anchor
            case PointSlot.CP1:
                point = self.cp1
            case PointSlot.CP2:
                point = self.cp2
        if point is None:
            raise KeyError(f"segment {self.index} has no {slot.value}")
        return point

    def slots(self) -> list[tuple[PointSlot, Point]]:
        """Occupied slots in hit-test order: anchor, cp1, cp2."""
        out = [(PointSlot.PT, self.anchor)]
        if self.cp1 is not None and self.cp2 is not None:
            out.append((PointSlot.CP1, self.cp1))
            out.append((PointSlot.CP2, self.cp2))
        return out

    def to_description(self) -> dict[str, Any]:
        out: dict[str, Any] = {"pt": self.anchor.to_list()}
        if not self.is_first and self.cp1 is not None and self.cp2 is not None:
            out["cp1"] = self.cp1.to_list()
            out["cp2"] = self.cp2.to_list()
        return out


def link_segments(segments: Sequence[Segment]) -> None:
    """Set prev/next indices in list order."""
    for i, segment in enumerate(segments):
        segment.index = i
        segment.prev = i - 1 if i > 0 else None
        segment.next = i + 1 if i < len(segments) - 1 else None


def propagate(segments: Sequence[Segment], point_id: PointId, dx: float, dy: float) -> None:
    """Adjust sibling control points after a point moved by (dx, dy).

    - anchor: its own cp2 and the next segment's cp1 follow it
    - cp1: the previous segment's cp2 mirrors it, unless the previous
      segment is the start anchor
    - cp2: the next segment's cp1 mirrors it

    Siblings move with set_offset, so no handler runs again.
    """
    segment = segments[point_id.segment]
    following = segments[segment.next] if segment.next is not None else None

    match point_id.slot:
        case PointSlot.PT:
            if not segment.is_first and segment.cp2 is not None:
                segment.cp2.set_offset(dx, dy)
            if following is not None and following.cp1 is not None:
                following.cp1.set_offset(dx, dy)

        case PointSlot.CP1:
            if segment.prev is None:
                return
            previous = segments[segment.prev]
            if not previous.is_first and previous.cp2 is not None:
                previous.cp2.set_offset(-dx, -dy)

        case PointSlot.CP2:
            if following is not None and following.cp1 is not None:
                following.cp1.set_offset(-dx, -dy)
