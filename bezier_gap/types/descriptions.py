"""Serialized curve descriptions.

A single curve is an ordered list of segments::

    [{"pt": [x, y]}, {"cp1": [x, y], "cp2": [x, y], "pt": [x, y]}, ...]

The first segment is the start anchor only. Every later segment describes one
cubic arc from the previous anchor through cp1 and cp2 to its own pt.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, FiniteFloat, RootModel, ValidationError, model_validator

from bezier_gap.errors import MalformedCurveDescription

Coordinate = tuple[FiniteFloat, FiniteFloat]


class SegmentDescription(BaseModel):
    """One entry of a curve description."""

    pt: Coordinate
    cp1: Coordinate | None = None
    cp2: Coordinate | None = None

    @property
    def has_controls(self) -> bool:
        return self.cp1 is not None or self.cp2 is not None

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        """Serialize, leaving out absent control points by default."""
        kwargs.setdefault("exclude_none", True)
        return super().model_dump(**kwargs)


class CurveDescription(RootModel[list[SegmentDescription]]):
    """Ordered segment list for one multi-segment cubic curve."""

    @model_validator(mode="after")
    def _check_control_points(self) -> CurveDescription:
        segments = self.root
        if not segments:
            raise ValueError("curve needs at least one segment")
        if segments[0].has_controls:
            raise ValueError("first segment is the start anchor and takes no control points")
        for i, segment in enumerate(segments[1:], start=1):
            if segment.cp1 is None or segment.cp2 is None:
                raise ValueError(f"segment {i} needs both cp1 and cp2")
        return self

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> SegmentDescription:
        return self.root[index]


class TwoCurveDescription(BaseModel):
    """Upper and lower curve of a gap profile."""

    curve1: CurveDescription
    curve2: CurveDescription


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "curve"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def parse_curve_description(data: Any) -> CurveDescription:
    """Validate a single-curve description.

    Accepts a JSON string, plain python data, or an already validated
    CurveDescription.

    Raises:
        MalformedCurveDescription: if the description is invalid
    """
    if isinstance(data, CurveDescription):
        return data
    try:
        if isinstance(data, str | bytes):
            return CurveDescription.model_validate_json(data)
        return CurveDescription.model_validate(data)
    except ValidationError as e:
        raise MalformedCurveDescription(_format_validation_error(e)) from e


def parse_two_curve_description(data: Any) -> TwoCurveDescription:
    """Validate a two-curve description ({"curve1": ..., "curve2": ...}).

    Raises:
        MalformedCurveDescription: if the description is invalid
    """
    if isinstance(data, TwoCurveDescription):
        return data
    try:
        if isinstance(data, str | bytes):
            return TwoCurveDescription.model_validate_json(data)
        return TwoCurveDescription.model_validate(data)
    except ValidationError as e:
        raise MalformedCurveDescription(_format_validation_error(e)) from e
