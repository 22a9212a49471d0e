"""Resampler output rows."""

from pydantic import BaseModel


class SampleRow(BaseModel):
    """One resampled point of a single curve, normalized to the frame."""

    x: float  # 0..1 across the frame width
    y: float  # 0..1 across the frame height


class GapRow(BaseModel):
    """One resampled column of a two-curve profile.

    gap is in frame units (y2 - y before normalization). scale carries the
    same value under the name downstream consumers use.
    """

    x: float
    y: float
    y2: float
    gap: float
    scale: float
