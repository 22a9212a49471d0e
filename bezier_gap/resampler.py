"""Evenly spaced and gap-weighted resampling of bezier paths.

Single curve: N rows at x = i*W/(N-1), y taken from the first dense sample at
or past each x (step lookup, no interpolation).

Two curves: rows start equally spaced, then the spacing is redistributed so
each step is proportional to the local gap between the curves. Wide gaps get
wide steps. When the gap is constant this reduces to equal spacing. The last
row is always placed on the right edge.
"""

from __future__ import annotations

import bisect
import logging
import math
from collections.abc import Callable, Sequence
from itertools import accumulate

from pydantic import BaseModel, PositiveFloat

from bezier_gap.errors import DegenerateCurveError, InvalidSampleCount
from bezier_gap.path import DEFAULT_DENSE_STEPS, Path
from bezier_gap.types import GapRow, SampleRow

logger = logging.getLogger(__name__)

# (x, y, y2, gap) in frame units
Column = tuple[float, float, float, float]


class SamplingFrame(BaseModel):
    """Frame the curves live in. Origin is (0, 0)."""

    width: PositiveFloat = 600.0
    height: PositiveFloat = 500.0


class DenseLookup:
    """Step-function y lookup over a path's dense samples.

    y_at(x) returns the y of the first sample whose x >= x. The running
    maximum of the sample xs is non-decreasing, and its first index >= x is
    the same as the first sample index >= x, so a bisect replaces the scan
    even for curves that double back.
    """

    def __init__(self, samples: Sequence[tuple[float, float]]) -> None:
        if not samples:
            raise DegenerateCurveError("curve has no samples")
        self.xs = [x for x, _ in samples]
        self.ys = [y for _, y in samples]
        self._running_max = list(accumulate(self.xs, max))

    @classmethod
    def from_path(cls, path: Path, step_count: int = DEFAULT_DENSE_STEPS) -> DenseLookup:
        lookup = cls(list(path.sample_dense(step_count)))
        if max(lookup.xs) == min(lookup.xs):
            raise DegenerateCurveError(f"curve has zero width (every sample at x={lookup.xs[0]})")
        return lookup

    def y_at(self, x: float) -> float:
        """y of the first sample at or past x; past the end, the last sample."""
        i = bisect.bisect_left(self._running_max, x)
        if i >= len(self.ys):
            return self.ys[-1]
        return self.ys[i]


def _check_sample_count(sample_count: int) -> None:
    if isinstance(sample_count, bool) or not isinstance(sample_count, int) or sample_count < 2:
        raise InvalidSampleCount(sample_count)


class Resampler:
    """Turn one path, or a pair of paths, into a fixed number of rows.

    Example:
        resampler = Resampler(SamplingFrame(width=600, height=500))
        rows = resampler.compute(path, 8)  # list[SampleRow]
        gap_rows = resampler.compute((upper, lower), 8)  # list[GapRow]
    """

    def __init__(
        self, frame: SamplingFrame | None = None, dense_steps: int = DEFAULT_DENSE_STEPS
    ) -> None:
        self.frame = frame or SamplingFrame()
        self.dense_steps = dense_steps

    def compute(
        self, paths: Path | Sequence[Path], sample_count: int
    ) -> list[SampleRow] | list[GapRow]:
        """Resample a single path or a (curve1, curve2) pair.

        Raises:
            InvalidSampleCount: if sample_count < 2
            DegenerateCurveError: if a curve has zero width, or the two
                curves have zero average gap
        """
        if isinstance(paths, Path):
            return self.compute_single(paths, sample_count)
        if len(paths) == 1:
            return self.compute_single(paths[0], sample_count)
        if len(paths) != 2:
            raise ValueError(f"expected one or two paths, got {len(paths)}")
        return self.compute_pair(paths[0], paths[1], sample_count)

    def equal_spacing(self, sample_count: int) -> list[float]:
        """x positions i*W/(N-1) for i < N-1, then exactly the right edge."""
        _check_sample_count(sample_count)
        spacing = self.frame.width / (sample_count - 1)
        return [spacing * i for i in range(sample_count - 1)] + [self.frame.width]

    def compute_single(self, path: Path, sample_count: int) -> list[SampleRow]:
        _check_sample_count(sample_count)
        lookup = DenseLookup.from_path(path, self.dense_steps)
        rows = [
            SampleRow(x=x / self.frame.width, y=lookup.y_at(x) / self.frame.height)
            for x in self.equal_spacing(sample_count)
        ]
        logger.debug(f"Resampled single curve into {len(rows)} rows")
        return rows

    def compute_pair(self, curve1: Path, curve2: Path, sample_count: int) -> list[GapRow]:
        _check_sample_count(sample_count)
        lookup1 = DenseLookup.from_path(curve1, self.dense_steps)
        lookup2 = DenseLookup.from_path(curve2, self.dense_steps)

        def column(x: float) -> Column:
            y = lookup1.y_at(x)
            y2 = lookup2.y_at(x)
            return (x, y, y2, y2 - y)

        columns = [column(x) for x in self.equal_spacing(sample_count)]
        columns = self._fix_spacing(columns, column)

        rows = [self._gap_row(*c) for c in columns]
        logger.debug(
            f"Resampled curve pair into {len(rows)} rows",
            extra={"sample_count": sample_count, "last_x": columns[-1][0]},
        )
        return rows

    def _fix_spacing(
        self, columns: list[Column], column: Callable[[float], Column]
    ) -> list[Column]:
        """Redistribute x so each step is proportional to the gap behind it.

        The gaps of rows 0..N-2 drive the N-1 steps of the walk, so their
        mean sets the ratio. Row 0 stays on the left edge and the last row
        always sits on the right edge.
        """
        width = self.frame.width
        count = len(columns)
        # Mean over the N-1 driving gaps, not sum/N: a constant gap must give equal spacing
        avg_gap = math.fsum(c[3] for c in columns[:-1]) / (count - 1)
        if avg_gap == 0 or not math.isfinite(avg_gap):
            raise DegenerateCurveError(f"average gap between curves is {avg_gap}")

        ratio = (width / (count - 1)) / avg_gap
        out = [columns[0]]
        x = columns[0][0]
        for i in range(1, count - 1):
            # x never decreases, even where the gap changes sign
            x = min(width, max(x, x + out[i - 1][3] * ratio))
            out.append(column(x))

        out.append(column(width))
        return out

    def _gap_row(self, x: float, y: float, y2: float, gap: float) -> GapRow:
        height = self.frame.height
        return GapRow(x=x / self.frame.width, y=y / height, y2=y2 / height, gap=gap, scale=gap)


def compute(
    paths: Path | Sequence[Path],
    sample_count: int,
    frame: SamplingFrame | None = None,
) -> list[SampleRow] | list[GapRow]:
    """Resample with a default Resampler."""
    return Resampler(frame).compute(paths, sample_count)
