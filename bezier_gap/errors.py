"""Curve errors.

All of these are raised synchronously to the caller. Operations on curves are
deterministic, so none of them are worth retrying.
"""


class CurveError(ValueError):
    """Base class for curve loading and resampling failures."""

    pass


class MalformedCurveDescription(CurveError):
    """Raised when a curve description cannot be turned into a path."""

    pass


class DegenerateCurveError(CurveError):
    """Raised when a curve cannot be resampled (zero width or zero average gap)."""

    pass


class InvalidSampleCount(CurveError):
    """Raised when fewer than two samples are requested."""

    def __init__(self, sample_count: object) -> None:
        super().__init__(f"sample_count must be an integer >= 2, got {sample_count!r}")
        self.sample_count = sample_count
