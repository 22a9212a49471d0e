"""Preview rendering.

Pure functions that draw curves, their handles and the gap profile to PNG.
No state access.
"""

from __future__ import annotations

import io
from collections.abc import Sequence

from PIL import Image, ImageDraw

from bezier_gap.path import Path
from bezier_gap.resampler import SamplingFrame
from bezier_gap.types import GapRow, PointRole, PointState, SampleRow

FILL_COLORS = {
    PointState.HOVER: "#00ff00",
    PointState.ACTIVE: "#ff0000",
}
BASE_FILL = {
    PointRole.ANCHOR: "#000000",
    PointRole.CONTROL: "#999999",
}


def path_to_point_list(
    path: Path, offset: float = 0.0, steps: int = 50
) -> list[tuple[float, float]]:
    """Flatten a path to (x, y) tuples for PIL drawing."""
    return [(x + offset, y + offset) for x, y in path.sample_dense(steps)]


def render_curves_to_png(
    paths: Sequence[Path],
    rows: Sequence[SampleRow] | Sequence[GapRow] = (),
    frame: SamplingFrame | None = None,
    padding: int = 40,
    show_handles: bool = True,
    background: str = "#FFFFFF",
) -> bytes:
    """Render curves to a PNG image.

    Args:
        paths: Curves to draw, in frame coordinates.
        rows: Resampled rows; gap rows are drawn as red vertical lines.
        frame: Frame size. Defaults to 600x500.
        padding: Margin around the frame in pixels.
        show_handles: Draw anchors, control points and their handle lines.
        background: Background color as hex string.

    Returns:
        PNG image data as bytes.
    """
    frame = frame or SamplingFrame()
    width = int(frame.width + 2 * padding)
    height = int(frame.height + 2 * padding)
    img = Image.new("RGB", (width, height), background)
    draw = ImageDraw.Draw(img)

    draw.rectangle(
        [padding, padding, padding + frame.width, padding + frame.height], outline="#cccccc"
    )

    for path in paths:
        points = path_to_point_list(path, offset=padding)
        if len(points) >= 2:
            draw.line(points, fill="#111111", width=1)

    for row in rows:
        if isinstance(row, GapRow):
            x = row.x * frame.width + padding
            draw.line(
                [(x, row.y * frame.height + padding), (x, row.y2 * frame.height + padding)],
                fill="#ff0000",
                width=1,
            )

    if show_handles:
        for path in paths:
            _draw_handles(draw, path, padding)

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def _draw_handles(draw: ImageDraw.ImageDraw, path: Path, padding: float) -> None:
    for segment in path.segments:
        if segment.prev is not None and segment.cp1 is not None and segment.cp2 is not None:
            start = path.segments[segment.prev].anchor
            draw.line(
                [
                    (start.x + padding, start.y + padding),
                    (segment.cp1.x + padding, segment.cp1.y + padding),
                ],
                fill="#999999",
            )
            draw.line(
                [
                    (segment.anchor.x + padding, segment.anchor.y + padding),
                    (segment.cp2.x + padding, segment.cp2.y + padding),
                ],
                fill="#999999",
            )

    for _, point in path.all_points():
        fill = FILL_COLORS.get(point.state, BASE_FILL[point.role])
        r = point.radius
        cx = point.x + padding
        cy = point.y + padding
        draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=fill)
