"""CLI for bezier-gap - inspect, edit and resample curve files.

Usage:
    bezier-gap resample curve.json -n 8
    bezier-gap resample curves.json --json
    bezier-gap show curve.json
    bezier-gap move curve.json 1 pt 310 245 -o edited.json
    bezier-gap preview curves.json preview.png
    bezier-gap serve
"""

import json
from pathlib import Path as FilePath
from typing import Any

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from bezier_gap.config import settings
from bezier_gap.errors import CurveError
from bezier_gap.logging_config import setup_dev_logging
from bezier_gap.path import Path, load_curves
from bezier_gap.resampler import Resampler, SamplingFrame
from bezier_gap.types import GapRow, PointId, PointSlot

app = typer.Typer(
    name="bezier-gap",
    help="Edit cubic bezier curves and resample their gap profile",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level for this run"),
) -> None:
    """Edit cubic bezier curves and resample their gap profile."""
    setup_dev_logging(log_level.upper())


def _read_curves(file: FilePath) -> list[Path]:
    """Load one curve or a curve pair from a JSON file."""
    try:
        text = file.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Cannot read {file}: {e}[/red]")
        raise typer.Exit(1) from e

    try:
        return load_curves(text, point_radius=settings.point_radius)
    except CurveError as e:
        console.print(f"[red]Invalid curve file {file}: {e}[/red]")
        raise typer.Exit(1) from e


def _describe(paths: list[Path]) -> Any:
    if len(paths) == 2:
        return {"curve1": paths[0].serialize(), "curve2": paths[1].serialize()}
    return paths[0].serialize()


def _frame(width: float | None, height: float | None) -> SamplingFrame:
    return SamplingFrame(
        width=width if width is not None else settings.canvas_width,
        height=height if height is not None else settings.canvas_height,
    )


@app.command("resample")
def resample(
    file: FilePath = typer.Argument(..., help="Curve JSON (list, or {curve1, curve2})"),
    samples: int = typer.Option(settings.sample_count, "--samples", "-n", help="Rows to produce"),
    width: float | None = typer.Option(None, "--width", help="Frame width"),
    height: float | None = typer.Option(None, "--height", help="Frame height"),
    as_json: bool = typer.Option(False, "--json", help="Print rows as JSON"),
) -> None:
    """Resample a curve, or the gap profile of a curve pair.

    Examples:
        bezier-gap resample curve.json
        bezier-gap resample curves.json -n 16 --json
    """
    paths = _read_curves(file)
    resampler = Resampler(_frame(width, height), dense_steps=settings.dense_steps)
    try:
        rows = resampler.compute(paths, samples)
    except CurveError as e:
        console.print(f"[red]Cannot resample {file}: {e}[/red]")
        raise typer.Exit(1) from e

    if as_json:
        typer.echo(json.dumps([row.model_dump() for row in rows]))
        return

    pair = bool(rows) and isinstance(rows[0], GapRow)
    table = Table(title=f"{len(rows)} samples", box=box.ROUNDED)
    table.add_column("#", style="dim", justify="right")
    table.add_column("x", style="cyan", justify="right")
    table.add_column("y", style="green", justify="right")
    if pair:
        table.add_column("y2", style="green", justify="right")
        table.add_column("gap", style="magenta", justify="right")

    for i, row in enumerate(rows):
        cells = [str(i), f"{row.x:.4f}", f"{row.y:.4f}"]
        if isinstance(row, GapRow):
            cells += [f"{row.y2:.4f}", f"{row.gap:.2f}"]
        table.add_row(*cells)

    console.print(table)


@app.command("show")
def show(
    file: FilePath = typer.Argument(..., help="Curve JSON (list, or {curve1, curve2})"),
) -> None:
    """List the segments and points of a curve file."""
    paths = _read_curves(file)

    for curve_number, path in enumerate(paths, start=1):
        table = Table(title=f"Curve {curve_number}", box=box.ROUNDED)
        table.add_column("Segment", style="cyan", justify="right")
        table.add_column("pt", style="white")
        table.add_column("cp1", style="dim")
        table.add_column("cp2", style="dim")

        for segment in path:
            table.add_row(
                str(segment.index),
                f"{segment.anchor.x:g}, {segment.anchor.y:g}",
                f"{segment.cp1.x:g}, {segment.cp1.y:g}" if segment.cp1 else "-",
                f"{segment.cp2.x:g}, {segment.cp2.y:g}" if segment.cp2 else "-",
            )

        console.print(table)
        console.print(f"  [dim]{path.to_svg_d()}[/dim]")


@app.command("move")
def move(
    file: FilePath = typer.Argument(..., help="Curve JSON (list, or {curve1, curve2})"),
    segment: int = typer.Argument(..., help="Segment index"),
    slot: PointSlot = typer.Argument(..., help="pt, cp1 or cp2"),
    x: float = typer.Argument(..., help="New x"),
    y: float = typer.Argument(..., help="New y"),
    curve: int = typer.Option(1, "--curve", "-c", help="Curve to edit (1 or 2)"),
    output: FilePath | None = typer.Option(None, "--output", "-o", help="Write result here"),
) -> None:
    """Move one point; smoothness propagation adjusts its neighbours.

    Examples:
        bezier-gap move curve.json 1 pt 310 245
        bezier-gap move curves.json 2 cp1 480 260 -c 2 -o edited.json
    """
    paths = _read_curves(file)
    if not 1 <= curve <= len(paths):
        console.print(f"[red]Curve {curve} not in file (has {len(paths)})[/red]")
        raise typer.Exit(1)

    path = paths[curve - 1]
    point_id = PointId(segment, slot)
    try:
        path.move_point(point_id, x, y)
    except (IndexError, KeyError) as e:
        console.print(f"[red]No such point: segment {segment} {slot.value}[/red]")
        raise typer.Exit(1) from e

    out = json.dumps(_describe(paths), indent=2)
    if output is None:
        typer.echo(out)
        return
    output.write_text(out + "\n", encoding="utf-8")
    console.print(f"[green]Wrote {output}[/green]")


@app.command("preview")
def preview(
    file: FilePath = typer.Argument(..., help="Curve JSON (list, or {curve1, curve2})"),
    output: FilePath = typer.Argument(..., help="PNG file to write"),
    samples: int = typer.Option(settings.sample_count, "--samples", "-n", help="Gap lines"),
) -> None:
    """Render curves, handles and gap lines to PNG."""
    from bezier_gap.render import render_curves_to_png

    paths = _read_curves(file)
    frame = _frame(None, None)
    try:
        rows = Resampler(frame, dense_steps=settings.dense_steps).compute(paths, samples)
    except CurveError as e:
        console.print(f"[red]Cannot resample {file}: {e}[/red]")
        raise typer.Exit(1) from e

    output.write_bytes(render_curves_to_png(paths, rows, frame, int(settings.padding)))
    console.print(f"[green]Wrote {output}[/green]")


@app.command("serve")
def serve() -> None:
    """Run the HTTP API."""
    from bezier_gap.main import run

    run()


# Entry point
if __name__ == "__main__":
    app()
