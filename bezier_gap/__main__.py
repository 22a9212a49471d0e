"""Allow running as `python -m bezier_gap`."""

from bezier_gap.cli import app

app()
