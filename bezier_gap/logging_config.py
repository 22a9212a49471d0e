"""Logging setup for the CLI and the HTTP server.

Library modules only call logging.getLogger(__name__). Entry points pick one
of two outputs:
- plain lines for a terminal
- JSON lines, one object per record, with a category derived from the
  logger name and any `extra=` fields (sample_count, segments, last_x, ...)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

PLAIN_FORMAT = "%(asctime)s %(levelname)5s [%(name)s] %(message)s"

# Longest matching prefix wins
CATEGORIES = {
    "bezier_gap.types": "curve",
    "bezier_gap.point": "curve",
    "bezier_gap.segment": "curve",
    "bezier_gap.path": "curve",
    "bezier_gap.resampler": "resample",
    "bezier_gap.editor": "editor",
    "bezier_gap.render": "editor",
    "bezier_gap.routes": "http",
    "bezier_gap.main": "http",
    "bezier_gap.cli": "cli",
    "uvicorn": "http",
    "fastapi": "http",
}

# Attributes every LogRecord has; anything else came in through extra=
_BLANK_RECORD = logging.LogRecord("", 0, "", 0, "", (), None)
_RECORD_ATTRS = set(_BLANK_RECORD.__dict__) | {"message", "asctime"}

MAX_LOG_BYTES = 10 * 1024 * 1024


def category_for(logger_name: str) -> str:
    matches = [p for p in CATEGORIES if logger_name == p or logger_name.startswith(p + ".")]
    if not matches:
        return "system"
    return CATEGORIES[max(matches, key=len)]


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "category": category_for(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if extra:
            entry["extra"] = extra
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _file_handler(filename: str, formatter: logging.Formatter, level: int) -> logging.Handler:
    Path(filename).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(filename, maxBytes=MAX_LOG_BYTES, backupCount=5, encoding="utf-8")
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def configure_logging(
    *,
    json_format: bool = True,
    log_level: int | str = logging.INFO,
    log_file: str | None = None,
    error_log_file: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Replace the root logger's handlers.

    Args:
        json_format: JSON lines instead of plain text
        log_level: Minimum level for the root logger
        log_file: Also write every record here (rotating)
        error_log_file: Also write ERROR and above here (rotating)
        stream: Stream for console output (default: sys.stderr)
    """
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(PLAIN_FORMAT, datefmt="%H:%M:%S")

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        root.addHandler(_file_handler(log_file, formatter, logging.NOTSET))
    if error_log_file:
        root.addHandler(_file_handler(error_log_file, formatter, logging.ERROR))

    for name in ["PIL", "httpx", "httpcore", "watchfiles"]:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_dev_logging(log_level: int | str = logging.INFO) -> None:
    """Console logging for the CLI. JSON only if LOG_JSON=true."""
    use_json = os.getenv("LOG_JSON", "false").lower() == "true"
    configure_logging(json_format=use_json, log_level=log_level)


def setup_from_settings() -> None:
    """Configure logging from BEZIER_GAP_LOG_* settings (used by the server)."""
    from bezier_gap.config import settings

    configure_logging(
        json_format=settings.log_json,
        log_level=settings.log_level.upper(),
        log_file=settings.log_file,
        error_log_file=settings.error_log_file,
    )
