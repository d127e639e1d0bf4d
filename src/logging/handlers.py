# src/logging/handlers.py — v1
"""File handlers for log output.

``rotation`` accepts either a size ("512KB", "10MB", "1GB") for size-based
rollover, or an interval ("midnight", "12h", "7d") for time-based rollover.
"""

from __future__ import annotations

import logging
import re
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from pathlib import Path

_SIZE_RE = re.compile(r"^(\d+)\s*(KB|MB|GB)$", re.IGNORECASE)
_INTERVAL_RE = re.compile(r"^(\d+)\s*(h|d)$", re.IGNORECASE)
_SIZE_UNITS = {"KB": 1024, "MB": 1024**2, "GB": 1024**3}


def parse_size(size_str: str) -> int | None:
    """Return the byte count for a size string, or None if it is not a size."""
    match = _SIZE_RE.match(size_str.strip())
    if not match:
        return None
    return int(match.group(1)) * _SIZE_UNITS[match.group(2).upper()]


def parse_interval(interval_str: str) -> tuple[str, int] | None:
    """Return (when, interval) for TimedRotatingFileHandler, or None."""
    text = interval_str.strip().lower()
    if text == "midnight":
        return "midnight", 1
    match = _INTERVAL_RE.match(text)
    if not match:
        return None
    return match.group(2).upper(), int(match.group(1))


def create_rotating_handler(
    log_file: str,
    rotation: str = "10MB",
    retention: int = 30,
) -> logging.Handler:
    """Create a rotating file handler for ``log_file``.

    Args:
        log_file: Path to log file. Parent directories are created.
        rotation: Size ("10MB") or interval ("midnight", "6h", "1d").
        retention: Number of rotated files to keep.

    Returns:
        RotatingFileHandler or TimedRotatingFileHandler.

    Raises:
        ValueError: If ``rotation`` is neither a size nor an interval.
    """
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    max_bytes = parse_size(rotation)
    if max_bytes is not None:
        return RotatingFileHandler(
            filename=str(path),
            maxBytes=max_bytes,
            backupCount=retention,
            encoding="utf-8",
        )

    interval = parse_interval(rotation)
    if interval is not None:
        when, every = interval
        return TimedRotatingFileHandler(
            filename=str(path),
            when=when,
            interval=every,
            backupCount=retention,
            encoding="utf-8",
        )

    raise ValueError(
        f"Invalid rotation: {rotation!r}. Use a size like '10MB' "
        "or an interval like 'midnight', '6h', '1d'."
    )
