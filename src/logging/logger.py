# src/logging/logger.py — v1
"""Logging setup for metric runs.

Every record carries the current run / metric / step context, so a single
analyze_graph() run can be followed across its betweenness and modularity
passes. Engines attach structured numbers through ``extra={"data": {...}}``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

from graphmetrics.logging.context import get_context

PACKAGE_LOGGER = "graphmetrics"

# Configuration last applied by setup_logging_from_settings()
_applied: tuple | None = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record, context fields as top-level keys.

    Example:
        {"timestamp": "...", "level": "DEBUG", "logger": "graphmetrics.metrics.modularity",
         "run_id": "20260101_...", "metric": "modularity",
         "message": "Modularity 0.337 over 2 communities", "data": {"total_weight": 324.0}}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }
        entry.update(get_context().as_dict())
        entry["message"] = record.getMessage()

        data = getattr(record, "data", None)
        if data:
            entry["data"] = data
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single-line format for terminals: ``time LEVEL logger [metric/step] message k=v``."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        scope = ctx.metric or "-"
        if ctx.step:
            scope = f"{scope}/{ctx.step}"

        stamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%H:%M:%S")
        line = f"{stamp} {record.levelname:<8} {record.name} [{scope}] {record.getMessage()}"

        data = getattr(record, "data", None)
        if data:
            line += " " + " ".join(f"{key}={value}" for key, value in data.items())
        if ctx.run_id:
            line += f" run={ctx.run_id}"
        if record.exc_info and record.exc_info[1] is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | None = None,
    rotation: str = "10MB",
    retention: int = 30,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Configure the package logger, replacing any handlers it already has.

    Args:
        level: DEBUG, INFO, WARNING or ERROR.
        log_format: "json" or "text".
        log_file: Also write to this file, rotated per ``rotation``.
        rotation: Size ("10MB") or interval ("midnight", "6h").
        retention: Number of rotated files to keep.
        stream: Console stream, stdout by default.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()

    formatter = JsonFormatter() if log_format == "json" else TextFormatter()

    console = logging.StreamHandler(stream or sys.stdout)
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    if log_file:
        from graphmetrics.logging.handlers import create_rotating_handler

        file_handler = create_rotating_handler(log_file, rotation=rotation, retention=retention)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)
    return package_logger


def setup_logging_from_settings(settings: Any, force: bool = False) -> bool:
    """Configure logging from Settings unless that configuration is already active.

    Returns:
        True when handlers were (re)installed.
    """
    global _applied

    wanted = (
        settings.log_level,
        settings.log_format,
        str(settings.log_file) if settings.log_file else None,
        settings.log_rotation,
        settings.log_retention,
    )
    if not force and wanted == _applied:
        return False

    level, log_format, log_file, rotation, retention = wanted
    setup_logging(level, log_format, log_file, rotation, retention)
    _applied = wanted
    return True


def reset_logging() -> None:
    """Remove the package handlers and forget the applied configuration."""
    global _applied

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    _applied = None
