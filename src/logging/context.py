# src/logging/context.py — v1
"""Contextual logging support: attach run_id, metric and step to log records."""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per metric computation.
_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_metric: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "metric", default=None
)
_step: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "step", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    run_id: str | None = None
    metric: str | None = None
    step: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        run_id=_run_id.get(),
        metric=_metric.get(),
        step=_step.get(),
    )


def set_run_context(run_id: str) -> None:
    """Set run-level context (called once per facade run)."""
    _run_id.set(run_id)


def set_metric_context(metric: str, step: str | None = None) -> None:
    """Set metric-level context (called per metric computation)."""
    _metric.set(metric)
    _step.set(step)


@contextmanager
def metric_context(metric: str, step: str | None = None) -> Iterator[LogContext]:
    """Scope metric/step context to a block, restoring the previous values."""
    metric_token = _metric.set(metric)
    step_token = _step.set(step)
    try:
        yield get_context()
    finally:
        _step.reset(step_token)
        _metric.reset(metric_token)


def clear_context() -> None:
    """Reset all context variables."""
    _run_id.set(None)
    _metric.set(None)
    _step.set(None)
