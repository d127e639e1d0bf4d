# src/core/errors.py — v1
"""Error hierarchy shared by every metric.

All errors are raised synchronously at the point of detection and are never
retried: metrics perform no I/O and have no transient failure class.
"""

from __future__ import annotations

from typing import Any


class GraphMetricsError(Exception):
    """Base class for all graphmetrics errors."""


class InvalidGraphError(GraphMetricsError, TypeError):
    """Raised when the given object does not satisfy the graph access contract."""


class UnsupportedGraphError(GraphMetricsError, ValueError):
    """Raised when a metric is invoked on a graph kind it does not handle."""


class EmptyGraphError(GraphMetricsError, ValueError):
    """Raised when a metric needs at least one edge and the graph has none."""


class PartitionIncompleteError(GraphMetricsError, LookupError):
    """Raised when an edge endpoint has no community in the partition."""

    def __init__(self, node: Any, message: str | None = None) -> None:
        self.node = node
        super().__init__(message or f'the "{node}" node is not in the partition.')

    def __str__(self) -> str:
        return str(self.args[0])


class ComputationCancelledError(GraphMetricsError):
    """Raised when a cooperative cancellation check asks a computation to stop."""
