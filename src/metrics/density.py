# src/metrics/density.py — v1
"""Graph density: ratio of present edges to possible edges.

Formulas for n nodes:
  undirected  2 * size / (n(n - 1))
  directed    size / (n(n - 1))
  mixed       (directed_size + 2 * undirected_size) / (n(n - 1))

A mixed graph counts each undirected edge as the two arcs it stands for.
"""

from __future__ import annotations

from numbers import Real
from typing import Any

from graphmetrics.graph.base_graph import GraphType, ensure_graph


def density(graph_or_order: Any, size: Any = None, graph_type: GraphType = "mixed") -> float:
    """Compute the density of a graph, or of raw order/size numbers.

    Args:
        graph_or_order: BaseGraph / networkx graph, or a node count.
        size: Edge count; required when ``graph_or_order`` is a number.
        graph_type: Kind used with raw numbers. "mixed" uses the
            directed formula since the split of the edges is unknown.

    Returns:
        Density, 0.0 for graphs with fewer than two nodes.

    Raises:
        TypeError: If order or size is not a number.
        InvalidGraphError: If a single argument is not a graph.
    """
    if size is not None:
        order = _require_number(graph_or_order, "order")
        size = _require_number(size, "size")
        if graph_type == "undirected":
            return _density(order, 2 * size)
        return _density(order, size)

    g = ensure_graph(graph_or_order)
    if g.graph_type == "undirected":
        return _density(g.order, 2 * g.size)
    if g.graph_type == "directed":
        return _density(g.order, g.size)

    arcs = sum(2 if g.is_undirected(edge) else 1 for edge in g.edges())
    return _density(g.order, arcs)


def _density(order: float, arcs: float) -> float:
    if order < 2:
        return 0.0
    return arcs / (order * (order - 1))


def _require_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"density: {name} must be a number, got {type(value).__name__}")
    return value
