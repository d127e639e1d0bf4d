# src/shortest_path/__init__.py — v1
"""Single-source shortest-path traversals producing Brandes structures."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from functools import partial

from graphmetrics.graph.base_graph import BaseGraph
from graphmetrics.shortest_path.dijkstra import dijkstra_brandes
from graphmetrics.shortest_path.models import BrandesResult
from graphmetrics.shortest_path.unweighted import unweighted_brandes

BrandesTraversal = Callable[[BaseGraph, Hashable], BrandesResult]


def get_brandes_traversal(weighted: bool, weight_attribute: str = "weight") -> BrandesTraversal:
    """Pick the breadth-first or Dijkstra traversal.

    Args:
        weighted: Use edge weights (Dijkstra) instead of hop counts (BFS).
        weight_attribute: Edge attribute read by the weighted traversal.

    Returns:
        Callable taking (graph, source) and returning a BrandesResult.
    """
    if weighted:
        return partial(dijkstra_brandes, weight_attribute=weight_attribute)
    return unweighted_brandes


__all__ = [
    "BrandesResult",
    "BrandesTraversal",
    "dijkstra_brandes",
    "get_brandes_traversal",
    "unweighted_brandes",
]
