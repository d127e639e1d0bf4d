# src/metrics/weighted.py — v1
"""Weighted degree and weighted size.

Weights go through resolve_weight(), so an edge without a numeric weight
counts as 1 and the unweighted degree / size fall out as special cases.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Literal

from graphmetrics.graph.base_graph import ensure_graph
from graphmetrics.graph.weights import resolve_weight

Direction = Literal["in", "out", "both"]


def weighted_degree(
    graph: Any,
    node: Hashable,
    weight_attribute: str = "weight",
    direction: Direction = "both",
) -> float:
    """Sum the weights of the edges attached to ``node``.

    ``direction`` filters directed edges only ("in": edges pointing at the
    node, "out": edges leaving it); undirected edges always count. An
    undirected self-loop counts twice; a directed one counts once per
    matching direction.

    Raises:
        KeyError: If ``node`` is not in the graph.
        ValueError: If ``direction`` is unknown.
    """
    if direction not in ("in", "out", "both"):
        raise ValueError(f"weighted_degree: unknown direction {direction!r}")

    g = ensure_graph(graph)
    if not g.has_node(node):
        raise KeyError(f'weighted_degree: the "{node}" node does not exist in the graph.')

    total = 0.0
    for edge in g.edges():
        source, target = g.extremities(edge)
        if node != source and node != target:
            continue

        weight = resolve_weight(g.get_edge_attribute(edge, weight_attribute))
        if g.is_undirected(edge):
            total += weight * (2 if source == target else 1)
            continue

        if direction in ("out", "both") and source == node:
            total += weight
        if direction in ("in", "both") and target == node:
            total += weight
    return total


def weighted_size(graph: Any, weight_attribute: str = "weight") -> float:
    """Sum the weights of every edge in the graph."""
    g = ensure_graph(graph)
    return sum(
        resolve_weight(g.get_edge_attribute(edge, weight_attribute))
        for edge in g.edges()
    )
