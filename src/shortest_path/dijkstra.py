# src/shortest_path/dijkstra.py — v1
"""Dijkstra-based Brandes traversal over non-negative edge weights.

Weights are read through resolve_weight(): a missing or non-numeric weight
counts as 1. Negative weights are not validated and give meaningless counts.
"""

from __future__ import annotations

from collections.abc import Hashable
from heapq import heappop, heappush
from itertools import count

from graphmetrics.graph.base_graph import BaseGraph
from graphmetrics.graph.weights import resolve_weight
from graphmetrics.shortest_path.models import BrandesResult


def dijkstra_brandes(
    graph: BaseGraph,
    source: Hashable,
    weight_attribute: str = "weight",
) -> BrandesResult:
    """Count weighted shortest paths from ``source``.

    The cost of a step v -> w is the smallest weight among the edges leading
    from v to w. Self-loops are ignored.

    Args:
        graph: Graph to traverse.
        source: Origin node.
        weight_attribute: Edge attribute holding the weight.

    Returns:
        BrandesResult covering every node reachable from ``source``.
    """
    order: list[Hashable] = []
    predecessors: dict[Hashable, list[Hashable]] = {source: []}
    sigma: dict[Hashable, float] = {source: 0.0}
    distances: dict[Hashable, float] = {}

    seen: dict[Hashable, float] = {source: 0.0}
    tie = count()
    # (distance, tie-breaker, predecessor, node); source is its own predecessor
    heap: list[tuple[float, int, Hashable, Hashable]] = [(0.0, next(tie), source, source)]

    while heap:
        dist, _, pred, v = heappop(heap)
        if v in distances:
            continue

        if pred == v:
            sigma[v] = 1.0
        else:
            sigma[v] += sigma[pred]
        order.append(v)
        distances[v] = dist

        for w, step in _step_costs(graph, v, weight_attribute).items():
            vw_dist = dist + step
            if w not in distances and (w not in seen or vw_dist < seen[w]):
                seen[w] = vw_dist
                heappush(heap, (vw_dist, next(tie), v, w))
                sigma[w] = 0.0
                predecessors[w] = [v]
            elif vw_dist == seen[w]:
                sigma[w] += sigma[v]
                predecessors[w].append(v)

    return BrandesResult(
        source=source,
        order=order,
        predecessors=predecessors,
        sigma=sigma,
        distances=distances,
    )


def _step_costs(graph: BaseGraph, node: Hashable, weight_attribute: str) -> dict[Hashable, float]:
    """Cheapest edge weight from ``node`` to each of its outbound neighbors."""
    costs: dict[Hashable, float] = {}
    for neighbor, edge in graph.outbound(node):
        if neighbor == node:
            continue
        weight = resolve_weight(graph.get_edge_attribute(edge, weight_attribute))
        if neighbor not in costs or weight < costs[neighbor]:
            costs[neighbor] = weight
    return costs
