# src/shortest_path/unweighted.py — v1
"""Breadth-first Brandes traversal (every edge counts as one hop)."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable

from graphmetrics.graph.base_graph import BaseGraph
from graphmetrics.shortest_path.models import BrandesResult


def unweighted_brandes(graph: BaseGraph, source: Hashable) -> BrandesResult:
    """Count shortest paths from ``source`` by breadth-first search.

    Parallel edges to the same neighbor count as a single hop and
    self-loops are ignored.

    Args:
        graph: Graph to traverse.
        source: Origin node.

    Returns:
        BrandesResult covering every node reachable from ``source``.
    """
    order: list[Hashable] = []
    predecessors: dict[Hashable, list[Hashable]] = {source: []}
    sigma: dict[Hashable, float] = {source: 1.0}
    distances: dict[Hashable, float] = {source: 0}

    queue = deque([source])
    while queue:
        v = queue.popleft()
        order.append(v)
        dist_v = distances[v]
        sigma_v = sigma[v]

        expanded: set[Hashable] = set()
        for w, _edge in graph.outbound(v):
            if w == v or w in expanded:
                continue
            expanded.add(w)

            if w not in distances:
                queue.append(w)
                distances[w] = dist_v + 1
                sigma[w] = 0.0
                predecessors[w] = []
            if distances[w] == dist_v + 1:
                sigma[w] += sigma_v
                predecessors[w].append(v)

    return BrandesResult(
        source=source,
        order=order,
        predecessors=predecessors,
        sigma=sigma,
        distances=distances,
    )
