# src/shortest_path/models.py — v1
"""Single-source traversal result shared by the Brandes traversals."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field


@dataclass
class BrandesResult:
    """Shortest-path structure of the subgraph reachable from ``source``.

    Attributes:
        source: Traversal origin.
        order: Reached nodes in non-decreasing distance from source. Popping
            from the end yields the farthest nodes first.
        predecessors: For each reached node, the neighbors preceding it on a
            shortest path (each at most once).
        sigma: Number of distinct shortest paths from source; 1 for source.
        distances: Shortest distance from source (hops or summed weight).
    """

    source: Hashable
    order: list[Hashable] = field(default_factory=list)
    predecessors: dict[Hashable, list[Hashable]] = field(default_factory=dict)
    sigma: dict[Hashable, float] = field(default_factory=dict)
    distances: dict[Hashable, float] = field(default_factory=dict)
