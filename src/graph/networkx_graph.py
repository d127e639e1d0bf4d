# src/graph/networkx_graph.py — v1
"""BaseGraph adapter over networkx graphs.

nx.Graph is undirected, nx.DiGraph directed, and their Multi* variants set
``multi``. A directed networkx graph wrapped with an ``orientation_attribute``
is treated as mixed: edges whose attribute equals "undirected" are
undirected, every other edge keeps its direction.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any

import networkx as nx

from graphmetrics.graph.base_graph import BaseGraph, GraphType

UNDIRECTED = "undirected"


class NetworkXGraph(BaseGraph):
    """Access contract implementation backed by a networkx graph."""

    def __init__(self, graph: nx.Graph, orientation_attribute: str | None = None) -> None:
        if orientation_attribute is not None and not graph.is_directed():
            raise ValueError(
                "orientation_attribute requires a directed networkx graph"
            )
        self._graph = graph
        self._orientation = orientation_attribute

    @property
    def nx_graph(self) -> nx.Graph:
        return self._graph

    # --- Kind flags ---

    @property
    def graph_type(self) -> GraphType:
        if self._orientation is not None:
            return "mixed"
        return "directed" if self._graph.is_directed() else "undirected"

    @property
    def multi(self) -> bool:
        return self._graph.is_multigraph()

    @property
    def order(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def size(self) -> int:
        return self._graph.number_of_edges()

    # --- Enumeration ---

    def nodes(self) -> list[Hashable]:
        return list(self._graph.nodes)

    def edges(self) -> list[Hashable]:
        if self.multi:
            return list(self._graph.edges(keys=True))
        return list(self._graph.edges())

    def has_node(self, node: Hashable) -> bool:
        return self._graph.has_node(node)

    def extremities(self, edge: Hashable) -> tuple[Hashable, Hashable]:
        return edge[0], edge[1]  # type: ignore[index]

    # --- Adjacency ---

    def is_undirected(self, edge: Hashable) -> bool:
        if not self._graph.is_directed():
            return True
        if self._orientation is None:
            return False
        return self._edge_data(edge).get(self._orientation) == UNDIRECTED

    def has_directed_edge(self, source: Hashable, target: Hashable) -> bool:
        if not self._graph.is_directed() or not self._graph.has_edge(source, target):
            return False
        if self._orientation is None:
            return True
        return any(
            data.get(self._orientation) != UNDIRECTED
            for data in self._parallel_data(source, target)
        )

    def outbound(self, node: Hashable) -> Iterator[tuple[Hashable, Hashable]]:
        g = self._graph
        if not g.is_directed():
            for neighbor, key in self._adjacent(g.adj[node]):
                yield neighbor, self._edge_key(node, neighbor, key)
            return

        for neighbor, key in self._adjacent(g.succ[node]):
            yield neighbor, self._edge_key(node, neighbor, key)

        if self._orientation is None:
            return
        # Undirected edges of a mixed graph are stored once, as source -> target
        for neighbor, key in self._adjacent(g.pred[node]):
            edge = self._edge_key(neighbor, node, key)
            if neighbor != node and self.is_undirected(edge):
                yield neighbor, edge

    # --- Attributes ---

    def get_node_attribute(self, node: Hashable, name: str, default: Any = None) -> Any:
        return self._graph.nodes[node].get(name, default)

    def get_edge_attribute(self, edge: Hashable, name: str, default: Any = None) -> Any:
        return self._edge_data(edge).get(name, default)

    def set_node_attribute(self, node: Hashable, name: str, value: Any) -> None:
        self._graph.nodes[node][name] = value

    # --- Internals ---

    def _edge_data(self, edge: Hashable) -> dict:
        return self._graph.edges[edge]

    def _parallel_data(self, source: Hashable, target: Hashable) -> list[dict]:
        data = self._graph[source][target]
        return list(data.values()) if self.multi else [data]

    def _adjacent(self, adjacency: Any) -> Iterator[tuple[Hashable, Any]]:
        """Flatten an adjacency view into (neighbor, key) pairs."""
        for neighbor, data in adjacency.items():
            if self.multi:
                for key in data:
                    yield neighbor, key
            else:
                yield neighbor, None

    def _edge_key(self, source: Hashable, target: Hashable, key: Any) -> Hashable:
        return (source, target) if key is None else (source, target, key)
