# src/graph/base_graph.py — v1
"""Abstract graph access interface consumed by every metric.

Metrics never touch a concrete graph library directly: they call
ensure_graph() once at their entry point and work through BaseGraph.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator
from typing import Any, Literal

import networkx as nx

from graphmetrics.core.errors import InvalidGraphError

GraphType = Literal["directed", "undirected", "mixed"]


class BaseGraph(ABC):
    """Capability set a graph must expose to be measured."""

    # --- Kind flags ---

    @property
    @abstractmethod
    def graph_type(self) -> GraphType:
        """Overall graph type: 'directed', 'undirected' or 'mixed'."""

    @property
    @abstractmethod
    def multi(self) -> bool:
        """Whether parallel edges between the same endpoints are allowed."""

    @property
    @abstractmethod
    def order(self) -> int:
        """Number of nodes."""

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of edges."""

    # --- Enumeration ---

    @abstractmethod
    def nodes(self) -> list[Hashable]:
        """Return all node identifiers."""

    @abstractmethod
    def edges(self) -> list[Hashable]:
        """Return all edge keys (opaque, usable with the edge accessors)."""

    @abstractmethod
    def has_node(self, node: Hashable) -> bool:
        """Whether ``node`` belongs to the graph."""

    @abstractmethod
    def extremities(self, edge: Hashable) -> tuple[Hashable, Hashable]:
        """Return the (source, target) endpoints of an edge."""

    # --- Adjacency ---

    @abstractmethod
    def is_undirected(self, edge: Hashable) -> bool:
        """Whether this particular edge is undirected."""

    @abstractmethod
    def has_directed_edge(self, source: Hashable, target: Hashable) -> bool:
        """Whether a directed edge from ``source`` to ``target`` exists."""

    @abstractmethod
    def outbound(self, node: Hashable) -> Iterator[tuple[Hashable, Hashable]]:
        """Yield (neighbor, edge) for every edge traversable away from ``node``.

        Directed edges are yielded from their source only, undirected edges
        from both endpoints. Parallel edges are all yielded.
        """

    # --- Attributes ---

    @abstractmethod
    def get_node_attribute(self, node: Hashable, name: str, default: Any = None) -> Any:
        """Read a node attribute."""

    @abstractmethod
    def get_edge_attribute(self, edge: Hashable, name: str, default: Any = None) -> Any:
        """Read an edge attribute."""

    @abstractmethod
    def set_node_attribute(self, node: Hashable, name: str, value: Any) -> None:
        """Write a node attribute."""


def ensure_graph(graph: Any) -> BaseGraph:
    """Validate ``graph`` against the access contract.

    BaseGraph instances pass through, networkx graphs are wrapped in
    NetworkXGraph.

    Raises:
        InvalidGraphError: If ``graph`` is neither.
    """
    if isinstance(graph, BaseGraph):
        return graph
    if isinstance(graph, nx.Graph):
        from graphmetrics.graph.networkx_graph import NetworkXGraph

        return NetworkXGraph(graph)
    raise InvalidGraphError(
        "the given graph is not a valid graph instance "
        f"(expected BaseGraph or networkx graph, got {type(graph).__name__})."
    )
