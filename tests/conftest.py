# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides small reference graphs with known metric values.
No external dependencies beyond networkx.
"""

from __future__ import annotations

import networkx as nx
import pytest

from graphmetrics.logging.context import clear_context


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


# === FIXTURES: Sample graphs ===


@pytest.fixture
def k5() -> nx.Graph:
    """Complete undirected graph on 5 nodes."""
    return nx.complete_graph(5)


@pytest.fixture
def path3() -> nx.Graph:
    """Undirected path 0 - 1 - 2."""
    return nx.path_graph(3)


@pytest.fixture
def star4() -> nx.Graph:
    """Undirected star: center 0, leaves 1..3."""
    return nx.star_graph(3)


@pytest.fixture
def weighted5() -> nx.Graph:
    """5-node weighted undirected graph with two communities.

    Communities {1, 2, 3} and {4, 5} score about 0.337.
    """
    g = nx.Graph()
    g.add_edge(1, 2, weight=30)
    g.add_edge(1, 5)
    g.add_edge(2, 3, weight=15)
    g.add_edge(2, 4, weight=10)
    g.add_edge(2, 5)
    g.add_edge(3, 4, weight=5)
    g.add_edge(4, 5, weight=100)
    return g


@pytest.fixture
def weighted5_partition() -> dict[int, str]:
    return {1: "A", 2: "A", 3: "A", 4: "B", 5: "B"}


@pytest.fixture
def directed5() -> nx.DiGraph:
    """5-node directed graph with one reciprocal pair (1 <-> 5)."""
    g = nx.DiGraph()
    g.add_edges_from([(1, 2), (1, 5), (2, 3), (3, 4), (4, 2), (5, 1)])
    return g


@pytest.fixture
def directed5_partition() -> dict[int, str]:
    return {1: "A", 5: "A", 2: "B", 3: "B", 4: "B"}


@pytest.fixture
def triangle() -> nx.Graph:
    g = nx.Graph()
    g.add_edges_from([(1, 2), (1, 3), (2, 3)])
    return g
