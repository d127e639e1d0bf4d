# tests/unit/metrics/test_density.py — v1
"""Tests for metrics/density.py."""

from __future__ import annotations

import networkx as nx
import pytest

from graphmetrics.core.errors import InvalidGraphError
from graphmetrics.graph.networkx_graph import NetworkXGraph
from graphmetrics.metrics.density import density


class TestGraphDensity:
    def test_complete_undirected(self, k5):
        assert density(k5) == pytest.approx(1.0)

    def test_path_undirected(self, path3):
        assert density(path3) == pytest.approx(2 / 3)

    def test_directed(self):
        g = nx.DiGraph([(0, 1), (1, 2)])
        assert density(g) == pytest.approx(2 / 6)

    def test_mixed_counts_undirected_twice(self):
        g = nx.DiGraph()
        g.add_edge(0, 1, orientation="undirected")
        g.add_edge(1, 2)
        mixed = NetworkXGraph(g, orientation_attribute="orientation")
        assert density(mixed) == pytest.approx(3 / 6)

    @pytest.mark.parametrize("nodes", [0, 1])
    def test_tiny_graph_is_zero(self, nodes):
        g = nx.Graph()
        g.add_nodes_from(range(nodes))
        assert density(g) == 0.0

    def test_invalid_graph(self):
        with pytest.raises(InvalidGraphError):
            density("not a graph")


class TestRawNumbers:
    def test_undirected(self):
        assert density(5, 10, "undirected") == pytest.approx(1.0)

    def test_directed(self):
        assert density(5, 10, "directed") == pytest.approx(0.5)

    def test_mixed_defaults_to_directed_formula(self):
        assert density(5, 10) == pytest.approx(0.5)

    def test_small_order(self):
        assert density(1, 0, "undirected") == 0.0

    @pytest.mark.parametrize("order,size", [("5", 10), (5, "10"), (True, 1)])
    def test_non_numbers(self, order, size):
        with pytest.raises(TypeError, match="must be a number"):
            density(order, size)
