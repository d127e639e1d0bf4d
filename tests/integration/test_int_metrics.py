# tests/integration/test_int_metrics.py — v1
"""Cross-checks against networkx reference implementations on real graphs."""

from __future__ import annotations

import networkx as nx
import pytest

from graphmetrics import (
    Settings,
    analyze_graph,
    assign_betweenness_centrality,
    betweenness_centrality,
    density,
    modularity,
)


@pytest.fixture
def karate() -> nx.Graph:
    return nx.karate_club_graph()


class TestBetweennessAgainstNetworkx:
    @pytest.mark.parametrize("normalized", [True, False])
    def test_karate_unweighted(self, karate, normalized):
        expected = nx.betweenness_centrality(karate, normalized=normalized)
        result = betweenness_centrality(karate, normalized=normalized)
        for node in karate:
            assert result[node] == pytest.approx(expected[node], abs=1e-9)

    @pytest.mark.parametrize("normalized", [True, False])
    def test_karate_weighted(self, karate, normalized):
        expected = nx.betweenness_centrality(karate, normalized=normalized, weight="weight")
        result = betweenness_centrality(karate, normalized=normalized, weighted=True)
        for node in karate:
            assert result[node] == pytest.approx(expected[node], abs=1e-9)

    def test_directed_random_graph(self):
        g = nx.gnp_random_graph(40, 0.1, seed=7, directed=True)
        expected = nx.betweenness_centrality(g, normalized=False)
        result = betweenness_centrality(g, normalized=False)
        for node in g:
            assert result[node] == pytest.approx(expected[node], abs=1e-9)

    def test_parallel_assign_matches(self, karate):
        expected = nx.betweenness_centrality(karate)
        assign_betweenness_centrality(karate, workers=4)
        for node, data in karate.nodes(data=True):
            assert data["centrality"] == pytest.approx(expected[node], abs=1e-9)


class TestModularityAgainstNetworkx:
    def test_karate_clubs(self, karate):
        groups: dict[str, set] = {}
        for node, club in karate.nodes(data="club"):
            groups.setdefault(club, set()).add(node)
        expected = nx.community.modularity(karate, groups.values(), weight="weight")
        assert modularity(karate, community_attribute="club") == pytest.approx(expected)

    def test_karate_detected_communities(self, karate):
        communities = nx.community.greedy_modularity_communities(karate)
        partition = {node: i for i, group in enumerate(communities) for node in group}
        expected = nx.community.modularity(karate, communities, weight="weight")
        assert modularity(karate, communities=partition) == pytest.approx(expected)


class TestReport:
    def test_karate_report(self, karate):
        settings = Settings(_env_file=None, modularity_community_attribute="club")
        report = analyze_graph(karate, settings)
        assert report.density == pytest.approx(nx.density(karate))
        assert density(karate) == pytest.approx(report.density)
        assert report.community_count == 2
        assert report.modularity == pytest.approx(
            modularity(karate, community_attribute="club")
        )
        top_node, _ = report.top_central(1)[0]
        assert top_node == 0
