# src/__init__.py — v1
"""graphmetrics: betweenness centrality and modularity over graph contracts.

Usage:
    import networkx as nx
    from graphmetrics import betweenness_centrality, modularity

    g = nx.karate_club_graph()
    centralities = betweenness_centrality(g, normalized=False)
    score = modularity(g, community_attribute="club")
"""

from graphmetrics.api.facade import analyze_graph
from graphmetrics.api.models import GraphMetricsReport, MetricOverrides
from graphmetrics.centrality.betweenness import (
    assign_betweenness_centrality,
    betweenness_centrality,
)
from graphmetrics.config.settings import ConfigurationError, Settings, load_settings
from graphmetrics.core.errors import (
    ComputationCancelledError,
    EmptyGraphError,
    GraphMetricsError,
    InvalidGraphError,
    PartitionIncompleteError,
    UnsupportedGraphError,
)
from graphmetrics.core.models import BetweennessOptions, ModularityOptions
from graphmetrics.graph.base_graph import BaseGraph, ensure_graph
from graphmetrics.graph.networkx_graph import NetworkXGraph
from graphmetrics.logging.logger import setup_logging, setup_logging_from_settings
from graphmetrics.metrics.density import density
from graphmetrics.metrics.extent import extent
from graphmetrics.metrics.modularity import modularity
from graphmetrics.metrics.weighted import weighted_degree, weighted_size
from graphmetrics.version import __version__

__all__ = [
    "BaseGraph",
    "BetweennessOptions",
    "ComputationCancelledError",
    "ConfigurationError",
    "EmptyGraphError",
    "GraphMetricsError",
    "GraphMetricsReport",
    "InvalidGraphError",
    "MetricOverrides",
    "ModularityOptions",
    "NetworkXGraph",
    "PartitionIncompleteError",
    "Settings",
    "UnsupportedGraphError",
    "__version__",
    "analyze_graph",
    "assign_betweenness_centrality",
    "betweenness_centrality",
    "density",
    "ensure_graph",
    "extent",
    "load_settings",
    "modularity",
    "setup_logging",
    "setup_logging_from_settings",
    "weighted_degree",
    "weighted_size",
]
