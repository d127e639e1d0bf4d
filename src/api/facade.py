# src/api/facade.py — v1
"""Public API facade: one call computing every metric over a graph.

Usage:
    from graphmetrics.api.facade import analyze_graph
    report = analyze_graph(graph, communities={"a": 0, "b": 1})
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable, Hashable
from datetime import datetime, timezone
from typing import Any

from graphmetrics.api.models import GraphMetricsReport, MetricOverrides
from graphmetrics.centrality.betweenness import (
    assign_betweenness_centrality,
    betweenness_centrality,
)
from graphmetrics.config.settings import Settings
from graphmetrics.core.models import BetweennessOptions, ModularityOptions
from graphmetrics.graph.base_graph import BaseGraph, ensure_graph
from graphmetrics.logging.context import clear_context, set_run_context
from graphmetrics.logging.logger import setup_logging_from_settings
from graphmetrics.metrics.density import density
from graphmetrics.metrics.modularity import modularity
from graphmetrics.metrics.weighted import weighted_size

logger = logging.getLogger(__name__)


def analyze_graph(
    graph: Any,
    settings: Settings | None = None,
    communities: dict[Hashable, Any] | None = None,
    overrides: MetricOverrides | None = None,
    assign_centrality: bool = False,
    should_stop: Callable[[], bool] | None = None,
) -> GraphMetricsReport:
    """Compute density, weighted size, betweenness and modularity.

    Modularity is only computed when it is defined for the graph: the graph
    must be simple and have at least one edge that is not a self-loop, and a
    partition must be available, either as ``communities`` or as the
    configured community attribute on at least one node. Otherwise it is
    reported as None.

    When ``settings.log_file`` is set, package logging is configured from
    the settings before the run (once per distinct configuration).

    Args:
        graph: BaseGraph or networkx graph.
        settings: Global settings. Loaded from .env if None.
        communities: Explicit node -> community mapping for modularity.
        overrides: Per-call settings overrides.
        assign_centrality: Write betweenness onto the nodes as well.
        should_stop: Cooperative cancellation check for betweenness.

    Returns:
        GraphMetricsReport with every computed metric.

    Raises:
        InvalidGraphError: If ``graph`` does not satisfy the access contract.
        PartitionIncompleteError: If a partition is given but incomplete.
        ComputationCancelledError: If ``should_stop`` returned True.
    """
    settings = settings or Settings()
    settings = _apply_overrides(settings, overrides)
    if settings.log_file is not None:
        setup_logging_from_settings(settings)
    g = ensure_graph(graph)

    run_id = _generate_run_id()
    started_at = datetime.now(timezone.utc)
    started = time.perf_counter()
    set_run_context(run_id)
    try:
        logger.info(
            "Starting graph analysis: run_id=%s, type=%s, order=%d, size=%d",
            run_id, g.graph_type, g.order, g.size,
        )

        compute = assign_betweenness_centrality if assign_centrality else betweenness_centrality
        centralities = compute(
            g, BetweennessOptions.from_settings(settings), should_stop=should_stop,
        )

        modularity_options = ModularityOptions.from_settings(settings, communities)
        score = None
        community_count = None
        if _modularity_applicable(g, modularity_options):
            score = modularity(g, modularity_options)
            community_count = _count_communities(g, modularity_options)

        report = GraphMetricsReport(
            run_id=run_id,
            graph_type=g.graph_type,
            multi=g.multi,
            order=g.order,
            size=g.size,
            density=density(g),
            weighted_size=weighted_size(g, settings.modularity_weight_attribute),
            betweenness=centralities,
            modularity=score,
            community_count=community_count,
            started_at=started_at,
            elapsed_seconds=time.perf_counter() - started,
        )
        logger.info(
            "Graph analysis done: run_id=%s, modularity=%s, elapsed=%.3fs",
            run_id, score, report.elapsed_seconds,
        )
        return report
    finally:
        clear_context()


def _modularity_applicable(graph: BaseGraph, options: ModularityOptions) -> bool:
    """Whether modularity is defined for this graph and partition source."""
    if graph.multi:
        logger.info("Skipping modularity: multi graphs are not handled")
        return False
    if not graph.size:
        logger.info("Skipping modularity: graph has no edges")
        return False
    if all(_is_self_loop(graph, edge) for edge in graph.edges()):
        logger.info("Skipping modularity: graph has only self-loops")
        return False
    if options.communities is not None:
        return True
    if any(
        graph.get_node_attribute(node, options.community_attribute) is not None
        for node in graph.nodes()
    ):
        return True
    logger.info(
        "Skipping modularity: no communities given and no node carries %r",
        options.community_attribute,
    )
    return False


def _is_self_loop(graph: BaseGraph, edge: Hashable) -> bool:
    source, target = graph.extremities(edge)
    return source == target


def _count_communities(graph: BaseGraph, options: ModularityOptions) -> int:
    """Count distinct labels among the graph's nodes."""
    if options.communities is not None:
        labels = (
            label for node, label in options.communities.items() if graph.has_node(node)
        )
    else:
        labels = (
            graph.get_node_attribute(node, options.community_attribute)
            for node in graph.nodes()
        )
    return len({label for label in labels if label is not None})


def _apply_overrides(settings: Settings, overrides: MetricOverrides | None) -> Settings:
    """Apply per-call overrides if provided."""
    if overrides is None:
        return settings
    values = overrides.model_dump(exclude_none=True)
    if not values:
        return settings
    current = settings.model_dump()
    current.update(values)
    return Settings(**current)


def _generate_run_id() -> str:
    """Generate a run ID: yyyymmdd_hhmmss_{uuid4_short}."""
    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return f"{ts}_{uuid.uuid4().hex[:8]}"
