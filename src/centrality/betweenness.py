# src/centrality/betweenness.py — v1
"""Betweenness centrality via Brandes' dependency accumulation.

Every node is taken once as a traversal source. The traversal's finishing
order is replayed farthest-first to accumulate each node's dependency on the
source, and the dependencies of intermediate nodes are summed into the result.

Scaling:
  normalized      -> 1 / ((n - 1)(n - 2)) when n > 2, untouched otherwise
  not normalized  -> 0.5 on undirected graphs (every pair is seen from both
                     ends), untouched on directed and mixed graphs

With ``workers > 1`` sources are split into contiguous chunks run on a thread
pool. Each chunk accumulates into its own partial map and the partials are
summed in chunk order, so values can differ from the sequential pass in the
least-significant digits.
"""

from __future__ import annotations

import contextvars
import logging
import time
from collections.abc import Callable, Hashable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from graphmetrics.core.errors import ComputationCancelledError
from graphmetrics.core.models import BetweennessOptions, resolve_options
from graphmetrics.graph.base_graph import BaseGraph, ensure_graph
from graphmetrics.logging.context import metric_context
from graphmetrics.shortest_path import BrandesTraversal, get_brandes_traversal

logger = logging.getLogger(__name__)

StopCheck = Callable[[], bool]


def betweenness_centrality(
    graph: Any,
    options: BetweennessOptions | None = None,
    *,
    should_stop: StopCheck | None = None,
    **overrides: Any,
) -> dict[Hashable, float]:
    """Compute betweenness centrality for every node.

    Args:
        graph: BaseGraph or networkx graph.
        options: Options instance; defaults are used when None.
        should_stop: Optional check run between sources; returning True
            cancels the computation.
        **overrides: Option fields overriding ``options`` (e.g. weighted=True).

    Returns:
        Dict mapping node -> centrality.

    Raises:
        InvalidGraphError: If ``graph`` does not satisfy the access contract.
        ComputationCancelledError: If ``should_stop`` returned True.
    """
    return _betweenness(graph, options, overrides, assign=False, should_stop=should_stop)


def assign_betweenness_centrality(
    graph: Any,
    options: BetweennessOptions | None = None,
    *,
    should_stop: StopCheck | None = None,
    **overrides: Any,
) -> dict[Hashable, float]:
    """Compute betweenness centrality and write it onto each node.

    Values are stored under ``options.centrality_attribute``. Nothing is
    written when the computation is cancelled.

    Returns:
        The same mapping betweenness_centrality() returns.
    """
    return _betweenness(graph, options, overrides, assign=True, should_stop=should_stop)


def _betweenness(
    graph: Any,
    options: BetweennessOptions | None,
    overrides: dict[str, Any],
    assign: bool,
    should_stop: StopCheck | None,
) -> dict[Hashable, float]:
    g = ensure_graph(graph)
    opts: BetweennessOptions = resolve_options(options, BetweennessOptions, overrides)

    with metric_context("betweenness", step="assign" if assign else None):
        nodes = g.nodes()
        traversal = get_brandes_traversal(opts.weighted, opts.weight_attribute)
        started = time.perf_counter()
        logger.debug(
            "Betweenness over %d nodes / %d edges (weighted=%s, normalized=%s, workers=%d)",
            g.order, g.size, opts.weighted, opts.normalized, opts.workers,
        )

        if opts.workers > 1 and len(nodes) > 1:
            centralities = _accumulate_parallel(g, nodes, traversal, opts.workers, should_stop)
        else:
            centralities = dict.fromkeys(nodes, 0.0)
            _accumulate(g, nodes, traversal, centralities, should_stop)

        _rescale(centralities, g.order, normalized=opts.normalized, graph_type=g.graph_type)

        if assign:
            for node, value in centralities.items():
                g.set_node_attribute(node, opts.centrality_attribute, value)

        elapsed = time.perf_counter() - started
        logger.debug(
            "Betweenness done in %.3fs", elapsed,
            extra={"data": {"sources": len(nodes), "max": max(centralities.values(), default=0.0)}},
        )
    return centralities


def _accumulate(
    graph: BaseGraph,
    sources: Sequence[Hashable],
    traversal: BrandesTraversal,
    centralities: dict[Hashable, float],
    should_stop: StopCheck | None,
) -> None:
    """Add the dependencies of every source's traversal into ``centralities``."""
    for source in sources:
        if should_stop is not None and should_stop():
            raise ComputationCancelledError(
                f"betweenness centrality cancelled before source {source!r}"
            )

        result = traversal(graph, source)
        stack = result.order
        predecessors = result.predecessors
        sigma = result.sigma
        delta = dict.fromkeys(stack, 0.0)

        while stack:
            w = stack.pop()
            coeff = (1.0 + delta[w]) / sigma[w]
            for v in predecessors[w]:
                delta[v] += sigma[v] * coeff
            if w != source:
                centralities[w] += delta[w]


def _accumulate_parallel(
    graph: BaseGraph,
    nodes: list[Hashable],
    traversal: BrandesTraversal,
    workers: int,
    should_stop: StopCheck | None,
) -> dict[Hashable, float]:
    """Run source chunks on a thread pool and sum their partial maps."""
    chunks = _split(nodes, workers)

    def run_chunk(chunk: list[Hashable]) -> dict[Hashable, float]:
        partial = dict.fromkeys(nodes, 0.0)
        _accumulate(graph, chunk, traversal, partial, should_stop)
        return partial

    centralities = dict.fromkeys(nodes, 0.0)
    with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
        # Each task gets its own copy so worker logs keep the metric context
        futures = [
            executor.submit(contextvars.copy_context().run, run_chunk, chunk)
            for chunk in chunks
        ]
        for future in futures:
            for node, value in future.result().items():
                centralities[node] += value
    return centralities


def _split(items: list[Hashable], parts: int) -> list[list[Hashable]]:
    """Split ``items`` into at most ``parts`` contiguous, non-empty chunks."""
    parts = min(parts, len(items))
    size, extra = divmod(len(items), parts)
    chunks: list[list[Hashable]] = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < extra else 0)
        chunks.append(items[start:end])
        start = end
    return chunks


def _rescale(
    centralities: dict[Hashable, float],
    n: int,
    *,
    normalized: bool,
    graph_type: str,
) -> None:
    if normalized:
        # n <= 2 leaves no intermediate node: every value is already 0
        scale = None if n <= 2 else 1.0 / ((n - 1) * (n - 2))
    else:
        scale = 0.5 if graph_type == "undirected" else None

    if scale is not None:
        for node in centralities:
            centralities[node] *= scale
