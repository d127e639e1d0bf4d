# src/metrics/modularity.py — v1
"""Modularity of a community partition.

Directed edges are folded into the undirected null model, following the
convention of Gephi's modularity statistic:
  - a reciprocal pair a->b / b->a counts as the single undirected edge a<->b
  - a lone a->b also counts as a<->b
  - when the two directions of a pair carry different weights, each
    direction contributes its own weight once

Self-loops are ignored entirely: they change neither the community totals
nor the global weight, so removing them leaves the score unchanged.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Hashable
from typing import Any

from graphmetrics.core.errors import (
    EmptyGraphError,
    PartitionIncompleteError,
    UnsupportedGraphError,
)
from graphmetrics.core.models import ModularityOptions, resolve_options
from graphmetrics.graph.base_graph import BaseGraph, ensure_graph
from graphmetrics.graph.weights import resolve_weight
from graphmetrics.logging.context import metric_context

logger = logging.getLogger(__name__)


def modularity(
    graph: Any,
    options: ModularityOptions | None = None,
    **overrides: Any,
) -> float:
    """Score a partition of ``graph`` against the configuration null model.

    Q = sum over communities c of (internal[c] - total[c]^2 / M), divided by M,
    where M is the (mirrored) total edge weight.

    Args:
        graph: BaseGraph or networkx graph. Must not be a multigraph.
        options: Options instance; defaults are used when None.
        **overrides: Option fields overriding ``options``
            (e.g. communities={...}, weight_attribute="w").

    Returns:
        Modularity score, typically within [-1, 1].

    Raises:
        InvalidGraphError: If ``graph`` does not satisfy the access contract.
        UnsupportedGraphError: If the graph allows parallel edges.
        EmptyGraphError: If the graph has no edges (self-loops aside).
        PartitionIncompleteError: If an edge endpoint has no community.
    """
    g = ensure_graph(graph)

    if g.multi:
        raise UnsupportedGraphError("modularity: multi graphs are not handled.")
    if not g.size:
        raise EmptyGraphError("modularity: the given graph has no edges.")

    opts: ModularityOptions = resolve_options(options, ModularityOptions, overrides)

    with metric_context("modularity"):
        community_of = _community_resolver(g, opts)

        total_weight = 0.0
        internal: dict[Hashable, float] = defaultdict(float)
        totals: dict[Hashable, float] = defaultdict(float)

        for edge in g.edges():
            source, target = g.extremities(edge)
            if source == target:
                continue

            community_source = community_of(source)
            community_target = community_of(target)

            weight = resolve_weight(g.get_edge_attribute(edge, opts.weight_attribute))
            reciprocal = g.has_directed_edge(target, source)

            totals[community_source] += weight
            if g.is_undirected(edge) or not reciprocal:
                totals[community_target] += weight
                total_weight += 2 * weight
            else:
                total_weight += weight

            if not reciprocal:
                weight *= 2

            if community_source == community_target:
                internal[community_source] += weight

        if total_weight == 0:
            raise EmptyGraphError("modularity: the given graph has only self-loops.")

        score = sum(
            internal[community] - totals[community] ** 2 / total_weight
            for community in totals
        ) / total_weight

        logger.debug(
            "Modularity %.6f over %d communities",
            score, len(totals),
            extra={"data": {"total_weight": total_weight, "edges": g.size}},
        )
    return score


def _community_resolver(
    graph: BaseGraph, options: ModularityOptions
) -> Callable[[Hashable], Hashable]:
    """Return a lookup raising PartitionIncompleteError for unknown nodes."""
    if options.communities is not None:
        read = options.communities.get
    else:
        attribute = options.community_attribute

        def read(node: Hashable) -> Any:
            return graph.get_node_attribute(node, attribute)

    def lookup(node: Hashable) -> Hashable:
        community = read(node)
        if community is None:
            raise PartitionIncompleteError(
                node, f'modularity: the "{node}" node is not in the partition.'
            )
        return community

    return lookup
