# src/metrics/extent.py — v1
"""Min / max of numeric node or edge attributes.

Values that are not numbers (missing, None, strings, bools, NaN) are skipped.
An attribute with no numeric value at all has the extent (inf, -inf).
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Real
from typing import Any, Literal

from graphmetrics.graph.base_graph import ensure_graph

Extent = tuple[float, float]


def extent(
    graph: Any,
    attributes: str | Iterable[str],
    kind: Literal["nodes", "edges"] = "nodes",
) -> Extent | dict[str, Extent]:
    """Compute the (min, max) of one or several attributes in a single pass.

    Args:
        graph: BaseGraph or networkx graph.
        attributes: One attribute name, or several.
        kind: Read node attributes ("nodes") or edge attributes ("edges").

    Returns:
        A (min, max) tuple for a single name, or a dict name -> (min, max).

    Raises:
        ValueError: If ``kind`` is unknown.
        InvalidGraphError: If ``graph`` does not satisfy the access contract.
    """
    if kind not in ("nodes", "edges"):
        raise ValueError(f"extent: unknown kind {kind!r}, expected 'nodes' or 'edges'")

    g = ensure_graph(graph)
    single = isinstance(attributes, str)
    names = [attributes] if single else list(attributes)

    if kind == "nodes":
        items, read = g.nodes(), g.get_node_attribute
    else:
        items, read = g.edges(), g.get_edge_attribute

    bounds = {name: [math.inf, -math.inf] for name in names}
    for item in items:
        for name, bound in bounds.items():
            value = read(item, name)
            if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
                continue
            if value < bound[0]:
                bound[0] = value
            if value > bound[1]:
                bound[1] = value

    result = {name: (low, high) for name, (low, high) in bounds.items()}
    return result[attributes] if single else result
