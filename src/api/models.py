# src/api/models.py — v1
"""API-level models: MetricOverrides, GraphMetricsReport."""

from __future__ import annotations

from collections.abc import Hashable
from datetime import datetime

from pydantic import BaseModel, Field


class MetricOverrides(BaseModel):
    """Per-call overrides, a validated subset of Settings."""

    betweenness_weighted: bool | None = None
    betweenness_normalized: bool | None = None
    betweenness_weight_attribute: str | None = None
    betweenness_centrality_attribute: str | None = None
    betweenness_workers: int | None = Field(default=None, ge=1)
    modularity_community_attribute: str | None = None
    modularity_weight_attribute: str | None = None


class GraphMetricsReport(BaseModel):
    """Return value of facade.analyze_graph()."""

    run_id: str
    graph_type: str
    multi: bool
    order: int
    size: int
    density: float
    weighted_size: float
    betweenness: dict[Hashable, float] = Field(default_factory=dict)
    modularity: float | None = None
    community_count: int | None = None
    started_at: datetime
    elapsed_seconds: float = 0.0

    def top_central(self, k: int = 10) -> list[tuple[Hashable, float]]:
        """Return the ``k`` most central nodes, highest first."""
        ranked = sorted(self.betweenness.items(), key=lambda item: item[1], reverse=True)
        return ranked[:k]
