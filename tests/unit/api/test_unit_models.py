# tests/unit/api/test_unit_models.py — v1
"""Tests for api/models.py — overrides and report models."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from graphmetrics.api.models import GraphMetricsReport, MetricOverrides


def _make_report(**kwargs) -> GraphMetricsReport:
    defaults = {
        "run_id": "20260101_000000_abcd1234",
        "graph_type": "undirected",
        "multi": False,
        "order": 3,
        "size": 2,
        "density": 2 / 3,
        "weighted_size": 2.0,
        "started_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
    }
    defaults.update(kwargs)
    return GraphMetricsReport(**defaults)


class TestMetricOverrides:
    def test_all_none_by_default(self):
        assert MetricOverrides().model_dump(exclude_none=True) == {}

    def test_partial(self):
        o = MetricOverrides(betweenness_weighted=True)
        assert o.model_dump(exclude_none=True) == {"betweenness_weighted": True}

    def test_workers_positive(self):
        with pytest.raises(ValidationError):
            MetricOverrides(betweenness_workers=0)


class TestGraphMetricsReport:
    def test_defaults(self):
        report = _make_report()
        assert report.betweenness == {}
        assert report.modularity is None
        assert report.community_count is None
        assert report.elapsed_seconds == 0.0

    def test_top_central(self):
        report = _make_report(betweenness={"a": 0.1, "b": 0.9, "c": 0.5})
        assert report.top_central(2) == [("b", 0.9), ("c", 0.5)]

    def test_top_central_more_than_nodes(self):
        report = _make_report(betweenness={"a": 0.1})
        assert report.top_central() == [("a", 0.1)]

    def test_serializes(self):
        data = _make_report(modularity=0.25).model_dump(mode="json")
        assert data["modularity"] == 0.25
        assert data["started_at"].startswith("2026-01-01")
