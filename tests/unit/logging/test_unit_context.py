# tests/unit/logging/test_unit_context.py — v1
"""Tests for logging/context.py."""

from __future__ import annotations

import contextvars

import pytest

from graphmetrics.logging.context import (
    LogContext,
    clear_context,
    get_context,
    metric_context,
    set_metric_context,
    set_run_context,
)


class TestLogContext:
    def test_as_dict_skips_none(self):
        assert LogContext(run_id="r1").as_dict() == {"run_id": "r1"}

    def test_empty(self):
        assert LogContext().as_dict() == {}


class TestContextVars:
    def test_defaults(self):
        assert get_context() == LogContext()

    def test_run_and_metric(self):
        set_run_context("r1")
        set_metric_context("modularity", "score")
        ctx = get_context()
        assert (ctx.run_id, ctx.metric, ctx.step) == ("r1", "modularity", "score")

    def test_clear(self):
        set_run_context("r1")
        set_metric_context("betweenness")
        clear_context()
        assert get_context().as_dict() == {}


class TestMetricContext:
    def test_yields_snapshot(self):
        with metric_context("betweenness", step="assign") as ctx:
            assert ctx.metric == "betweenness"
            assert ctx.step == "assign"

    def test_restores_previous(self):
        set_metric_context("outer", "s1")
        with metric_context("inner"):
            assert get_context().metric == "inner"
            assert get_context().step is None
        assert get_context().metric == "outer"
        assert get_context().step == "s1"

    def test_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with metric_context("betweenness"):
                raise RuntimeError("fail")
        assert get_context().metric is None

    def test_keeps_run_id(self):
        set_run_context("r2")
        with metric_context("modularity") as ctx:
            assert ctx.run_id == "r2"

    def test_copied_context_isolated(self):
        set_run_context("r3")
        snapshot = contextvars.copy_context()
        clear_context()
        assert snapshot.run(get_context).run_id == "r3"
        assert get_context().run_id is None
