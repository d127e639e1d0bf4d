# tests/unit/core/test_unit_errors.py — v1
"""Tests for core/errors.py — error hierarchy."""

from __future__ import annotations

import pytest

from graphmetrics.core.errors import (
    ComputationCancelledError,
    EmptyGraphError,
    GraphMetricsError,
    InvalidGraphError,
    PartitionIncompleteError,
    UnsupportedGraphError,
)


class TestHierarchy:
    @pytest.mark.parametrize("error_cls,builtin", [
        (InvalidGraphError, TypeError),
        (UnsupportedGraphError, ValueError),
        (EmptyGraphError, ValueError),
        (PartitionIncompleteError, LookupError),
    ])
    def test_builtin_bases(self, error_cls, builtin):
        assert issubclass(error_cls, GraphMetricsError)
        assert issubclass(error_cls, builtin)

    def test_cancelled_is_graph_metrics_error(self):
        assert issubclass(ComputationCancelledError, GraphMetricsError)
        assert not issubclass(ComputationCancelledError, ValueError)


class TestPartitionIncompleteError:
    def test_default_message(self):
        err = PartitionIncompleteError("n1")
        assert err.node == "n1"
        assert str(err) == 'the "n1" node is not in the partition.'

    def test_custom_message(self):
        err = PartitionIncompleteError(7, "modularity: missing 7")
        assert err.node == 7
        assert str(err) == "modularity: missing 7"
