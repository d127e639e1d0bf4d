# tests/unit/graph/test_weights.py — v1
"""Tests for graph/weights.py."""

from __future__ import annotations

from fractions import Fraction

import pytest

from graphmetrics.graph.weights import DEFAULT_WEIGHT, resolve_weight


class TestResolveWeight:
    @pytest.mark.parametrize("value,expected", [
        (3, 3.0),
        (2.5, 2.5),
        (0, 0.0),
        (Fraction(1, 4), 0.25),
    ])
    def test_numbers(self, value, expected):
        assert resolve_weight(value) == expected

    @pytest.mark.parametrize("value", [None, "3", True, False, float("nan"), [1]])
    def test_non_numbers_use_default(self, value):
        assert resolve_weight(value) == DEFAULT_WEIGHT

    def test_custom_default(self):
        assert resolve_weight(None, default=0.0) == 0.0
