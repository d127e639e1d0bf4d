# src/graph/weights.py — v1
"""Numeric weight resolution for edge attributes."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

DEFAULT_WEIGHT = 1.0


def resolve_weight(value: Any, default: float = DEFAULT_WEIGHT) -> float:
    """Return ``value`` as a float weight, or ``default`` when it is not a number.

    Missing values, None, bools, strings and NaN all resolve to ``default``.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return default
    weight = float(value)
    if math.isnan(weight):
        return default
    return weight
