from __future__ import annotations

import math
from typing import Iterable


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    """Integer percentage in [0, 100]; 0 when ``whole`` is 0."""

    if whole <= 0:
        return 0
    return max(0, min(100, round_half_up(part / whole * 100)))


def mean_rounded(values: Iterable[int]) -> int:
    values = list(values)
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))
