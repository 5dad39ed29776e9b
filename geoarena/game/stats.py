from __future__ import annotations

import math
from collections.abc import Iterable


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def percent(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def average(values: Iterable[int]) -> int:
    items = list(values)
    if not items:
        return 0
    return round_half_up(sum(items) / len(items))
