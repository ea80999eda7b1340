"""
Series algorithms
=================

Small, explicit algorithms over plain integer sequences. The Series class
feeds them one counter kind at a time; keeping them here means they can be
tested without building days.

Included:
- daily deltas from cumulative counts (implicit zero before day 0)
- trailing average over the last few days
- halving window (doubling-time proxy)
- "from threshold" slicing
"""

from __future__ import annotations
from typing import List, Sequence


def daily_deltas(values: Sequence[int]) -> List[int]:
    """Day-over-day differences of a cumulative sequence.

    [0, 5, 12, 12, 20] -> [0, 5, 7, 0, 8]
    """
    out: List[int] = []
    previous = 0
    for v in values:
        out.append(v - previous)
        previous = v
    return out


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (-13, 3 -> -4)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trailing_average(values: Sequence[int], window: int = 3) -> int:
    """Average daily increase: (last - value `window` places back) / window.

    The division truncates toward zero, so a falling tail gives
    (9 - 22) / 3 -> -4. Returns 0 if fewer than `window` values exist.
    """
    if len(values) < window:
        return 0
    return _trunc_div(values[-1] - values[-window], window)


def halving_days(values: Sequence[int]) -> int:
    """How many days back the counter was still at least half its last value.

    Walk backwards from the day before the last one and count days whose
    value is >= half the last value (halved toward zero); stop at the first
    day below that.

    [2, 3, 4, 5, 6, 10] -> half=5, counts 6 and 5, stops at 4 -> 2

    Caller must supply at least one value.
    """
    i = len(values) - 1
    half = _trunc_div(values[i], 2)
    days = 0
    for v in reversed(values[:i]):
        if v < half:
            break
        days += 1
    return days


def from_threshold(values: Sequence[int], n: int) -> List[int]:
    """Values from the first one >= n up to, but excluding, the last value.

    Returns [] if no value reaches n.
    """
    for i, v in enumerate(values):
        if v >= n:
            return list(values[i:len(values) - 1])
    return []
