"""
Labels and number formatting
============================

Plain strings for the rendering side: compact numbers and date/day labels.
Nothing here draws anything.
"""

from __future__ import annotations
from typing import Iterator, List, Sequence

from .config import DEFAULT_DATE_LABEL_FORMAT, MONTH_ABBR
from .models import Day


def format_number(i: int) -> str:
    """Compact display form of a count.

    9999 -> "9999", 12345 -> "12.3k", 1234567 -> "1.23m"
    """
    if i < 10000:
        return f"{i:d}"
    if i < 1000000:
        return "%.1fk" % (i / 1000)
    return "%.3gm" % (i / 1000000)


class DateLabels:
    """Lazy, restartable sequence of short date labels, one per day.

    Each iteration walks the underlying day list afresh, so the labels always
    reflect the days as they are when iterated.
    """

    def __init__(self, days: Sequence[Day], fmt: str = DEFAULT_DATE_LABEL_FORMAT) -> None:
        self._days = days
        self._fmt = fmt

    def __iter__(self) -> Iterator[str]:
        fmt = self._fmt
        for day in self._days:
            yield fmt.format(d=day.date, month=MONTH_ABBR[day.date.month - 1])

    def __len__(self) -> int:
        return len(self._days)

    def __repr__(self) -> str:
        return f"DateLabels({len(self)} days)"


def day_labels(values: Sequence[object]) -> List[str]:
    """'Day 1', 'Day 2', ... one label per value."""
    return [f"Day {i + 1}" for i in range(len(values))]

