"""
Data model (Day, DataKind)
==========================

A Series is built from a list of `Day` records, one per calendar day. Each Day
holds four *cumulative* counters (running totals as of that date).

Days are mutable: ingestion writes counters into days that the Series has
already created, one counter kind at a time, possibly from several sources.

The Series owns its days and keeps their dates contiguous; a Day never checks
its own date.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Optional, Union

from .errors import InvalidKindError


class DataKind(IntEnum):
    """Which counter of a Day an operation targets."""
    DEATHS = 0
    CONFIRMED = 1
    RECOVERED = 2
    TESTED = 3

    @property
    def field(self) -> str:
        return self.name.lower()


KindLike = Union[DataKind, int]


def as_kind(kind: KindLike) -> DataKind:
    """Coerce an int (or DataKind) into a DataKind, raising InvalidKindError."""
    try:
        return DataKind(kind)
    except ValueError:
        raise InvalidKindError(f"day: invalid data kind:{kind!r}") from None


@dataclass
class Day:
    """Cumulative counters for one day.

    `date` is None only for the blank sentinel returned by `Day.blank()`,
    which stands for "no data yet". A real day with zero counts always has
    a date.
    """
    date: Optional[date] = None
    deaths: int = 0
    confirmed: int = 0
    recovered: int = 0
    tested: int = 0

    @classmethod
    def blank(cls) -> "Day":
        return cls()

    @property
    def is_blank(self) -> bool:
        return self.date is None

    def value(self, kind: KindLike) -> int:
        return getattr(self, as_kind(kind).field)

    def set_data(self, kind: KindLike, value: int) -> None:
        """Overwrite the counter for kind."""
        setattr(self, as_kind(kind).field, value)

    def merge_data(self, kind: KindLike, value: int) -> None:
        """Add value onto the counter for kind."""
        f = as_kind(kind).field
        setattr(self, f, getattr(self, f) + value)

    def set_all_data(self, deaths: int, confirmed: int, recovered: int, tested: int) -> None:
        self.deaths, self.confirmed, self.recovered, self.tested = deaths, confirmed, recovered, tested

    def merge_day(self, other: "Day") -> None:
        """Add all of other's counters onto ours. Dates are not compared here."""
        self.deaths += other.deaths
        self.confirmed += other.confirmed
        self.recovered += other.recovered
        self.tested += other.tested
