"""
Series (one area's daily record)
================================

This is the heart of the package. A Series is:

1) Area identity + metadata (id, country, province, population, ...)
2) An ordered list of Day records, index 0 = earliest date
3) Mutations that grow and fill that list while keeping dates contiguous
4) Read-only statistics computed from the list

Growth rules:
- `add_days` is the normal way to grow: it appends blank days, continuing
  from the last date, or starting at `config.start_date` when empty.
- `add_day` appends one explicit day and only checks it comes after the last.
- `set_data` / `merge_data` / `merge_series` extend with `add_days` first, so
  they assume incoming data starts where this series starts.

Reads never fail on short series: they fall back to the blank day, 0 or [].
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence, Union

import pandas as pd

from .config import SeriesConfig, get_series_config
from .errors import (
    DateMismatchError,
    DayIndexError,
    InvalidDateError,
    OutOfOrderError,
    StartDateMismatchError,
)
from .labels import DateLabels, day_labels, format_number
from .log import get_logger
from .models import DataKind, Day, KindLike, as_kind
from .stats import daily_deltas, from_threshold, halving_days, trailing_average

logger = get_logger(__name__)

DateLike = Union[date, datetime]

EUROPEAN_COUNTRIES = frozenset({
    "United Kingdom", "France", "Italy", "Belgium", "Spain",
    "Germany", "Netherlands", "Switzerland", "Sweden", "Portugal",
})


def _as_date(d: Optional[DateLike]) -> Optional[date]:
    # datetime is a subclass of date; keep the calendar day only
    if isinstance(d, datetime):
        return d.date()
    return d


def key(v: str) -> str:
    """Convert a value into one suitable for use in urls."""
    return v.lower().replace(" ", "-")


@dataclass
class Series:
    """Daily cumulative counters for one country, province or the globe.

    `province` is empty for a country; both `country` and `province` are empty
    for the global aggregate.
    """
    id: int
    country: str = ""
    province: str = ""
    population: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    color: str = ""
    # UTC time data was last updated (None until set)
    updated_at: Optional[datetime] = None
    # Date a full area lockdown started (None if none recorded)
    lockdown_at: Optional[date] = None
    days: List[Day] = field(default_factory=list)
    config: SeriesConfig = field(default_factory=get_series_config, repr=False)

    # ---------------- Identity ----------------
    def __str__(self) -> str:
        if self.is_global():
            return f"Global ({len(self.days)})"
        if self.province == "":
            return f"{self.country} ({len(self.days)})"
        return f"{self.province}, {self.country} ({len(self.days)})"

    def __len__(self) -> int:
        return len(self.days)

    def title(self) -> str:
        """Display title for this series."""
        if self.is_global():
            return "Global"
        if self.is_country():
            return self.country
        return f"{self.province} ({self.country})"

    def is_global(self) -> bool:
        return self.country == "" and self.province == ""

    def is_country(self) -> bool:
        return not self.is_global() and not self.is_province()

    def is_province(self) -> bool:
        return self.country != "" and self.province != ""

    def is_european(self) -> bool:
        """True for a European country; provinces never count."""
        if self.province != "":
            return False
        return self.country in EUROPEAN_COUNTRIES

    def valid(self) -> bool:
        """A series without days is considered invalid."""
        return len(self.days) > 0

    def key(self, v: str) -> str:
        return key(v)

    def match(self, country: str, province: str) -> bool:
        """Case-insensitive match on country and province."""
        return self.match_country(country) and self.match_province(province)

    def match_country(self, country: str) -> bool:
        return key(self.country) == key(country)

    def match_province(self, province: str) -> bool:
        return key(self.province) == key(province)

    def format(self, i: int) -> str:
        return format_number(i)

    def set_updated(self, updated: datetime) -> None:
        """Move updated_at forward; older timestamps are ignored."""
        if self.updated_at is None or self.updated_at < updated:
            self.updated_at = updated

    # ---------------- Day sequence ----------------
    def count(self) -> int:
        return len(self.days)

    def last_day(self) -> Day:
        """The last day, or the blank day if there are none."""
        if not self.days:
            return Day.blank()
        return self.days[-1]

    def penultimate_day(self) -> Day:
        """The second-last day, or the blank day if there are fewer than two."""
        if len(self.days) < 2:
            return Day.blank()
        return self.days[-2]

    def add_days(self, count: int) -> None:
        """Append `count` blank days after the last day (or from the start date)."""
        d = self.config.start_date
        if self.days:
            d = self.days[-1].date + timedelta(days=1)
        logger.debug("%s: adding %d days from %s", self, count, d)
        for _ in range(count):
            self.days.append(Day(date=d))
            d += timedelta(days=1)

    def add_day(self, day_date: Optional[DateLike], deaths: int = 0, confirmed: int = 0,
                recovered: int = 0, tested: int = 0) -> Day:
        """Append one day with explicit values.

        The date must be set (not None or date.min) and strictly after the
        current last day.
        """
        d = _as_date(day_date)
        if d is None or d == date.min:
            raise InvalidDateError("series: invalid zero date in add_day")
        if self.days and not self.days[-1].date < d:
            raise OutOfOrderError(
                f"series: invalid date added:{d} last:{self.days[-1].date}")
        day = Day(date=d, deaths=deaths, confirmed=confirmed, recovered=recovered, tested=tested)
        self.days.append(day)
        return day

    def set_day_data(self, day_no: int, deaths: int, confirmed: int, recovered: int, tested: int) -> None:
        """Set all counters of an existing day (day_no is one-based).

        The day must already exist; use add_days first if required.
        """
        index = day_no - 1
        if index < 0 or index > len(self.days) - 1:
            raise DayIndexError(index, len(self.days))
        self.days[index].set_all_data(deaths, confirmed, recovered, tested)

    # ---------------- Bulk application ----------------
    def _prepare(self, start_date: DateLike, n: int) -> None:
        # Extension is kept even if the start date check below fails
        if len(self.days) < n:
            self.add_days(n - len(self.days))
        start = _as_date(start_date)
        if self.days and self.days[0].date != start:
            raise StartDateMismatchError(start, self.days[0].date)

    def set_data(self, start_date: DateLike, kind: KindLike, values: Sequence[int]) -> None:
        """Overwrite one counter kind day by day, starting at start_date."""
        kind = as_kind(kind)
        self._prepare(start_date, len(values))
        for day, v in zip(self.days, values):
            day.set_data(kind, v)

    def merge_data(self, start_date: DateLike, kind: KindLike, values: Sequence[int]) -> None:
        """Add one counter kind day by day onto existing counts."""
        kind = as_kind(kind)
        self._prepare(start_date, len(values))
        for day, v in zip(self.days, values):
            day.merge_data(kind, v)

    def merge_series(self, other: "Series") -> None:
        """Add another series' counters onto ours, day by day.

        Both series are assumed to start on the same date. Days of `other`
        beyond our length are ignored.
        """
        if len(self.days) < len(other.days):
            self.add_days(len(other.days) - len(self.days))

        n = min(len(self.days), len(other.days))
        for i in range(n):
            if self.days[i].date != other.days[i].date:
                raise DateMismatchError(
                    f"series: date mismatch merging {other} into {self} at day:{i} "
                    f"{other.days[i].date} {self.days[i].date}")

        if len(other.days) > n:
            logger.debug("%s: ignoring %d overflow days from %s", self, len(other.days) - n, other)

        for day, incoming in zip(self.days, other.days[:n]):
            day.merge_day(incoming)

    # ---------------- Derived statistics ----------------
    def values(self, kind: KindLike) -> List[int]:
        """Cumulative values of one counter kind, in date order."""
        f = as_kind(kind).field
        return [getattr(day, f) for day in self.days]

    def daily(self, kind: KindLike) -> List[int]:
        return daily_deltas(self.values(kind))

    def deaths(self) -> List[int]:
        return self.values(DataKind.DEATHS)

    def confirmed(self) -> List[int]:
        return self.values(DataKind.CONFIRMED)

    def recovered(self) -> List[int]:
        return self.values(DataKind.RECOVERED)

    def tested(self) -> List[int]:
        return self.values(DataKind.TESTED)

    def deaths_daily(self) -> List[int]:
        return self.daily(DataKind.DEATHS)

    def confirmed_daily(self) -> List[int]:
        return self.daily(DataKind.CONFIRMED)

    def total_deaths(self) -> int:
        return self.last_day().deaths

    def total_confirmed(self) -> int:
        return self.last_day().confirmed

    def total_recovered(self) -> int:
        return self.last_day().recovered

    def total_tested(self) -> int:
        return self.last_day().tested

    def deaths_today(self) -> int:
        """Deaths on the last day minus the day before."""
        return self.last_day().deaths - self.penultimate_day().deaths

    def confirmed_today(self) -> int:
        return self.last_day().confirmed - self.penultimate_day().confirmed

    def average_deaths(self) -> int:
        """Average deaths per day over the last 3 days (0 if fewer)."""
        return trailing_average(self.deaths(), 3)

    def average_confirmed(self) -> int:
        return trailing_average(self.confirmed(), 3)

    def _halving(self, kind: DataKind) -> int:
        if not self.days:
            raise DayIndexError(-1, 0, f"series: doubling days needs at least one day in {self}")
        return halving_days(self.values(kind))

    def double_death_days(self) -> int:
        """Days since deaths were about half of today's total."""
        return self._halving(DataKind.DEATHS)

    def double_confirmed_days(self) -> int:
        return self._halving(DataKind.CONFIRMED)

    def fetch_date(self, day_date: DateLike, kind: KindLike) -> int:
        """Counter of kind on the given date, or 0 if we have no such day."""
        d = _as_date(day_date)
        kind = as_kind(kind)
        for day in self.days:
            if day.date == d:
                return day.value(kind)
        return 0

    def deaths_from(self, n: int) -> List[int]:
        """Cumulative deaths from the first day with at least n deaths.

        The last day is not included.
        """
        return from_threshold(self.deaths(), n)

    def days_from(self, values: Sequence[object]) -> List[str]:
        return day_labels(values)

    def dates(self) -> DateLabels:
        """Short date labels, e.g. 'Jan 22', one per day."""
        return DateLabels(self.days, self.config.date_label_format)

    def to_frame(self) -> pd.DataFrame:
        """One row per day: date, cumulative counters and daily deltas."""
        df = pd.DataFrame(
            {
                "date": [day.date for day in self.days],
                "deaths": self.deaths(),
                "confirmed": self.confirmed(),
                "recovered": self.recovered(),
                "tested": self.tested(),
            },
            columns=["date", "deaths", "confirmed", "recovered", "tested"],
        )
        df["deaths_daily"] = self.deaths_daily()
        df["confirmed_daily"] = self.confirmed_daily()
        return df
