"""
Configuration
=============

The default start date (the "epoch") of every series is configuration, not
hidden module state. A `SeriesConfig` is handed to each Series when it is
built, so callers and tests can pick their own epoch.

Environment overrides:
- EPISERIES_START_DATE   YYYY-MM-DD, default 2020-01-22
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

DEFAULT_START_DATE = date(2020, 1, 22)

# English month names, independent of LC_TIME
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Month abbreviation + unpadded day, e.g. "Jan 2".
# Formatted with d=<date> and month=<MONTH_ABBR entry>.
DEFAULT_DATE_LABEL_FORMAT = "{month} {d.day}"


@dataclass(frozen=True)
class SeriesConfig:
    """Settings shared by every Series built from it."""
    start_date: date = DEFAULT_START_DATE
    date_label_format: str = DEFAULT_DATE_LABEL_FORMAT


def get_series_config(start_date: Optional[str] = None) -> SeriesConfig:
    """Build a SeriesConfig, reading EPISERIES_START_DATE when no start is given."""
    raw = start_date or os.getenv("EPISERIES_START_DATE")
    if not raw:
        return SeriesConfig()
    try:
        start = datetime.strptime(raw.strip(), "%Y-%m-%d").date()
    except ValueError as e:
        raise ValueError(f"config: invalid start date {raw!r}, expected YYYY-MM-DD") from e
    return SeriesConfig(start_date=start)
