"""
Area loader (row -> Series)
===========================

Each area row is converted into an empty `Series` (no days yet). Counter data
is applied later by the ingestion side with `set_data` / `merge_data`.

Row layout (8 fields, in order):

    country, province, area id, latitude, longitude, population,
    lockdown date (YYYY-MM-DD or empty), color

Key ideas:
- Parsing failures raise FieldParseError naming the field and the row.
- `series_from_frame` accepts an in-memory pandas table of areas and tries a
  few column names per field, so slightly different exports still load.
"""

from __future__ import annotations
from datetime import datetime
from typing import List, Optional, Sequence
import re

import pandas as pd

from .config import SeriesConfig, get_series_config
from .errors import FieldParseError
from .series import Series

ROW_FIELDS = ("country", "province", "area id", "latitude", "longitude",
              "population", "lockdown", "color")

def _parse_int(row: Sequence[str], i: int) -> int:
    try:
        return int(row[i])
    except ValueError:
        raise FieldParseError(ROW_FIELDS[i], row) from None

def _parse_float(row: Sequence[str], i: int) -> float:
    try:
        return float(row[i])
    except ValueError:
        raise FieldParseError(ROW_FIELDS[i], row) from None

def new_series(row: Sequence[str], config: Optional[SeriesConfig] = None) -> Series:
    """Build an empty Series from one 8-field area row."""
    if len(row) != len(ROW_FIELDS):
        raise FieldParseError("row", row, f"expected {len(ROW_FIELDS)} fields, got {len(row)}")
    row = [str(v).strip() for v in row]

    # Fields are checked in row order; the first bad one is reported
    area_id = _parse_int(row, 2)
    latitude = _parse_float(row, 3)
    longitude = _parse_float(row, 4)
    population = _parse_int(row, 5)

    lockdown = None
    if row[6] != "":
        try:
            lockdown = datetime.strptime(row[6], "%Y-%m-%d").date()
        except ValueError:
            raise FieldParseError("lockdown", row) from None

    # NB updated_at is left unset
    return Series(
        id=area_id,
        country=row[0],
        province=row[1],
        latitude=latitude,
        longitude=longitude,
        population=population,
        color=row[7],
        lockdown_at=lockdown,
        config=config or get_series_config(),
    )

# ---------------- pandas adapter ----------------
def _to_str(x) -> str:
    """Cell to stripped string; blanks and NaN become ''."""
    if pd.isna(x): return ""
    # whole floats come back from pandas for int columns with gaps
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x).strip()

def _norm(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "", str(s).lower())

def _col(df: pd.DataFrame, *names: str) -> str:
    cols = list(df.columns)
    for n in names:
        if n in cols:
            return n
    norm_map = {_norm(c): c for c in cols}
    for n in names:
        nn = _norm(n)
        if nn in norm_map:
            return norm_map[nn]
    raise KeyError(f"Missing required column. Tried={names}. Available={cols}")

def series_from_frame(df: pd.DataFrame, config: Optional[SeriesConfig] = None) -> List[Series]:
    """Build one empty Series per row of an area table."""
    config = config or get_series_config()
    cols = [
        _col(df, "Country", "Country/Region", "Country_Region"),
        _col(df, "Province", "Province/State", "Province_State"),
        _col(df, "ID", "Area ID", "AreaID", "UID"),
        _col(df, "Latitude", "Lat"),
        _col(df, "Longitude", "Long", "Long_", "Lon"),
        _col(df, "Population"),
        _col(df, "Lockdown", "Lockdown At", "LockdownAt"),
        _col(df, "Color", "Colour"),
    ]

    out: List[Series] = []
    for _, r in df.iterrows():
        out.append(new_series([_to_str(r[c]) for c in cols], config=config))
    return out
