"""
episeries package
=================

Per-area daily series of cumulative epidemic counters (deaths, confirmed,
recovered, tested) and the statistics derived from them.

- The Series model (day lifecycle, merging, statistics) is in `episeries/series.py`.
- Day records and counter kinds are in `episeries/models.py`.
- Building series from area rows is in `episeries/loader.py`.
"""

from .config import SeriesConfig, get_series_config
from .errors import (
    AlignmentError,
    DateMismatchError,
    DayIndexError,
    FieldParseError,
    InvalidDateError,
    InvalidKindError,
    OutOfOrderError,
    SeriesError,
    StartDateMismatchError,
)
from .indices import AreaIndex, build_area_index
from .labels import DateLabels, format_number
from .loader import new_series, series_from_frame
from .models import DataKind, Day
from .series import Series

__version__ = '0.1.0'
