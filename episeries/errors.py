"""
Errors
======

Every failure in episeries is raised to the immediate caller with enough
context (row, date or index) to log it or abort ingestion of that source.
Nothing is retried here.

- FieldParseError: a construction row could not be parsed
- AlignmentError: dates do not line up (start date, order, unset date)
- DayIndexError: a day index outside the current sequence
- InvalidKindError: a counter kind outside DataKind
"""

from __future__ import annotations
from typing import Any, Optional, Sequence


class SeriesError(Exception):
    """Base class for all episeries errors."""


class FieldParseError(SeriesError, ValueError):
    """A field of an area row could not be parsed."""

    def __init__(self, field: str, row: Sequence[Any], detail: str = "") -> None:
        self.field = field
        self.row = list(row)
        msg = f"areas: invalid {field} at row:{self.row}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class InvalidKindError(SeriesError, ValueError):
    """Counter kind is not one of DataKind."""


class AlignmentError(SeriesError, ValueError):
    """Incoming data does not line up with the day sequence."""


class StartDateMismatchError(AlignmentError):
    def __init__(self, expected: Any, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"series: mismatch on start date for data:{expected} {actual}")


class DateMismatchError(AlignmentError):
    """Two days at the same position carry different dates."""


class OutOfOrderError(AlignmentError):
    """A day was added at or before the current last day."""


class InvalidDateError(AlignmentError):
    """The unset (None) date was supplied."""


class DayIndexError(SeriesError, IndexError):
    def __init__(self, index: int, length: int, msg: Optional[str] = None) -> None:
        self.index = index
        self.length = length
        super().__init__(msg or f"series: index out of range for set day:{index} len:{length}")
