"""Unit tests for Day and DataKind."""

from datetime import date

import pytest

from episeries.errors import InvalidKindError
from episeries.models import DataKind, Day


def test_set_data_overwrites_named_counter():
    day = Day(date=date(2020, 3, 1), deaths=4, confirmed=10)
    day.set_data(DataKind.DEATHS, 7)
    assert day.deaths == 7
    assert day.confirmed == 10


def test_set_data_accepts_plain_int_kind():
    day = Day(date=date(2020, 3, 1))
    day.set_data(3, 99)
    assert day.tested == 99


def test_merge_data_adds():
    day = Day(date=date(2020, 3, 1), recovered=5)
    day.merge_data(DataKind.RECOVERED, 3)
    day.merge_data(DataKind.RECOVERED, 3)
    assert day.recovered == 11


@pytest.mark.parametrize("kind", [-1, 4, 42])
def test_invalid_kind_rejected(kind):
    day = Day(date=date(2020, 3, 1))
    with pytest.raises(InvalidKindError):
        day.set_data(kind, 1)
    with pytest.raises(InvalidKindError):
        day.merge_data(kind, 1)
    assert day == Day(date=date(2020, 3, 1))


def test_set_all_data():
    day = Day(date=date(2020, 3, 1), deaths=1, confirmed=1, recovered=1, tested=1)
    day.set_all_data(2, 30, 4, 500)
    assert (day.deaths, day.confirmed, day.recovered, day.tested) == (2, 30, 4, 500)


def test_merge_day_ignores_dates():
    a = Day(date=date(2020, 3, 1), deaths=1, confirmed=2, recovered=3, tested=4)
    b = Day(date=date(2021, 1, 1), deaths=10, confirmed=20, recovered=30, tested=40)
    a.merge_day(b)
    assert (a.deaths, a.confirmed, a.recovered, a.tested) == (11, 22, 33, 44)
    assert a.date == date(2020, 3, 1)


def test_blank_day_is_distinct_from_zero_day():
    blank = Day.blank()
    zero = Day(date=date(2020, 3, 1))
    assert blank.is_blank
    assert not zero.is_blank
    assert blank.deaths == zero.deaths == 0


def test_value_reads_counter():
    day = Day(date=date(2020, 3, 1), deaths=1, confirmed=2, recovered=3, tested=4)
    assert [day.value(k) for k in DataKind] == [1, 2, 3, 4]
