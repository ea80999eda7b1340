"""Unit tests for the plain-sequence algorithms."""

from episeries.stats import daily_deltas, from_threshold, halving_days, trailing_average


def test_daily_deltas():
    assert daily_deltas([0, 5, 12, 12, 20]) == [0, 5, 7, 0, 8]
    assert daily_deltas([3]) == [3]
    assert daily_deltas([]) == []


def test_trailing_average():
    assert trailing_average([1, 10, 16, 22]) == 4
    assert trailing_average([10, 16]) == 0


def test_trailing_average_truncates_toward_zero_on_falling_tail():
    """A downward correction gives (9 - 22) / 3 -> -4, not -5."""
    assert trailing_average([22, 20, 9]) == -4
    assert trailing_average([5, 5, 4]) == 0


def test_halving_days():
    assert halving_days([2, 3, 4, 5, 6, 10]) == 2
    assert halving_days([7]) == 0
    # every earlier day at or above half
    assert halving_days([5, 6, 8, 10]) == 3


def test_halving_days_negative_last_value():
    """Half of -3 is -1, so the earlier -2 already stops the walk."""
    assert halving_days([-2, -3]) == 0
    assert halving_days([-1, -3]) == 1


def test_from_threshold_excludes_last_value():
    assert from_threshold([0, 1, 3, 8, 13], 3) == [3, 8]
    assert from_threshold([0, 1, 2], 10) == []
    assert from_threshold([0, 1, 5], 5) == []
