"""Unit tests for number formatting."""

import pytest

from episeries.labels import format_number


@pytest.mark.parametrize("n,expected", [
    (0, "0"),
    (9999, "9999"),
    (10000, "10.0k"),
    (12345, "12.3k"),
    (999949, "999.9k"),
    (1000000, "1m"),
    (1234567, "1.23m"),
    (12345678, "12.3m"),
])
def test_format_number(n, expected):
    assert format_number(n) == expected
