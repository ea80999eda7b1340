"""Unit tests for the area lookup index."""

from episeries.indices import build_area_index


def test_find_by_human_and_slug_keys(make_series):
    uk = make_series("United Kingdom", id=826)
    ny = make_series("US", "New York", id=36)
    glob = make_series("", "", id=0)
    idx = build_area_index([uk, ny, glob])
    assert idx.find("united-kingdom") is uk
    assert idx.find("United Kingdom", "") is uk
    assert idx.find("us", "new-york") is ny
    assert idx.find("", "") is glob
    assert idx.find("Narnia") is None
    assert len(idx) == 3


def test_countries_and_provinces(make_series):
    idx = build_area_index([
        make_series("China", "Hubei", id=1),
        make_series("China", "Anhui", id=2),
        make_series("China", id=3),
        make_series("Spain", id=4),
        make_series("", "", id=0),
    ])
    assert idx.countries() == ["China", "Spain"]
    assert idx.provinces("china") == ["Anhui", "Hubei"]
    assert idx.provinces("Spain") == []


def test_duplicate_key_last_wins(make_series):
    a = make_series("Spain", id=1)
    b = make_series("spain", id=2)
    idx = build_area_index([a, b])
    assert idx.find("Spain") is b
