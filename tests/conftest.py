# tests/conftest.py
from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure the `episeries` package is importable when running tests from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def epoch() -> date:
    return date(2020, 1, 22)


@pytest.fixture
def config(epoch):
    from episeries.config import SeriesConfig
    return SeriesConfig(start_date=epoch)


@pytest.fixture
def make_series(config):
    """Factory for empty series sharing the test epoch."""
    from episeries.series import Series

    def _make(country: str = "France", province: str = "", id: int = 1):
        return Series(id=id, country=country, province=province, config=config)

    return _make
