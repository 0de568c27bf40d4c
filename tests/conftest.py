"""Shared fixtures: SQLite stores in tmp_path and series builders."""

import pandas as pd
import pytest

from economic_pulse.data import SeriesStore
from economic_pulse.models import DataPoint, IndicatorSeries

from helpers import monthly_dates


@pytest.fixture
def store(tmp_path) -> SeriesStore:
    return SeriesStore(tmp_path / "indicators.db")


@pytest.fixture
def load_indicator(store):
    """
    Register an indicator and its values (most-recent-first) in the store.

    Dates default to month starts ending 2024-06-01.
    """
    def _load(name, values, category="employment", source="FRED", dates=None, is_active=True):
        dates = dates if dates is not None else monthly_dates(len(values))
        store.store_indicator(name, category=category, source=source, is_active=is_active)
        df = pd.DataFrame({"value": values}, index=pd.to_datetime(dates))
        store.store_observations(name, df)
        return store

    return _load


@pytest.fixture
def make_series():
    """Build an IndicatorSeries from most-recent-first values."""
    def _make(name, values, category="employment", source="FRED", dates=None, id=None):
        dates = dates if dates is not None else monthly_dates(len(values))
        return IndicatorSeries(
            name=name,
            category=category,
            source=source,
            data=[DataPoint(date=d, value=v) for d, v in zip(dates, values)],
            id=id,
        )

    return _make
