"""Test helpers: date builders and an in-memory series reader."""

from datetime import date, timedelta

import pandas as pd

from economic_pulse.models import IndicatorSeries


def monthly_dates(n: int, latest: date = date(2024, 6, 1)) -> list[date]:
    """n month-start dates, most-recent-first."""
    return [d.date() for d in pd.date_range(end=latest, periods=n, freq="MS")][::-1]


def daily_dates(n: int, first: date = date(2024, 1, 1)) -> list[date]:
    """n consecutive days starting at ``first``, most-recent-first."""
    return [first + timedelta(days=i) for i in range(n)][::-1]


class InMemoryReader:
    """Series reader backed by a dict; raises ``error`` on every call if set."""

    def __init__(self, series: list[IndicatorSeries] | None = None, error: Exception | None = None):
        self.series = {s.name: s for s in (series or [])}
        self.error = error

    def _check(self) -> None:
        if self.error is not None:
            raise self.error

    def _limited(self, s: IndicatorSeries, limit: int | None) -> IndicatorSeries:
        data = s.data if limit is None else s.data[:limit]
        return IndicatorSeries(name=s.name, category=s.category, source=s.source, data=data, id=s.id)

    def get_indicator_by_name(self, name, limit=None):
        self._check()
        s = self.series.get(name)
        return self._limited(s, limit) if s is not None else None

    def list_indicators_by_names(self, names, limit=None):
        self._check()
        return [self._limited(self.series[n], limit) for n in names if n in self.series]

    def find_related(self, category, source, exclude=None, limit=5):
        self._check()
        return [
            s.name
            for s in self.series.values()
            if s.name != exclude and (s.category == category or s.source == source)
        ][:limit]

    def list_active_names(self):
        self._check()
        return list(self.series)
