"""Tests for pairwise correlation analysis."""

import sqlite3
from datetime import date

import pytest

from economic_pulse.analysis.correlations import (
    CorrelationAnalyzer,
    correlation_confidence,
    correlation_strength,
)

from helpers import InMemoryReader, daily_dates


def load_daily(load_indicator, name, chronological, category="employment", first=date(2024, 1, 1)):
    """Load values given oldest-first as consecutive daily observations."""
    values = list(chronological)[::-1]
    load_indicator(name, values, category=category, dates=daily_dates(len(values), first=first))


@pytest.fixture
def correlation_store(load_indicator, store):
    """Three indicators over the same 25 days."""
    load_daily(load_indicator, "Unemployment Rate", [4.0 + (i % 5) for i in range(25)])
    load_daily(load_indicator, "Consumer Price Index", [300 + (i % 5) for i in range(25)], category="inflation")
    load_daily(load_indicator, "Real GDP", [20_000_000 + i * 10_000 for i in range(25)], category="economic_growth")
    return store


class TestAnalyzeCorrelations:
    """Pairs with enough aligned history."""

    def test_key_pairs(self, correlation_store):
        result = CorrelationAnalyzer(correlation_store).analyze_correlations()

        assert len(result) == 2
        for correlation in result:
            assert -1 <= correlation.correlation_coeff <= 1
            assert correlation.strength in ("weak", "moderate", "strong", "very_strong")
            assert correlation.direction in ("positive", "negative")
            assert 0 < correlation.confidence <= 100
            assert "correlation" in correlation.narrative

    def test_sorted_by_absolute_coefficient(self, correlation_store):
        result = CorrelationAnalyzer(correlation_store).analyze_correlations()

        magnitudes = [abs(c.correlation_coeff) for c in result]
        assert magnitudes == sorted(magnitudes, reverse=True)
        assert {result[0].indicator_a_name, result[0].indicator_b_name} == {
            "Unemployment Rate",
            "Consumer Price Index",
        }

    def test_identical_pattern_is_perfect(self, correlation_store):
        top = CorrelationAnalyzer(correlation_store).analyze_correlations()[0]

        assert top.correlation_coeff == pytest.approx(1.0)
        assert top.strength == "very_strong"
        assert top.direction == "positive"
        assert top.sample_size == 24

    def test_strength_matches_coefficient(self, correlation_store):
        for corr in CorrelationAnalyzer(correlation_store).analyze_correlations():
            assert corr.strength == correlation_strength(abs(corr.correlation_coeff))

    def test_perfect_linear(self, load_indicator, store):
        load_daily(load_indicator, "Unemployment Rate", [1 + i for i in range(25)])
        load_daily(load_indicator, "Consumer Price Index", [2 + i * 2 for i in range(25)], category="inflation")

        result = CorrelationAnalyzer(store).analyze_correlations()

        assert len(result) == 1
        assert result[0].correlation_coeff == pytest.approx(1.0, abs=0.05)
        assert result[0].direction == "positive"
        assert result[0].strength == "very_strong"

    def test_negative_relationship(self, load_indicator, store):
        load_daily(load_indicator, "Unemployment Rate", [10 - i * 0.1 for i in range(25)])
        load_daily(load_indicator, "Real GDP", [20_000 + i * 50 + (i % 3) for i in range(25)], category="economic_growth")

        result = CorrelationAnalyzer(store).analyze_correlations()

        assert len(result) == 1
        assert result[0].correlation_coeff < -0.9
        assert result[0].direction == "negative"
        assert "tends to decrease" in result[0].narrative

    def test_window_caps_sample_size(self, load_indicator, store):
        load_daily(load_indicator, "Unemployment Rate", [float(i % 7) for i in range(100)])
        load_daily(load_indicator, "Consumer Price Index", [float(i % 5) for i in range(100)], category="inflation")

        result = CorrelationAnalyzer(store).analyze_correlations()

        assert result[0].sample_size == 24
        assert result[0].confidence >= 50

    def test_window_uses_most_recent_dates(self, load_indicator, store):
        # 40 shared days: the newest 24 move together, the oldest 16 move opposite
        unemployment = [float((i * 37) % 11) for i in range(40)]
        cpi = [2 * u + 1 if i >= 16 else -u for i, u in enumerate(unemployment)]
        load_daily(load_indicator, "Unemployment Rate", unemployment)
        load_daily(load_indicator, "Consumer Price Index", cpi, category="inflation")

        result = CorrelationAnalyzer(store).analyze_correlations()

        assert len(result) == 1
        assert result[0].sample_size == 24
        assert result[0].correlation_coeff == pytest.approx(1.0)
        assert result[0].direction == "positive"

    def test_to_dict_field_names(self, correlation_store):
        payload = CorrelationAnalyzer(correlation_store).analyze_correlations()[0].to_dict()

        for key in ("indicatorAName", "indicatorBName", "correlationCoeff", "strength", "confidence", "sampleSize"):
            assert key in payload

    def test_custom_pairs(self, correlation_store):
        analyzer = CorrelationAnalyzer(correlation_store, pairs=[("Real GDP", "Consumer Price Index")])

        result = analyzer.analyze_correlations()

        assert len(result) == 1
        assert result[0].indicator_a_name == "Real GDP"


class TestInsufficientData:
    """Pairs without enough history are skipped."""

    def test_five_points(self, load_indicator, store):
        load_daily(load_indicator, "Unemployment Rate", [4.0 + (i % 5) for i in range(5)])
        load_daily(load_indicator, "Consumer Price Index", [300 + (i % 5) for i in range(5)], category="inflation")

        assert CorrelationAnalyzer(store).analyze_correlations() == []

    def test_twenty_points_is_not_enough(self, load_indicator, store):
        load_daily(load_indicator, "Unemployment Rate", [float(i) for i in range(20)])
        load_daily(load_indicator, "Consumer Price Index", [float(i) for i in range(20)], category="inflation")

        assert CorrelationAnalyzer(store).analyze_correlations() == []

    def test_no_overlapping_dates(self, load_indicator, store):
        load_daily(load_indicator, "Unemployment Rate", [float(i % 4) for i in range(25)])
        load_daily(
            load_indicator,
            "Consumer Price Index",
            [float(i % 3) for i in range(25)],
            category="inflation",
            first=date(2023, 1, 1),
        )

        assert CorrelationAnalyzer(store).analyze_correlations() == []

    def test_partial_overlap_below_minimum(self, load_indicator, store):
        load_daily(load_indicator, "Unemployment Rate", [float(i % 4) for i in range(25)])
        load_daily(
            load_indicator,
            "Consumer Price Index",
            [float(i % 3) for i in range(25)],
            category="inflation",
            first=date(2024, 1, 10),
        )

        # Only 16 shared days
        assert CorrelationAnalyzer(store).analyze_correlations() == []

    def test_constant_series_is_weak(self, load_indicator, store):
        load_daily(load_indicator, "Unemployment Rate", [4.0] * 25)
        load_daily(load_indicator, "Consumer Price Index", [float(i) for i in range(25)], category="inflation")

        result = CorrelationAnalyzer(store).analyze_correlations()

        assert result[0].correlation_coeff == 0
        assert result[0].strength == "weak"

    def test_empty_store(self, store):
        assert CorrelationAnalyzer(store).analyze_correlations() == []


class TestFailures:
    """Any failure yields an empty list."""

    def test_database_error(self):
        reader = InMemoryReader(error=sqlite3.OperationalError("Database error"))

        assert CorrelationAnalyzer(reader).analyze_correlations() == []


class TestHelpers:
    """Strength and confidence helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0.95, "very_strong"), (0.8, "very_strong"), (0.79, "strong"), (0.6, "strong"), (0.45, "moderate"), (0.3, "moderate"), (0.29, "weak"), (0.0, "weak")],
    )
    def test_strength(self, value, expected):
        assert correlation_strength(value) == expected

    def test_confidence_bounds(self):
        assert correlation_confidence(0, 0.9, 24) == 0
        assert correlation_confidence(24, 1.0, 24) == 100
        assert correlation_confidence(48, -1.0, 24) == 100
        assert 0 < correlation_confidence(20, 0.1, 24) <= 100

    def test_confidence_grows_with_sample_and_strength(self):
        assert correlation_confidence(20, 0.5, 24) < correlation_confidence(24, 0.5, 24)
        assert correlation_confidence(24, 0.3, 24) < correlation_confidence(24, 0.9, 24)
