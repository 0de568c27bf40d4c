"""Tests for narrative templates and the output contract."""

import math

import pytest

from economic_pulse.analysis.narrative import (
    GENERIC_IMPLICATION,
    MAX_NARRATIVE_LENGTH,
    Narrator,
    TemplateNarrator,
    ordinal,
)
from economic_pulse.models import HealthComponents, TrendResult


@pytest.fixture
def narrator():
    return TemplateNarrator()


class TestOrdinal:
    @pytest.mark.parametrize(
        "n,expected",
        [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (93, "93rd"), (100, "100th")],
    )
    def test_suffix(self, n, expected):
        assert ordinal(n) == expected


class TestInsightNarrative:
    """Insight text reflects direction and magnitude."""

    def test_magnitude_adverbs(self, narrator):
        flat = TrendResult()

        assert "slightly" in narrator.insight_narrative("CPI", "inflation", 0.4, flat)
        assert "moderately" in narrator.insight_narrative("CPI", "inflation", 2.5, flat)
        assert "significantly" in narrator.insight_narrative("CPI", "inflation", -7.0, flat)

    def test_category_context(self, narrator):
        text = narrator.insight_narrative("CPI", "inflation", 1.2, TrendResult())

        assert "monetary policy" in text

    def test_unknown_category(self, narrator):
        text = narrator.insight_narrative("Housing Starts", "housing", 1.2, TrendResult())

        assert "warrant monitoring" in text

    def test_downward_trend_sentence(self, narrator):
        trend = TrendResult(direction="down", strength=40, duration=1)

        text = narrator.insight_narrative("CPI", "inflation", -1.2, trend)

        assert "a downward trend that has held for 1 consecutive period." in text

    def test_nan_change(self, narrator):
        text = narrator.insight_narrative("CPI", "inflation", math.nan, TrendResult())

        assert "nan" not in text
        assert "could not be compared" in text


class TestImplication:
    def test_known_category(self, narrator):
        assert "bonds" in narrator.investment_implication("employment", "falling")

    def test_stable_trend_is_generic(self, narrator):
        assert narrator.investment_implication("employment", "stable") == GENERIC_IMPLICATION

    def test_unknown_category(self, narrator):
        assert narrator.investment_implication("housing", "rising") == GENERIC_IMPLICATION


class TestHistoricalContext:
    def test_needs_ten_points(self, narrator):
        assert "Insufficient" in narrator.historical_context(5.0, [5.0, 4.0, 3.0])

    def test_near_lows(self, narrator):
        values = [100.0] + [110 + i for i in range(11)]

        text = narrator.historical_context(100.0, values)

        assert "near historical lows" in text
        assert "0th percentile" in text

    def test_within_range(self, narrator):
        values = [105.0, 100.0, 110.0] * 4

        text = narrator.historical_context(105.0, values)

        assert "normal historical range" in text

    def test_flat_history(self, narrator):
        text = narrator.historical_context(3.0, [3.0] * 12)

        assert "unchanged" in text


class TestHealthNarrative:
    def test_names_strongest_and_weakest(self, narrator):
        components = HealthComponents(
            labor_market=90, inflation=40, economic_growth=60, fiscal_health=55, market_conditions=70
        )

        text = narrator.health_narrative(65, components, "stable", "medium")

        assert text.startswith("The current economic health score is 65/100")
        assert "labor market (90/100)" in text
        assert "inflation (40/100)" in text
        assert "medium risk" in text

    @pytest.mark.parametrize(
        "score,condition",
        [(85, "strong"), (65, "moderate"), (45, "concerning"), (20, "weak")],
    )
    def test_condition(self, narrator, score, condition):
        text = narrator.health_narrative(score, HealthComponents(), "stable", "high")

        assert f"{condition} economic conditions" in text


class TestCorrelationNarrative:
    def test_positive(self, narrator):
        text = narrator.correlation_narrative("CPI", "Real GDP", 0.85, "very_strong")

        assert "very strong positive correlation (0.85)" in text
        assert "tends to increase" in text
        assert "reliable" in text

    def test_weak_negative(self, narrator):
        text = narrator.correlation_narrative("CPI", "Real GDP", -0.12, "weak")

        assert "weak negative correlation" in text
        assert "may not be reliable" in text


class TestOutputContract:
    """Every narrator's text is finalized the same way."""

    class Verbose(TemplateNarrator):
        def _compose_correlation(self, name_a, name_b, coefficient, strength):
            return "   lots   of\n\nspace. " + "Another sentence here. " * 80

    def test_whitespace_and_length(self):
        text = self.Verbose().correlation_narrative("a", "b", 0.5, "moderate")

        assert text.startswith("Lots of space.")
        assert "  " not in text
        assert len(text) < MAX_NARRATIVE_LENGTH
        assert text.endswith(".")

    def test_abstract_narrator_requires_hooks(self):
        with pytest.raises(TypeError):
            Narrator()
