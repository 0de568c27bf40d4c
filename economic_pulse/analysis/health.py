"""Composite economic health score from five weighted components."""

import logging
import math

import numpy as np

from economic_pulse.analysis.narrative import Narrator, TemplateNarrator
from economic_pulse.analysis.statistics import determine_trend, percent_change
from economic_pulse.config import HEALTH_INDICATORS, Settings
from economic_pulse.data.store import SeriesReader, SeriesStore
from economic_pulse.models import EconomicHealthScore, HealthComponents, IndicatorSeries


logger = logging.getLogger(__name__)


# Component weights for the overall score
WEIGHTS = {
    "laborMarket": 0.25,
    "inflation": 0.20,
    "economicGrowth": 0.25,
    "fiscalHealth": 0.15,
    "marketConditions": 0.15,
}

NEUTRAL_SCORE = 50.0

# Overall score -> risk level (inclusive lower bounds, checked top-down)
RISK_LEVELS = [
    (80, "low"),
    (60, "medium"),
    (40, "high"),
    (0, "critical"),
]


def _clamp(value: float) -> float:
    return float(np.clip(value, 0.0, 100.0))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def overall_score(components: HealthComponents) -> int:
    """Weighted blend of the five components, rounded half up."""
    scores = components.to_dict()
    return _round_half_up(sum(scores[key] * weight for key, weight in WEIGHTS.items()))


def assess_risk_level(score: float) -> str:
    for lower_bound, level in RISK_LEVELS:
        if score >= lower_bound:
            return level
    return "critical"


class HealthScoreCalculator:
    """Scores labor market, inflation, growth, fiscal health and markets."""

    LOOKBACK_POINTS = 13  # Monthly CPI: current reading plus ~one year back
    FISCAL_MIN_POINTS = 4
    MARKET_TREND_POINTS = 6
    TREND_BAND = 5.0  # Components within +/- band of neutral count as neither

    def __init__(
        self,
        store: SeriesReader | None = None,
        settings: Settings | None = None,
        narrator: Narrator | None = None,
    ) -> None:
        if store is None:
            settings = settings or Settings()
            store = SeriesStore(settings.db_path)
        self.store = store
        self.narrator = narrator or TemplateNarrator()

    # ------------------------------------------------------------------
    # Component scores
    # ------------------------------------------------------------------

    def _labor_market_score(self, unemployment: IndicatorSeries | None) -> float:
        """
        Lower unemployment = higher score.

        3% maps to 100, 10% maps to 0.
        """
        if unemployment is None or len(unemployment.data) == 0:
            return NEUTRAL_SCORE
        rate = unemployment.values[0]
        return _clamp(100 - (rate - 3) * 100 / 7)

    def _inflation_score(self, cpi: IndicatorSeries | None) -> float:
        """
        Distance of year-over-year CPI inflation from a 2% target.

        The oldest fetched observation stands in for the year-ago reading.
        """
        if cpi is None or len(cpi.data) < 2:
            return NEUTRAL_SCORE
        values = cpi.values
        yoy = percent_change(values[-1], values[0])
        return _clamp(100 - abs(yoy - 2) * 10)

    def _growth_score(self, gdp: IndicatorSeries | None) -> float:
        """Period-over-period GDP growth, centred on 50."""
        if gdp is None or len(gdp.data) < 2:
            return NEUTRAL_SCORE
        values = gdp.values
        growth = percent_change(values[1], values[0])
        return _clamp(50 + growth * 12.5)

    def _fiscal_health_score(self, budget: IndicatorSeries | None) -> float:
        """
        Where the latest budget balance sits within its own fetched history.

        0 = worst balance on record, 100 = best. Needs a few observations.
        """
        if budget is None or len(budget.data) < self.FISCAL_MIN_POINTS:
            return NEUTRAL_SCORE
        values = np.asarray(budget.values, dtype=float)
        current = values[0]
        return _clamp((values < current).sum() / (len(values) - 1) * 100)

    def _market_score(self, sp500: IndicatorSeries | None) -> float:
        """Six-period equity trend: up adds half its strength, down subtracts it."""
        if sp500 is None or len(sp500.data) < self.MARKET_TREND_POINTS:
            return NEUTRAL_SCORE
        trend = determine_trend(sp500.values[: self.MARKET_TREND_POINTS])
        if trend.direction == "up":
            return _clamp(NEUTRAL_SCORE + trend.strength / 2)
        if trend.direction == "down":
            return _clamp(NEUTRAL_SCORE - trend.strength / 2)
        return NEUTRAL_SCORE

    def _health_trend(self, components: HealthComponents) -> str:
        """Majority of components above (below) neutral -> improving (deteriorating)."""
        scores = list(components.to_dict().values())
        above = sum(1 for s in scores if s > NEUTRAL_SCORE + self.TREND_BAND)
        below = sum(1 for s in scores if s < NEUTRAL_SCORE - self.TREND_BAND)
        majority = len(scores) // 2 + 1

        if above >= majority:
            return "improving"
        if below >= majority:
            return "deteriorating"
        return "stable"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fetch_health_indicators(self) -> dict[str, IndicatorSeries]:
        """Health indicators present in the store, keyed by name."""
        series = self.store.list_indicators_by_names(
            HEALTH_INDICATORS.values(), limit=self.LOOKBACK_POINTS
        )
        return {s.name: s for s in series}

    def score_indicators(self, indicators: dict[str, IndicatorSeries]) -> EconomicHealthScore:
        """Compute the health score from already-fetched indicators."""
        components = HealthComponents(
            labor_market=self._labor_market_score(indicators.get(HEALTH_INDICATORS["laborMarket"])),
            inflation=self._inflation_score(indicators.get(HEALTH_INDICATORS["inflation"])),
            economic_growth=self._growth_score(indicators.get(HEALTH_INDICATORS["economicGrowth"])),
            fiscal_health=self._fiscal_health_score(indicators.get(HEALTH_INDICATORS["fiscalHealth"])),
            market_conditions=self._market_score(indicators.get(HEALTH_INDICATORS["marketConditions"])),
        )

        score = overall_score(components)
        trend = self._health_trend(components)
        risk_level = assess_risk_level(score)

        return EconomicHealthScore(
            overall_score=score,
            components=components,
            narrative=self.narrator.health_narrative(score, components, trend, risk_level),
            trend=trend,
            risk_level=risk_level,
        )

    def calculate_economic_health_score(self) -> EconomicHealthScore:
        """
        Calculate the composite health score.

        Missing indicators score a neutral 50. Store failures are not
        swallowed: they propagate to the caller.
        """
        try:
            indicators = self.fetch_health_indicators()
            result = self.score_indicators(indicators)
        except Exception as e:
            logger.error(f"Failed to calculate economic health score: {e}")
            raise

        logger.info(
            f"Health score {result.overall_score}/100 ({result.risk_level} risk) "
            f"from {len(indicators)}/{len(HEALTH_INDICATORS)} indicators"
        )
        return result
