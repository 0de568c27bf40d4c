"""Combined reports built on the three core analyses."""

import logging

from economic_pulse.analysis.correlations import CorrelationAnalyzer
from economic_pulse.analysis.health import HealthScoreCalculator
from economic_pulse.analysis.insights import InsightGenerator
from economic_pulse.analysis.narrative import Narrator, TemplateNarrator
from economic_pulse.analysis.significance import SIGNIFICANCE_ORDER
from economic_pulse.config import HEALTH_INDICATORS, KEY_INSIGHT_INDICATORS, Settings
from economic_pulse.data.store import SeriesReader, SeriesStore
from economic_pulse.models import (
    AnalysisSummary,
    CorrelationAnalysis,
    EconomicHealthScore,
    EconomicInsight,
    MarketSignal,
)


logger = logging.getLogger(__name__)


RECESSION_SCORE_THRESHOLD = 40  # Overall score below this raises recession risk
STRONG_CORRELATION_THRESHOLD = 0.7
TOP_CORRELATIONS = 5


class AnalysisReporter:
    """Batch insights, market signals and the analysis summary."""

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
        narrator = narrator or TemplateNarrator()
        self.insights = InsightGenerator(store, narrator=narrator)
        self.health = HealthScoreCalculator(store, narrator=narrator)
        self.correlations = CorrelationAnalyzer(store, narrator=narrator)

    def generate_insights(self, limit: int = 10) -> list[EconomicInsight]:
        """Insights for the first ``limit`` active indicators, most significant first."""
        names = self.store.list_active_names()[:limit]

        insights = []
        for name in names:
            insight = self.insights.generate_economic_insight(name)
            if insight is not None:
                insights.append(insight)

        insights.sort(key=lambda i: SIGNIFICANCE_ORDER[i.significance], reverse=True)
        return insights

    def _signals_from(
        self, health: EconomicHealthScore, correlations: list[CorrelationAnalysis]
    ) -> list[MarketSignal]:
        signals = []

        if health.overall_score < RECESSION_SCORE_THRESHOLD:
            signals.append(
                MarketSignal(
                    type="recession_risk",
                    strength=float(100 - health.overall_score),
                    confidence=75.0,
                    narrative=(
                        "The economic health score indicates elevated recession risk "
                        "based on several deteriorating indicators."
                    ),
                    trigger_indicators=["Overall Health Score"],
                    historical_precedent=(
                        "Similar readings preceded economic downturns in the historical data."
                    ),
                )
            )

        strong = [
            c for c in correlations if abs(c.correlation_coeff) > STRONG_CORRELATION_THRESHOLD
        ]
        if strong:
            signals.append(
                MarketSignal(
                    type="correlation_alert",
                    strength=float(min(100, len(strong) * 20)),
                    confidence=80.0,
                    narrative=(
                        f"{len(strong)} strong correlation{'s' if len(strong) != 1 else ''} "
                        "detected between key economic indicators."
                    ),
                    trigger_indicators=[
                        f"{c.indicator_a_name}-{c.indicator_b_name}" for c in strong
                    ],
                    historical_precedent=(
                        "Strong correlations often indicate synchronized economic movements."
                    ),
                )
            )

        return signals

    def market_signals(self) -> list[MarketSignal]:
        """Warnings derived from the health score and correlation results."""
        health = self.health.calculate_economic_health_score()
        correlations = self.correlations.analyze_correlations()
        return self._signals_from(health, correlations)

    def build_summary(self) -> AnalysisSummary:
        """
        Health score, strongest correlations and key indicator insights.

        Health score failures propagate; the other parts degrade to empty.
        """
        indicators = self.health.fetch_health_indicators()
        health = self.health.score_indicators(indicators)
        correlations = self.correlations.analyze_correlations()

        key_insights = []
        for name in KEY_INSIGHT_INDICATORS:
            insight = self.insights.generate_economic_insight(name)
            if insight is not None:
                key_insights.append(insight)

        usable = sum(
            1
            for name in HEALTH_INDICATORS.values()
            if name in indicators and len(indicators[name].data) >= 2
        )
        data_quality = round(usable / len(HEALTH_INDICATORS) * 100, 1)

        logger.info(
            f"Summary: health {health.overall_score}, {len(correlations)} correlations, "
            f"{len(key_insights)} insights, data quality {data_quality}%"
        )
        return AnalysisSummary(
            health_score=health,
            top_correlations=correlations[:TOP_CORRELATIONS],
            key_insights=key_insights,
            data_quality=data_quality,
        )
