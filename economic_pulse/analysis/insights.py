"""Single-indicator economic insights."""

import logging

from economic_pulse.analysis.narrative import Narrator, TemplateNarrator
from economic_pulse.analysis.significance import assess_significance
from economic_pulse.analysis.statistics import determine_trend, percent_change
from economic_pulse.config import Settings
from economic_pulse.data.store import SeriesReader, SeriesStore
from economic_pulse.models import EconomicInsight


logger = logging.getLogger(__name__)


class InsightGenerator:
    """Builds a narrative insight about an indicator's latest move."""

    HISTORY_POINTS = 12  # Observations fetched for trend and historical context
    RELATED_LIMIT = 5

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

    def generate_economic_insight(self, indicator_name: str) -> EconomicInsight | None:
        """
        Generate an insight for one indicator.

        Returns None when the indicator is unknown, has fewer than two
        observations, or anything fails along the way.
        """
        try:
            indicator = self.store.get_indicator_by_name(
                indicator_name, limit=self.HISTORY_POINTS
            )
            if indicator is None:
                logger.info(f"No indicator named {indicator_name!r}")
                return None
            if len(indicator.data) < 2:
                logger.info(f"{indicator_name}: {len(indicator.data)} observations, need 2")
                return None

            values = indicator.values
            current_value, previous_value = values[0], values[1]
            change = percent_change(previous_value, current_value)

            if change > 0:
                trend = "rising"
            elif change < 0:
                trend = "falling"
            else:
                trend = "stable"

            significance = assess_significance(
                abs(change), indicator.category, indicator.source
            )
            trend_result = determine_trend(values)

            narrative = self.narrator.insight_narrative(
                indicator.name, indicator.category, change, trend_result
            )
            implication = self.narrator.investment_implication(indicator.category, trend)
            history = self.narrator.historical_context(current_value, values)

            related = self.store.find_related(
                indicator.category,
                indicator.source,
                exclude=indicator.name,
                limit=self.RELATED_LIMIT,
            )

            return EconomicInsight(
                indicator_id=indicator.id,
                indicator_name=indicator.name,
                current_value=current_value,
                previous_value=previous_value,
                change_percent=change,
                trend=trend,
                significance=significance,
                narrative=narrative,
                investment_implication=implication,
                historical_context=history,
                related_indicators=related,
            )

        except Exception as e:
            logger.error(f"Failed to generate insight for {indicator_name}: {e}")
            return None
