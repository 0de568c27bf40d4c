"""Correlation analysis across a fixed catalogue of indicator pairs."""

import logging
import math

from economic_pulse.analysis.alignment import align_series
from economic_pulse.analysis.narrative import Narrator, TemplateNarrator
from economic_pulse.analysis.statistics import pearson_correlation
from economic_pulse.config import CORRELATION_PAIRS, Settings
from economic_pulse.data.store import SeriesReader, SeriesStore
from economic_pulse.models import CorrelationAnalysis, IndicatorSeries


logger = logging.getLogger(__name__)


# |r| -> strength label (inclusive lower bounds, checked top-down)
STRENGTH_LEVELS = [
    (0.8, "very_strong"),
    (0.6, "strong"),
    (0.3, "moderate"),
    (0.0, "weak"),
]


def correlation_strength(abs_coefficient: float) -> str:
    for lower_bound, label in STRENGTH_LEVELS:
        if abs_coefficient >= lower_bound:
            return label
    return "weak"


def correlation_confidence(sample_size: int, coefficient: float, full_sample: int) -> float:
    """
    Confidence 0-100, non-decreasing in sample size and |r|.

    The sample factor saturates at ``full_sample`` aligned points; |r| scales
    the result between half and full confidence.
    """
    if sample_size <= 0:
        return 0.0
    sample_factor = min(1.0, sample_size / full_sample)
    return round(100 * sample_factor * (0.5 + 0.5 * min(1.0, abs(coefficient))), 1)


class CorrelationAnalyzer:
    """Pearson correlations for domain-meaningful indicator pairs."""

    FETCH_POINTS = 100  # Observations fetched per indicator
    MIN_SERIES_POINTS = 21  # Each series needs more than 20 observations
    WINDOW = 24  # Most recent aligned points used
    MIN_ALIGNED_POINTS = 20

    def __init__(
        self,
        store: SeriesReader | None = None,
        settings: Settings | None = None,
        narrator: Narrator | None = None,
        pairs: list[tuple[str, str]] | None = None,
    ) -> None:
        if store is None:
            settings = settings or Settings()
            store = SeriesStore(settings.db_path)
        self.store = store
        self.narrator = narrator or TemplateNarrator()
        self.pairs = pairs if pairs is not None else CORRELATION_PAIRS

    def _analyze_pair(
        self, a: IndicatorSeries, b: IndicatorSeries
    ) -> CorrelationAnalysis | None:
        """Correlate one pair, or None when there is not enough overlap."""
        if len(a.data) < self.MIN_SERIES_POINTS or len(b.data) < self.MIN_SERIES_POINTS:
            logger.debug(
                f"Skipping {a.name} / {b.name}: {len(a.data)} and {len(b.data)} observations"
            )
            return None

        x, y = align_series(a.data, b.data)
        x, y = x[: self.WINDOW], y[: self.WINDOW]
        if len(x) < self.MIN_ALIGNED_POINTS:
            logger.debug(f"Skipping {a.name} / {b.name}: {len(x)} aligned dates")
            return None

        coefficient = pearson_correlation(x, y)
        if not math.isfinite(coefficient):
            logger.warning(f"Skipping {a.name} / {b.name}: non-numeric observations")
            return None

        strength = correlation_strength(abs(coefficient))
        return CorrelationAnalysis(
            indicator_a_id=a.id,
            indicator_b_id=b.id,
            indicator_a_name=a.name,
            indicator_b_name=b.name,
            correlation_coeff=coefficient,
            strength=strength,
            direction="positive" if coefficient >= 0 else "negative",
            confidence=correlation_confidence(len(x), coefficient, self.WINDOW),
            narrative=self.narrator.correlation_narrative(a.name, b.name, coefficient, strength),
            sample_size=len(x),
        )

    def analyze_correlations(self) -> list[CorrelationAnalysis]:
        """
        Correlate every catalogue pair with enough aligned history.

        Returns results sorted by |r| descending; an empty list on any failure.
        """
        try:
            names = list(dict.fromkeys(name for pair in self.pairs for name in pair))
            indicators = {
                s.name: s
                for s in self.store.list_indicators_by_names(names, limit=self.FETCH_POINTS)
            }

            results = []
            for name_a, name_b in self.pairs:
                a = indicators.get(name_a)
                b = indicators.get(name_b)
                if a is None or b is None:
                    logger.debug(f"Skipping {name_a} / {name_b}: indicator not found")
                    continue

                analysis = self._analyze_pair(a, b)
                if analysis is not None:
                    results.append(analysis)

            results.sort(key=lambda c: abs(c.correlation_coeff), reverse=True)
            logger.info(f"Analyzed {len(results)}/{len(self.pairs)} correlation pairs")
            return results

        except Exception as e:
            logger.error(f"Failed to analyze correlations: {e}")
            return []
