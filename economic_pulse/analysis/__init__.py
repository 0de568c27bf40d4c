"""Economic indicator analyses."""

from economic_pulse.analysis.alignment import align_series
from economic_pulse.analysis.correlations import CorrelationAnalyzer
from economic_pulse.analysis.health import HealthScoreCalculator
from economic_pulse.analysis.insights import InsightGenerator
from economic_pulse.analysis.narrative import Narrator, TemplateNarrator
from economic_pulse.analysis.significance import assess_significance
from economic_pulse.analysis.statistics import determine_trend, pearson_correlation
from economic_pulse.analysis.summary import AnalysisReporter

__all__ = [
    "align_series",
    "AnalysisReporter",
    "assess_significance",
    "CorrelationAnalyzer",
    "determine_trend",
    "HealthScoreCalculator",
    "InsightGenerator",
    "Narrator",
    "pearson_correlation",
    "TemplateNarrator",
]
