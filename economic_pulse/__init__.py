"""Economic indicator analysis engine: insights, health score, correlations."""

from economic_pulse.analysis import (
    AnalysisReporter,
    CorrelationAnalyzer,
    HealthScoreCalculator,
    InsightGenerator,
)
from economic_pulse.config import Settings
from economic_pulse.data import SeriesStore

__version__ = "0.1.0"

__all__ = [
    "AnalysisReporter",
    "CorrelationAnalyzer",
    "HealthScoreCalculator",
    "InsightGenerator",
    "SeriesStore",
    "Settings",
]
