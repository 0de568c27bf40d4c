"""Data models."""

from .indicators import DataPoint, IndicatorSeries
from .analysis import (
    AnalysisSummary,
    CorrelationAnalysis,
    EconomicHealthScore,
    EconomicInsight,
    HealthComponents,
    MarketSignal,
    TrendResult,
)

__all__ = [
    "DataPoint",
    "IndicatorSeries",
    "AnalysisSummary",
    "CorrelationAnalysis",
    "EconomicHealthScore",
    "EconomicInsight",
    "HealthComponents",
    "MarketSignal",
    "TrendResult",
]
