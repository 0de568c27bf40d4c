"""Settings and rule tables."""

from .settings import (
    Settings,
    SIGNIFICANCE_SCHEDULES,
    DEFAULT_SIGNIFICANCE_CATEGORY,
    HEALTH_INDICATORS,
    CORRELATION_PAIRS,
    KEY_INSIGHT_INDICATORS,
)

__all__ = [
    "Settings",
    "SIGNIFICANCE_SCHEDULES",
    "DEFAULT_SIGNIFICANCE_CATEGORY",
    "HEALTH_INDICATORS",
    "CORRELATION_PAIRS",
    "KEY_INSIGHT_INDICATORS",
]
