"""Category-aware significance classification of percent changes."""

import math
from typing import Mapping

from economic_pulse.config import DEFAULT_SIGNIFICANCE_CATEGORY, SIGNIFICANCE_SCHEDULES


SIGNIFICANCE_ORDER = {"low": 1, "medium": 2, "high": 3, "critical": 4}


def assess_significance(
    abs_percent_change: float,
    category: str,
    source: str | None = None,
    schedules: Mapping[str, tuple[tuple[float, str], ...]] | None = None,
) -> str:
    """
    Map an absolute percent change to low / medium / high / critical.

    Each category has a step schedule of inclusive lower bounds. Categories
    without a schedule use the default (employment) one. ``source`` is part of
    the call signature but no schedule currently depends on it.
    """
    schedules = schedules if schedules is not None else SIGNIFICANCE_SCHEDULES
    change = abs(abs_percent_change)

    # Previous value was zero
    if math.isinf(change):
        return "critical"

    schedule = (
        schedules.get(category)
        or schedules.get(DEFAULT_SIGNIFICANCE_CATEGORY)
        or SIGNIFICANCE_SCHEDULES[DEFAULT_SIGNIFICANCE_CATEGORY]
    )
    for lower_bound, label in reversed(schedule):
        if change >= lower_bound:
            return label

    # NaN compares false against every bound
    return schedule[0][1]
