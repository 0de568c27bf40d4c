"""Statistical helpers: correlation, percent change, trend estimation."""

import math
from typing import Sequence

import numpy as np
import pandas as pd
from scipy import stats

from economic_pulse.models import TrendResult


TREND_WINDOW = 6  # Most recent periods used for trend estimation
STRENGTH_SCALE = 10.0  # Score points per 1% move
SIDEWAYS_THRESHOLD = 10.0  # Strength below this is reported as sideways


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Pearson correlation coefficient of two equal-length vectors.

    Returns 0 for empty input, mismatched lengths, or a constant vector.
    NaN in the input propagates to the result.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)

    if x_arr.size == 0 or x_arr.size != y_arr.size:
        return 0.0

    # Zero variance: avoid dividing by zero
    if np.all(x_arr == x_arr[0]) or np.all(y_arr == y_arr[0]):
        return 0.0

    dx = x_arr - x_arr.mean()
    dy = y_arr - y_arr.mean()
    denominator = math.sqrt(float(np.sum(dx**2) * np.sum(dy**2)))
    if denominator == 0:
        return 0.0

    r = float(np.sum(dx * dy)) / denominator
    # Floating point can overshoot +/-1 by an ulp
    return float(np.clip(r, -1.0, 1.0))


def percent_change(previous: float, current: float) -> float:
    """
    Percent change from ``previous`` to ``current``.

    A zero previous value yields +/-inf (0 when both are zero).
    """
    if previous == 0:
        if current == 0:
            return 0.0
        return math.copysign(math.inf, current)
    return (current - previous) / previous * 100


def percentile_rank(values: Sequence[float], current: float) -> float:
    """Share of ``values`` strictly below ``current``, 0-100."""
    if len(values) == 0:
        return 50.0
    return float(stats.percentileofscore(np.asarray(values, dtype=float), current, kind="strict"))


def _period_changes(chronological: pd.Series) -> pd.Series:
    """Period-over-period % changes, sign-correct for negative levels."""
    changes = chronological.diff() / chronological.shift().abs() * 100
    return changes.replace([np.inf, -np.inf], np.nan).dropna()


def _net_change(chronological: pd.Series) -> float:
    """% change from the oldest to the newest value in the window."""
    oldest = chronological.iloc[0]
    newest = chronological.iloc[-1]
    base = abs(oldest)
    if base == 0:
        # Zero start: measure against the window's mean absolute level
        base = chronological.abs().mean()
    if base == 0 or np.isnan(base):
        return 0.0
    change = (newest - oldest) / base * 100
    return 0.0 if np.isnan(change) else float(change)


def determine_trend(values: Sequence[float], window: int = TREND_WINDOW) -> TrendResult:
    """
    Estimate direction, strength, momentum and volatility of a series.

    Args:
        values: Observations ordered most-recent-first
        window: Number of most recent observations to consider

    Returns:
        TrendResult; sideways with all-zero fields when fewer than 3 points
    """
    if len(values) < 3:
        return TrendResult()

    chronological = pd.Series(list(values)[:window][::-1], dtype=float)
    changes = _period_changes(chronological)

    net = _net_change(chronological)
    strength = min(100.0, abs(net) * STRENGTH_SCALE)

    if strength < SIDEWAYS_THRESHOLD:
        direction = "sideways"
    elif net > 0:
        direction = "up"
    else:
        direction = "down"

    latest = float(changes.iloc[-1]) if not changes.empty else 0.0
    momentum = float(np.clip(latest * STRENGTH_SCALE, -100.0, 100.0))

    volatility = float(changes.std(ddof=0)) if len(changes) > 0 else 0.0
    if np.isnan(volatility):
        volatility = 0.0

    duration = 0
    if direction != "sideways":
        sign = 1 if direction == "up" else -1
        for change in reversed(changes.tolist()):
            if change * sign <= 0:
                break
            duration += 1

    return TrendResult(
        direction=direction,
        strength=round(strength, 2),
        momentum=round(momentum, 2),
        duration=duration,
        volatility=round(volatility, 4),
    )
