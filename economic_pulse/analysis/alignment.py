"""Exact-date alignment of two indicator series."""

from typing import Sequence

import numpy as np
import pandas as pd

from economic_pulse.models import DataPoint


def _to_series(points: Sequence[DataPoint]) -> pd.Series:
    series = pd.Series(
        [p.value for p in points],
        index=pd.Index([p.date for p in points], name="date"),
        dtype="float64",
    )
    # Duplicate dates keep the last occurrence
    return series[~series.index.duplicated(keep="last")]


def align_series(
    a: Sequence[DataPoint], b: Sequence[DataPoint]
) -> tuple[np.ndarray, np.ndarray]:
    """
    Pair the values of two series whose dates are exactly equal.

    No tolerance and no nearest-neighbour matching: dates must compare equal.
    Pairs come out in the order of ``a``.

    Returns:
        Two equal-length float arrays; both empty when no dates match
    """
    if not a or not b:
        return np.array([], dtype=float), np.array([], dtype=float)

    joined = _to_series(a).to_frame("a").join(_to_series(b).to_frame("b"), how="inner")
    return joined["a"].to_numpy(dtype=float), joined["b"].to_numpy(dtype=float)
