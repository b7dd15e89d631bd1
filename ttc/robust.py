"""Order statistics for robust estimators."""

from __future__ import annotations

from typing import Iterable

import numpy as np


def median(values: Iterable[float]) -> float:
    """Median via linear-time selection.

    Returns 0.0 for an empty input; callers that need to tell "no data"
    apart must check the size first.
    """
    arr = np.fromiter(values, dtype=float)
    size = arr.size
    if size == 0:
        return 0.0
    n = size // 2
    if size % 2:
        return float(np.partition(arr, n)[n])
    part = np.partition(arr, (n - 1, n))
    return float((part[n - 1] + part[n]) / 2.0)
