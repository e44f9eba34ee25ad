"""
Pearson correlation between two numeric columns.
"""

import math
from typing import Any, Optional, Sequence

import numpy as np

from auto_insights.analysis._series import is_finite_number


def calculate_correlation(a: Sequence[Any], b: Sequence[Any]) -> Optional[float]:
    """
    Pearson correlation coefficient of two equal-length series.

    Returns None when the lengths differ, either series is empty or holds
    a non-finite sample, or either series is constant.
    """
    if a is None or b is None:
        return None
    try:
        a, b = list(a), list(b)
    except TypeError:
        return None
    if len(a) == 0 or len(a) != len(b):
        return None
    if not all(is_finite_number(v) for v in a) or not all(is_finite_number(v) for v in b):
        return None

    x = np.asarray([float(v) for v in a], dtype=float)
    y = np.asarray([float(v) for v in b], dtype=float)

    with np.errstate(over="ignore", invalid="ignore"):
        dx = x - np.mean(x)
        dy = y - np.mean(y)
        denominator = math.sqrt(float(np.sum(dx * dx)) * float(np.sum(dy * dy)))
        if denominator == 0 or not math.isfinite(denominator):
            return None
        r = float(np.sum(dx * dy)) / denominator

    if not math.isfinite(r):
        return None
    return max(-1.0, min(1.0, r))
