"""
Descriptive statistics for a single numeric column.

All metrics are computed over the finite numeric samples only; anything
else in the input (None, NaN, strings, booleans) is dropped first.
Too-short or constant columns produce None for the affected metrics
rather than raising.
"""

import logging
import math
from collections import Counter
from typing import Any, Iterable, Optional

import numpy as np

from auto_insights.analysis._series import finite_or_none, finite_values
from auto_insights.analysis.models import Quartiles, StatisticalMetrics

logger = logging.getLogger(__name__)


def percentile(sorted_values: np.ndarray, p: float) -> Optional[float]:
    """
    Linear-interpolation percentile of an ascending array.

    The rank is ``p / 100 * (n - 1)``; the result interpolates between
    the two neighbouring samples.
    """
    n = len(sorted_values)
    if n == 0:
        return None
    index = (p / 100.0) * (n - 1)
    lower = int(math.floor(index))
    upper = int(math.ceil(index))
    if lower == upper:
        return float(sorted_values[lower])
    weight = index - lower
    return float(sorted_values[lower] * (1 - weight) + sorted_values[upper] * weight)


def _mode(sorted_values: np.ndarray) -> float:
    # Highest frequency wins; ties go to the smallest value.
    counts = Counter(sorted_values.tolist())
    best_value, best_count = None, 0
    for value in sorted(counts):
        if counts[value] > best_count:
            best_value, best_count = value, counts[value]
    return float(best_value)


def _skewness(values: np.ndarray, mean: float, std: float) -> Optional[float]:
    n = len(values)
    if n < 3 or std <= 0:
        return None
    z = (values - mean) / std
    return float(n / ((n - 1) * (n - 2)) * np.sum(z ** 3))


def _kurtosis(values: np.ndarray, mean: float, std: float) -> Optional[float]:
    """Sample excess kurtosis."""
    n = len(values)
    if n < 4 or std <= 0:
        return None
    z = (values - mean) / std
    lead = n * (n + 1) / ((n - 1) * (n - 2) * (n - 3))
    correction = 3 * (n - 1) ** 2 / ((n - 2) * (n - 3))
    return float(lead * np.sum(z ** 4) - correction)


def compute_statistical_metrics(values: Iterable[Any]) -> StatisticalMetrics:
    """
    Compute descriptive metrics for one column.

    Args:
        values: Raw column samples in any order

    Returns:
        StatisticalMetrics; ``count == 0`` and all other fields None
        when no finite numbers were found.
    """
    data = finite_values(values)
    n = len(data)
    if n == 0:
        return StatisticalMetrics(count=0)

    ordered = np.sort(data)

    # Samples near the float limit can overflow sums to inf; such
    # metrics are reported as None instead.
    with np.errstate(over="ignore", invalid="ignore"):
        mean = finite_or_none(float(np.sum(ordered) / n))
        variance = None
        if mean is not None:
            variance = finite_or_none(float(np.sum((ordered - mean) ** 2) / n))
        std = math.sqrt(variance) if variance is not None else None

        median = finite_or_none(percentile(ordered, 50))
        q1 = finite_or_none(percentile(ordered, 25))
        q3 = finite_or_none(percentile(ordered, 75))
        quartiles = None
        if q1 is not None and median is not None and q3 is not None:
            quartiles = Quartiles(q1=q1, q2=median, q3=q3)

        skewness = kurtosis = None
        if std is not None:
            skewness = finite_or_none(_skewness(ordered, mean, std))
            kurtosis = finite_or_none(_kurtosis(ordered, mean, std))

        value_range = finite_or_none(float(ordered[-1] - ordered[0]))

    metrics = StatisticalMetrics(
        count=n,
        mean=mean,
        median=median,
        mode=_mode(ordered),
        min=float(ordered[0]),
        max=float(ordered[-1]),
        range=value_range,
        standard_deviation=std,
        variance=variance,
        quartiles=quartiles,
        skewness=skewness,
        kurtosis=kurtosis,
    )
    logger.debug(f"Computed metrics for {n} samples: mean={mean}, std={std}")
    return metrics
