"""
Distribution shape and Tukey outlier detection.
"""

import logging
from typing import Any, Iterable, Optional

from auto_insights.analysis._series import finite_values
from auto_insights.analysis.models import (
    DistributionAnalysis,
    DistributionType,
    StatisticalMetrics,
)
from auto_insights.core.config import DEFAULT_ANALYSIS_THRESHOLDS, AnalysisThresholds

logger = logging.getLogger(__name__)


def _unknown() -> DistributionAnalysis:
    return DistributionAnalysis(is_normal=False, distribution_type=DistributionType.UNKNOWN)


def analyze_distribution(
    values: Iterable[Any],
    metrics: StatisticalMetrics,
    thresholds: Optional[AnalysisThresholds] = None,
) -> DistributionAnalysis:
    """
    Classify the shape of a column and flag its outliers.

    Outliers fall outside ``[q1 - k*iqr, q3 + k*iqr]`` (k = 1.5 by default).
    Indices refer to the filtered numeric array, not the raw input.
    ``is_normal`` is a skewness/kurtosis heuristic, not a formal test.
    """
    thresholds = thresholds or DEFAULT_ANALYSIS_THRESHOLDS
    data = finite_values(values)

    if (
        len(data) == 0
        or metrics.standard_deviation is None
        or metrics.quartiles is None
        or metrics.standard_deviation == 0
    ):
        return _unknown()

    q1, q3 = metrics.quartiles.q1, metrics.quartiles.q3
    iqr = q3 - q1
    lower = q1 - thresholds.outlier_iqr_factor * iqr
    upper = q3 + thresholds.outlier_iqr_factor * iqr

    outliers = []
    outlier_indices = []
    for i, value in enumerate(data.tolist()):
        if value < lower or value > upper:
            outliers.append(value)
            outlier_indices.append(i)

    skewness = metrics.skewness
    kurtosis = metrics.kurtosis

    if skewness is None:
        distribution_type = DistributionType.UNKNOWN
    elif abs(skewness) < thresholds.normal_skew_limit:
        distribution_type = DistributionType.NORMAL
    else:
        distribution_type = DistributionType.SKEWED

    is_normal = (
        skewness is not None
        and kurtosis is not None
        and abs(skewness) < thresholds.normal_skew_limit
        and abs(kurtosis) < thresholds.normal_kurtosis_limit
    )

    if outliers:
        logger.debug(f"Found {len(outliers)} outliers outside [{lower:.4f}, {upper:.4f}]")

    return DistributionAnalysis(
        is_normal=is_normal,
        distribution_type=distribution_type,
        outliers=outliers,
        outlier_indices=outlier_indices,
    )
