"""
Point anomalies in an ordered series.

Unlike change points, which look at the jump from the previous value,
an anomaly is a value that sits far from the mean of its own rolling
window.
"""

import logging
import math
from typing import Any, Iterable, List, Optional, Sequence

from auto_insights.analysis._series import (
    clean_series,
    rolling_stats,
    timestamp_at,
    window_radius,
)
from auto_insights.analysis.models import Anomaly, AnomalyType
from auto_insights.core.config import DEFAULT_ANALYSIS_THRESHOLDS, AnalysisThresholds

logger = logging.getLogger(__name__)


def detect_time_series_anomalies(
    values: Iterable[Any],
    timestamps: Optional[Sequence[Any]] = None,
    thresholds: Optional[AnalysisThresholds] = None,
) -> List[Anomaly]:
    """
    Flag every point whose distance from its window mean exceeds
    ``anomaly_z`` window standard deviations.

    Severity is ``min(1, z / anomaly_severity_scale)``.
    """
    thresholds = thresholds or DEFAULT_ANALYSIS_THRESHOLDS
    series, stamps = clean_series(values, timestamps)
    n = len(series)
    if n < 3:
        return []

    radius = window_radius(n, thresholds.max_window_radius)
    means, stds = rolling_stats(series, radius)

    anomalies: List[Anomaly] = []
    for i in range(n):
        std = float(stds[i])
        if std == 0 or not math.isfinite(std):
            continue
        value, mean = float(series[i]), float(means[i])
        z = abs(value - mean) / std
        if math.isfinite(z) and z > thresholds.anomaly_z:
            anomalies.append(Anomaly(
                index=i,
                timestamp=timestamp_at(stamps, i),
                value=value,
                anomaly_type=AnomalyType.SPIKE if value > mean else AnomalyType.DROP,
                severity=min(1.0, z / thresholds.anomaly_severity_scale),
            ))

    if anomalies:
        logger.debug(f"Detected {len(anomalies)} anomalies in {n} points")
    return anomalies
