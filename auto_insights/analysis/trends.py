"""
Trend Detection for ordered numeric series.

Detects:
- Overall direction (increasing, decreasing, stable, volatile)
- Change points (abrupt jumps relative to a rolling window)
- Seasonality (simple lag-similarity score over a few candidate periods)
- A one-step naive forecast

The series is assumed to be ordered already; timestamps are carried
through to change points as labels only.
"""

import logging
import math
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from auto_insights.analysis._series import (
    clean_series,
    finite_or_none,
    finite_values,
    rolling_stats,
    timestamp_at,
    window_radius,
)
from auto_insights.analysis.models import (
    ChangePoint,
    ChangeType,
    Forecast,
    TrendAnalysis,
    TrendDirection,
)
from auto_insights.core.config import DEFAULT_ANALYSIS_THRESHOLDS, AnalysisThresholds

logger = logging.getLogger(__name__)


def _classify(
    change_rate: float,
    volatility: float,
    thresholds: AnalysisThresholds,
) -> Tuple[TrendDirection, float]:
    """Direction and strength, applied in order: stable, directional, volatile override."""
    abs_rate = abs(change_rate)

    if change_rate == 0 or abs_rate < volatility * thresholds.stable_ratio:
        trend, strength = TrendDirection.STABLE, 0.1
    else:
        trend = TrendDirection.INCREASING if change_rate > 0 else TrendDirection.DECREASING
        strength = min(1.0, abs_rate / (volatility or 1.0))

    if volatility > abs_rate * thresholds.volatile_ratio:
        trend = TrendDirection.VOLATILE
        strength = min(1.0, volatility / (abs_rate or 1.0))

    return trend, strength


def detect_change_points(
    values: Iterable[Any],
    timestamps: Optional[Sequence[Any]] = None,
    thresholds: Optional[AnalysisThresholds] = None,
) -> List[ChangePoint]:
    """
    Find indices where the step from the previous value is large
    compared to the local (rolling) standard deviation.

    A step whose z-score exceeds ``change_point_z`` becomes a change point;
    steps beyond ``spike_ratio`` local stddevs are labelled spike/drop.
    When ``merge_reversals`` is on, a step that undoes the point emitted
    just before it is the same excursion and is not reported twice.
    """
    thresholds = thresholds or DEFAULT_ANALYSIS_THRESHOLDS
    series, stamps = clean_series(values, timestamps)
    n = len(series)
    if n < 3:
        return []

    radius = window_radius(n, thresholds.max_window_radius)
    _, stds = rolling_stats(series, radius)

    change_points: List[ChangePoint] = []
    last_index, last_delta = None, 0.0

    for i in range(1, n - 1):
        std = float(stds[i])
        if std == 0 or not math.isfinite(std):
            continue

        delta = float(series[i]) - float(series[i - 1])
        z = abs(delta) / std
        if not math.isfinite(z) or z <= thresholds.change_point_z:
            continue

        if (
            thresholds.merge_reversals
            and last_index == i - 1
            and delta * last_delta < 0
        ):
            continue

        if delta < 0:
            change_type = ChangeType.DROP if abs(delta) > std * thresholds.spike_ratio else ChangeType.DECREASE
        else:
            change_type = ChangeType.SPIKE if delta > std * thresholds.spike_ratio else ChangeType.INCREASE

        change_points.append(ChangePoint(
            index=i,
            timestamp=timestamp_at(stamps, i),
            value=float(series[i]),
            change_type=change_type,
            magnitude=abs(delta),
            significance=min(1.0, z / thresholds.significance_scale),
        ))
        last_index, last_delta = i, delta

    return change_points


def detect_seasonality(
    values: Iterable[Any],
    thresholds: Optional[AnalysisThresholds] = None,
) -> Tuple[bool, Optional[int]]:
    """
    Score each candidate period by how closely the series matches itself
    shifted by that period: mean of ``1 / (1 + |x[i] - x[i + period]|)``.

    Returns:
        (has_seasonality, best_period). The period is None when no
        candidate could be scored.
    """
    thresholds = thresholds or DEFAULT_ANALYSIS_THRESHOLDS
    series = finite_values(values)
    n = len(series)
    if n < thresholds.seasonality_min_length:
        return False, None

    best_period, best_score = None, 0.0
    for period in thresholds.seasonal_periods:
        if period <= 0 or n < period * 2:
            continue
        with np.errstate(over="ignore"):
            diffs = np.abs(series[:-period] - series[period:])
        score = float(np.mean(1.0 / (1.0 + diffs)))
        if score > best_score:
            best_period, best_score = period, score

    has_seasonality = best_period is not None and best_score > thresholds.seasonality_min_score
    return has_seasonality, best_period


def calculate_growth_rate(values: Iterable[Any], periods: int = 1) -> Optional[float]:
    """Percentage change from the first to the last value."""
    series = finite_values(values)
    if len(series) < periods + 1:
        return None
    start, end = float(series[0]), float(series[-1])
    if start == 0:
        return None
    return finite_or_none((end - start) / start * 100.0)


def detect_trends(
    values: Iterable[Any],
    timestamps: Optional[Sequence[Any]] = None,
    thresholds: Optional[AnalysisThresholds] = None,
) -> TrendAnalysis:
    """
    Analyze direction, change points, seasonality and the next value
    of an ordered series.

    Args:
        values: Ordered samples; non-finite entries are dropped
        timestamps: Optional labels, one per sample
        thresholds: Override the default constants

    Returns:
        TrendAnalysis. Fewer than 2 usable points gives an ``unknown`` trend.
    """
    thresholds = thresholds or DEFAULT_ANALYSIS_THRESHOLDS
    series, stamps = clean_series(values, timestamps)
    n = len(series)

    if n < 2:
        return TrendAnalysis(
            trend=TrendDirection.UNKNOWN,
            trend_strength=0.0,
            change_rate=None,
            volatility=0.0,
        )

    with np.errstate(over="ignore", invalid="ignore"):
        deltas = np.diff(series)
        change_rate = float(np.mean(deltas))
        volatility = math.sqrt(float(np.mean((deltas - change_rate) ** 2)))

    if not (math.isfinite(change_rate) and math.isfinite(volatility)):
        logger.warning(f"Trend over {n} points overflowed the float range; reporting unknown")
        return TrendAnalysis(
            trend=TrendDirection.UNKNOWN,
            trend_strength=0.0,
            change_rate=None,
            volatility=0.0,
        )

    trend, strength = _classify(change_rate, volatility, thresholds)
    change_points = detect_change_points(series, stamps, thresholds)
    has_seasonality, period = detect_seasonality(series, thresholds)

    next_value = float(series[-1]) + change_rate
    forecast = None
    if math.isfinite(next_value):
        forecast = Forecast(
            next_value=next_value,
            confidence=max(0.0, 1.0 - volatility / (abs(change_rate) or 1.0)),
        )

    logger.debug(
        f"Trend over {n} points: {trend.value} (strength={strength:.2f}, "
        f"rate={change_rate:.4f}, volatility={volatility:.4f}, "
        f"{len(change_points)} change points)"
    )

    return TrendAnalysis(
        trend=trend,
        trend_strength=strength,
        change_rate=change_rate,
        volatility=volatility,
        has_seasonality=has_seasonality,
        seasonality_period=period if has_seasonality else None,
        change_points=change_points,
        forecast=forecast,
    )
