"""
Rule-based Insight Generator.

Maps analyzer output to Insight records. Every function here is pure:
the same input always yields the same insights, and each insight id is
built only from the insight kind and the column name(s) involved, so a
downstream store can match repeated runs against dismissed or
favorited insights.
"""

import math
from typing import List, Optional, Sequence

from auto_insights.analysis.models import (
    Anomaly,
    DistributionAnalysis,
    StatisticalMetrics,
    TrendAnalysis,
    TrendDirection,
)
from auto_insights.core.config import DEFAULT_INSIGHT_THRESHOLDS, InsightThresholds
from auto_insights.insights.models import Insight, InsightData, InsightType, Severity


SUMMARY_ID = "summary"


def generate_statistical_insights(
    column: str,
    metrics: StatisticalMetrics,
    distribution: DistributionAnalysis,
    thresholds: Optional[InsightThresholds] = None,
) -> List[Insight]:
    """Insights about variability, outliers and skew of one column."""
    thresholds = thresholds or DEFAULT_INSIGHT_THRESHOLDS
    insights: List[Insight] = []

    # High variance; a zero mean or variance does not count as present
    if (
        metrics.variance
        and metrics.mean
        and metrics.variance > metrics.mean * thresholds.variance_to_mean_ratio
    ):
        insights.append(Insight(
            id=f"high-variance-{column}",
            type=InsightType.STATISTICAL,
            title=f"High Variability in {column}",
            description=(
                f"The {column} column shows high variability "
                f"(variance: {metrics.variance:.2f}), indicating inconsistent data patterns."
            ),
            severity=Severity.WARNING,
            confidence=0.8,
            actionable=True,
            recommendation="Consider investigating the causes of high variability or applying data normalization.",
            data=InsightData(metric="variance", value=metrics.variance),
        ))

    # Outliers
    outlier_count = len(distribution.outliers)
    if outlier_count > 0:
        severity = (
            Severity.WARNING
            if outlier_count > metrics.count * thresholds.outlier_warning_fraction
            else Severity.INFO
        )
        insights.append(Insight(
            id=f"outliers-{column}",
            type=InsightType.ANOMALY,
            title=f"{outlier_count} Outliers Detected in {column}",
            description=f"Found {outlier_count} outlier values that deviate significantly from the norm.",
            severity=severity,
            confidence=0.9,
            actionable=True,
            recommendation="Review outliers to determine if they are data errors or legitimate extreme values.",
            data=InsightData(metric="outliers", value=outlier_count),
            metadata={
                "outliers": list(distribution.outliers),
                "outlier_indices": list(distribution.outlier_indices),
            },
        ))

    # Skewness
    if metrics.skewness is not None and abs(metrics.skewness) > thresholds.skewness:
        direction = "right" if metrics.skewness > 0 else "left"
        insights.append(Insight(
            id=f"skewness-{column}",
            type=InsightType.STATISTICAL,
            title=f"Skewed Distribution in {column}",
            description=(
                f"The {column} data is {direction}-skewed (skewness: {metrics.skewness:.2f}), "
                f"indicating an asymmetric distribution."
            ),
            severity=Severity.INFO,
            confidence=0.85,
            actionable=False,
            data=InsightData(metric="skewness", value=metrics.skewness),
            metadata={"direction": direction},
        ))

    return insights


def generate_trend_insights(
    column: str,
    trend: TrendAnalysis,
    thresholds: Optional[InsightThresholds] = None,
) -> List[Insight]:
    """Insights about direction, volatility, change points and seasonality."""
    thresholds = thresholds or DEFAULT_INSIGHT_THRESHOLDS
    insights: List[Insight] = []
    change_rate = trend.change_rate or 0.0

    # Strong trend
    if trend.trend_strength > thresholds.strong_trend:
        label = trend.trend.value
        declining = trend.trend == TrendDirection.DECREASING
        insights.append(Insight(
            id=f"trend-{column}",
            type=InsightType.TREND,
            title=f"Strong {label.capitalize()} Trend in {column}",
            description=(
                f"{column} shows a strong {label} trend with "
                f"{trend.trend_strength * 100:.0f}% confidence."
            ),
            severity=Severity.WARNING if declining else Severity.INFO,
            confidence=trend.trend_strength,
            actionable=True,
            recommendation=(
                "Investigate the cause of the declining trend and consider corrective actions."
                if declining
                else "This positive trend may indicate successful initiatives or natural growth."
                if trend.trend == TrendDirection.INCREASING
                else "Review the drivers behind this movement before relying on it."
            ),
            data=InsightData(metric="trend", change=trend.change_rate),
        ))

    # High volatility; same condition as the volatile classification
    if trend.volatility > abs(change_rate) * thresholds.volatility_ratio:
        insights.append(Insight(
            id=f"volatility-{column}",
            type=InsightType.TREND,
            title=f"High Volatility in {column}",
            description=f"{column} exhibits high volatility, making it difficult to predict future values.",
            severity=Severity.WARNING,
            confidence=0.8,
            actionable=True,
            recommendation="Consider smoothing techniques or investigate the causes of volatility.",
            data=InsightData(metric="volatility", value=trend.volatility),
        ))

    # Significant change points
    significant = [
        cp for cp in trend.change_points if cp.significance > thresholds.significant_change
    ]
    if significant:
        insights.append(Insight(
            id=f"change-points-{column}",
            type=InsightType.PATTERN,
            title=f"{len(significant)} Significant Change Points Detected",
            description=(
                f"Found {len(significant)} significant change points in {column}, "
                f"indicating shifts in the data pattern."
            ),
            severity=Severity.WARNING,
            confidence=0.85,
            actionable=True,
            recommendation="Review the periods around change points to identify what caused the shifts.",
            data=InsightData(metric="change_points", value=len(significant)),
            metadata={"change_points": [cp.to_dict() for cp in significant]},
        ))

    # Seasonality
    if trend.has_seasonality and trend.seasonality_period:
        insights.append(Insight(
            id=f"seasonality-{column}",
            type=InsightType.PATTERN,
            title=f"Seasonal Pattern Detected in {column}",
            description=(
                f"{column} shows a seasonal pattern with a period of "
                f"{trend.seasonality_period} time units."
            ),
            severity=Severity.INFO,
            confidence=0.75,
            actionable=True,
            recommendation="Use this seasonal pattern to improve forecasting accuracy.",
            data=InsightData(metric="seasonality", period=f"{trend.seasonality_period} periods"),
        ))

    return insights


def generate_correlation_insights(
    column_a: str,
    column_b: str,
    correlation: Optional[float],
    thresholds: Optional[InsightThresholds] = None,
) -> List[Insight]:
    """
    Insight for a column pair.

    Strong (|r| above 0.7) and weak (|r| below 0.3) correlations produce an
    insight; the band in between produces none.
    """
    thresholds = thresholds or DEFAULT_INSIGHT_THRESHOLDS
    if correlation is None or math.isnan(correlation):
        return []

    strength = abs(correlation)

    if strength > thresholds.strong_correlation:
        direction = "positive" if correlation > 0 else "negative"
        return [Insight(
            id=f"correlation-{column_a}-{column_b}",
            type=InsightType.CORRELATION,
            title=f"Strong {direction.capitalize()} Correlation",
            description=(
                f"{column_a} and {column_b} show a strong {direction} "
                f"correlation ({correlation:.2f})."
            ),
            severity=Severity.INFO,
            confidence=strength,
            actionable=True,
            recommendation=(
                "These variables move together. Changes in one may predict changes in the other."
                if direction == "positive"
                else "These variables move in opposite directions. "
                "Consider the inverse relationship in your analysis."
            ),
            data=InsightData(metric="correlation", value=correlation),
            metadata={"columns": [column_a, column_b]},
        )]

    if strength < thresholds.weak_correlation:
        return [Insight(
            id=f"no-correlation-{column_a}-{column_b}",
            type=InsightType.CORRELATION,
            title=f"Weak Correlation Between {column_a} and {column_b}",
            description=(
                f"{column_a} and {column_b} show little to no correlation ({correlation:.2f})."
            ),
            severity=Severity.INFO,
            confidence=1 - strength,
            actionable=False,
            data=InsightData(metric="correlation", value=correlation),
            metadata={"columns": [column_a, column_b]},
        )]

    return []


def generate_anomaly_insights(
    column: str,
    anomalies: Sequence[Anomaly],
    thresholds: Optional[InsightThresholds] = None,
) -> List[Insight]:
    """One insight summarizing the point anomalies of a series."""
    thresholds = thresholds or DEFAULT_INSIGHT_THRESHOLDS
    if not anomalies:
        return []

    severe = any(a.severity > thresholds.anomaly_warning_severity for a in anomalies)
    return [Insight(
        id=f"anomalies-{column}",
        type=InsightType.ANOMALY,
        title=f"{len(anomalies)} Anomalies Detected in {column}",
        description=f"Found {len(anomalies)} anomalous values that deviate from expected patterns.",
        severity=Severity.WARNING if severe else Severity.INFO,
        confidence=0.85,
        actionable=True,
        recommendation="Review anomalous values to determine if they are errors or legitimate outliers.",
        data=InsightData(metric="anomalies", value=len(anomalies)),
        metadata={"anomalies": [a.to_dict() for a in anomalies]},
    )]


def generate_summary_insight(insights: Sequence[Insight]) -> Optional[Insight]:
    """
    Roll a batch up into one insight whose severity is the worst in the batch.

    Returns None for an empty batch.
    """
    if not insights:
        return None

    total = len(insights)
    critical = sum(1 for i in insights if i.severity == Severity.CRITICAL)
    warning = sum(1 for i in insights if i.severity == Severity.WARNING)
    info = total - critical - warning

    if critical:
        severity = Severity.CRITICAL
    elif warning:
        severity = Severity.WARNING
    else:
        severity = Severity.INFO

    return Insight(
        id=SUMMARY_ID,
        type=InsightType.STATISTICAL,
        title=f"Analysis Summary: {total} Insights Found",
        description=(
            f"Found {total} insights including {critical} critical, {warning} warnings, "
            f"and {info} informational insights."
        ),
        severity=severity,
        confidence=0.9,
        actionable=True,
        recommendation="Review all insights to understand your data better and identify actionable items.",
        data=InsightData(metric="total_insights", value=total),
        metadata={"critical": critical, "warning": warning, "info": info},
    )
