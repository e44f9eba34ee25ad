"""
Analyzers that turn numeric columns and ordered series into metrics,
distribution shape, trends, correlations and anomalies.
"""

from auto_insights.analysis.anomalies import detect_time_series_anomalies
from auto_insights.analysis.correlation import calculate_correlation
from auto_insights.analysis.distribution import analyze_distribution
from auto_insights.analysis.models import (
    Anomaly,
    AnomalyType,
    ChangePoint,
    ChangeType,
    DistributionAnalysis,
    DistributionType,
    Forecast,
    Quartiles,
    StatisticalMetrics,
    TrendAnalysis,
    TrendDirection,
)
from auto_insights.analysis.statistics import compute_statistical_metrics, percentile
from auto_insights.analysis.trends import (
    calculate_growth_rate,
    detect_change_points,
    detect_seasonality,
    detect_trends,
)

__all__ = [
    "Anomaly",
    "AnomalyType",
    "ChangePoint",
    "ChangeType",
    "DistributionAnalysis",
    "DistributionType",
    "Forecast",
    "Quartiles",
    "StatisticalMetrics",
    "TrendAnalysis",
    "TrendDirection",
    "analyze_distribution",
    "calculate_correlation",
    "calculate_growth_rate",
    "compute_statistical_metrics",
    "detect_change_points",
    "detect_seasonality",
    "detect_time_series_anomalies",
    "detect_trends",
    "percentile",
]
