"""
Auto Insights - Statistics, trends, anomalies and correlations for numeric
columns, turned into severity-ranked insights.
"""

from auto_insights.analysis import (
    analyze_distribution,
    calculate_correlation,
    calculate_growth_rate,
    compute_statistical_metrics,
    detect_change_points,
    detect_seasonality,
    detect_time_series_anomalies,
    detect_trends,
)
from auto_insights.insights import (
    Insight,
    InsightOptions,
    InsightReport,
    InsightsEngine,
    generate_anomaly_insights,
    generate_correlation_insights,
    generate_statistical_insights,
    generate_summary_insight,
    generate_trend_insights,
)

__version__ = "1.0.0"

__all__ = [
    "Insight",
    "InsightOptions",
    "InsightReport",
    "InsightsEngine",
    "analyze_distribution",
    "calculate_correlation",
    "calculate_growth_rate",
    "compute_statistical_metrics",
    "detect_change_points",
    "detect_seasonality",
    "detect_time_series_anomalies",
    "detect_trends",
    "generate_anomaly_insights",
    "generate_correlation_insights",
    "generate_statistical_insights",
    "generate_summary_insight",
    "generate_trend_insights",
]
