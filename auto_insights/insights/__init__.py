"""
Insights - Human-readable findings generated from analyzer output.

This module provides:
- Insight: Immutable finding with severity, confidence and a stable id
- generate_*_insights: Pure rule-based mappings from analyzer results
- InsightsEngine: Batch orchestrator over a DataFrame or row dicts

Usage:
    from auto_insights.insights import InsightsEngine, InsightOptions

    engine = InsightsEngine()
    report = engine.generate(df, ["latency_ms"], InsightOptions(analyze_trends=True))
"""

from auto_insights.insights.engine import InsightsEngine
from auto_insights.insights.generator import (
    generate_anomaly_insights,
    generate_correlation_insights,
    generate_statistical_insights,
    generate_summary_insight,
    generate_trend_insights,
)
from auto_insights.insights.models import (
    ColumnAnalysis,
    Insight,
    InsightData,
    InsightOptions,
    InsightReport,
    InsightType,
    Severity,
)

__all__ = [
    "ColumnAnalysis",
    "Insight",
    "InsightData",
    "InsightOptions",
    "InsightReport",
    "InsightType",
    "InsightsEngine",
    "Severity",
    "generate_anomaly_insights",
    "generate_correlation_insights",
    "generate_statistical_insights",
    "generate_summary_insight",
    "generate_trend_insights",
]
