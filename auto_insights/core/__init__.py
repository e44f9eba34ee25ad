"""Core configuration for Auto Insights."""

from auto_insights.core.config import (
    AnalysisThresholds,
    InsightThresholds,
    Settings,
    get_settings,
)

__all__ = [
    "AnalysisThresholds",
    "InsightThresholds",
    "Settings",
    "get_settings",
]
