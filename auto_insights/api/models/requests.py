"""
Pydantic models for API requests.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from auto_insights.insights.models import InsightOptions


class InsightOptionsRequest(BaseModel):
    """Optional analyses to run."""
    analyze_trends: bool = Field(default=False, description="Run trend, change-point and seasonality analysis")
    detect_anomalies: bool = Field(default=False, description="Run rolling z-score anomaly detection")
    analyze_correlations: bool = Field(default=False, description="Correlate every pair of requested columns")
    timestamp_column: Optional[str] = Field(
        default=None,
        description="Column holding time labels for change points and anomalies"
    )

    def to_options(self) -> InsightOptions:
        return InsightOptions(
            analyze_trends=self.analyze_trends,
            detect_anomalies=self.detect_anomalies,
            analyze_correlations=self.analyze_correlations,
            timestamp_column=self.timestamp_column,
        )


class GenerateInsightsRequest(BaseModel):
    """Request to generate insights over inline rows."""
    dataset_id: Optional[str] = Field(default=None, description="Caller's dataset identifier, echoed back")
    rows: List[Dict[str, Any]] = Field(..., description="Dataset rows, one dict per row")
    column_names: List[str] = Field(..., description="Columns to analyze")
    options: InsightOptionsRequest = Field(default_factory=InsightOptionsRequest)
