"""
Pydantic response models for the API.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from auto_insights.insights.models import Insight


class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str
    type: str = "error"
    status_code: int = 500
    details: Dict[str, Any] = Field(default_factory=dict)


class InsightResponse(BaseModel):
    """A single generated insight."""
    id: str
    type: str
    title: str
    description: str
    severity: str
    confidence: float
    actionable: bool
    recommendation: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def from_insight(cls, insight: Insight) -> "InsightResponse":
        return cls(**insight.to_dict())


class GenerateInsightsResponse(BaseModel):
    """Insights generated for a dataset."""
    insights: List[InsightResponse]
    count: int
    generated_at: datetime
    dataset_id: Optional[str] = None
    columns_analyzed: List[str] = Field(default_factory=list)
    skipped_columns: List[str] = Field(default_factory=list)
    rows_analyzed: int = 0
