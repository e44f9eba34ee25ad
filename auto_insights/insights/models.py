"""
Data models for generated insights.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from auto_insights.analysis.models import (
    Anomaly,
    DistributionAnalysis,
    StatisticalMetrics,
    TrendAnalysis,
)


class InsightType(str, Enum):
    """Category of an insight."""
    STATISTICAL = "statistical"
    TREND = "trend"
    ANOMALY = "anomaly"
    CORRELATION = "correlation"
    PATTERN = "pattern"


class Severity(str, Enum):
    """How urgently an insight needs attention."""
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class InsightData:
    """The headline number behind an insight."""
    metric: Optional[str] = None
    value: Optional[float] = None
    change: Optional[float] = None
    period: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            k: v for k, v in (
                ("metric", self.metric),
                ("value", self.value),
                ("change", self.change),
                ("period", self.period),
            ) if v is not None
        }


@dataclass(frozen=True)
class Insight:
    """
    A human-readable finding produced by one analysis run.

    Attributes:
        id: Stable key built from the insight kind and column name(s)
        type: Insight category
        title: Short headline
        description: One-sentence explanation
        severity: info, warning or critical
        confidence: 0.0 to 1.0
        actionable: Whether the reader is expected to act on it
        recommendation: Suggested next step, if any
        data: Headline metric values
        metadata: Supporting detail (outliers, change points, ...)
    """
    id: str
    type: InsightType
    title: str
    description: str
    severity: Severity
    confidence: float
    actionable: bool
    data: InsightData = field(default_factory=InsightData)
    recommendation: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "id": self.id,
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "severity": self.severity.value,
            "confidence": self.confidence,
            "actionable": self.actionable,
            "data": self.data.to_dict(),
        }
        if self.recommendation is not None:
            result["recommendation"] = self.recommendation
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result


@dataclass
class InsightOptions:
    """Which optional analyses to run for a batch."""
    analyze_trends: bool = False
    detect_anomalies: bool = False
    analyze_correlations: bool = False
    timestamp_column: Optional[str] = None


@dataclass
class ColumnAnalysis:
    """Everything computed for one column in a batch."""
    column: str
    metrics: StatisticalMetrics
    distribution: DistributionAnalysis
    trend: Optional[TrendAnalysis] = None
    anomalies: List[Anomaly] = field(default_factory=list)
    growth_rate: Optional[float] = None
    insights: List[Insight] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column": self.column,
            "metrics": self.metrics.to_dict(),
            "distribution": self.distribution.to_dict(),
            "trend": self.trend.to_dict() if self.trend else None,
            "anomalies": [a.to_dict() for a in self.anomalies],
            "growth_rate": self.growth_rate,
        }


@dataclass
class InsightReport:
    """
    Result of running the engine over a dataset.

    ``insights`` starts with the summary insight (when there is anything
    to summarize), followed by per-column and then correlation insights.
    """
    insights: List[Insight]
    columns: List[ColumnAnalysis] = field(default_factory=list)
    correlations: Dict[str, float] = field(default_factory=dict)
    rows_analyzed: int = 0
    skipped_columns: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.insights)

    @property
    def columns_analyzed(self) -> List[str]:
        return [c.column for c in self.columns]

    def by_severity(self, severity: Severity) -> List[Insight]:
        return [i for i in self.insights if i.severity == severity]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "insights": [i.to_dict() for i in self.insights],
            "count": self.count,
            "columns_analyzed": self.columns_analyzed,
            "rows_analyzed": self.rows_analyzed,
            "skipped_columns": self.skipped_columns,
            "correlations": self.correlations,
            "columns": [c.to_dict() for c in self.columns],
        }
