"""
Data models for analyzer results.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class DistributionType(str, Enum):
    """Shape label for a numeric column."""
    NORMAL = "normal"
    SKEWED = "skewed"
    UNKNOWN = "unknown"


class TrendDirection(str, Enum):
    """Overall direction of an ordered series."""
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"
    VOLATILE = "volatile"
    UNKNOWN = "unknown"


class ChangeType(str, Enum):
    """Kind of jump at a change point."""
    INCREASE = "increase"
    DECREASE = "decrease"
    SPIKE = "spike"
    DROP = "drop"


class AnomalyType(str, Enum):
    """Direction of a point anomaly."""
    SPIKE = "spike"
    DROP = "drop"


def _plain(data: Dict[str, Any]) -> Dict[str, Any]:
    """Replace enum members by their values for JSON output."""
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in data.items()}


@dataclass(frozen=True)
class Quartiles:
    q1: float
    q2: float
    q3: float

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1


@dataclass(frozen=True)
class StatisticalMetrics:
    """
    Descriptive statistics for one numeric column.

    Every field except ``count`` is None when the column holds no finite
    numbers. ``skewness`` needs at least 3 samples and ``kurtosis`` at
    least 4; both need a non-zero standard deviation.
    """
    count: int
    mean: Optional[float] = None
    median: Optional[float] = None
    mode: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    range: Optional[float] = None
    standard_deviation: Optional[float] = None
    variance: Optional[float] = None
    quartiles: Optional[Quartiles] = None
    skewness: Optional[float] = None
    kurtosis: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DistributionAnalysis:
    """Shape and Tukey outliers of a column."""
    is_normal: bool
    distribution_type: DistributionType
    outliers: List[float] = field(default_factory=list)
    outlier_indices: List[int] = field(default_factory=list)  # positions in the filtered array

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True)
class ChangePoint:
    index: int
    value: float
    change_type: ChangeType
    magnitude: float
    significance: float
    timestamp: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True)
class Forecast:
    """One-step naive linear extrapolation."""
    next_value: float
    confidence: float


@dataclass(frozen=True)
class TrendAnalysis:
    """
    Direction, strength and structure of an ordered series.

    Attributes:
        trend: Overall direction label
        trend_strength: 0-1, how pronounced the direction is
        change_rate: Average change per step (None below 2 points)
        volatility: Population stddev of the step changes
        has_seasonality: Whether a repeating period was found
        seasonality_period: Best scoring period, if any
        change_points: Abrupt shifts, ordered by index
        forecast: Next value extrapolated from the change rate
    """
    trend: TrendDirection
    trend_strength: float
    change_rate: Optional[float]
    volatility: float
    has_seasonality: bool = False
    seasonality_period: Optional[int] = None
    change_points: List[ChangePoint] = field(default_factory=list)
    forecast: Optional[Forecast] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trend": self.trend.value,
            "trend_strength": self.trend_strength,
            "change_rate": self.change_rate,
            "volatility": self.volatility,
            "has_seasonality": self.has_seasonality,
            "seasonality_period": self.seasonality_period,
            "change_points": [cp.to_dict() for cp in self.change_points],
            "forecast": asdict(self.forecast) if self.forecast else None,
        }


@dataclass(frozen=True)
class Anomaly:
    index: int
    value: float
    anomaly_type: AnomalyType
    severity: float
    timestamp: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))
