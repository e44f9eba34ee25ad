"""
Configuration settings for the Auto Insights engine.
Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalysisThresholds(BaseModel):
    """Tunable constants used by the analyzers."""

    model_config = ConfigDict(frozen=True)

    # Trend classification
    stable_ratio: float = 0.1  # |change_rate| below this share of volatility is stable
    volatile_ratio: float = 2.0  # volatility above this multiple of |change_rate| is volatile

    # Rolling windows (change points and anomalies)
    max_window_radius: int = 5
    change_point_z: float = 2.0
    spike_ratio: float = 3.0  # jumps above this many local stddevs are spikes/drops
    significance_scale: float = 3.0
    merge_reversals: bool = True
    anomaly_z: float = 2.0
    anomaly_severity_scale: float = 4.0

    # Seasonality
    seasonality_min_length: int = 12
    seasonal_periods: Tuple[int, ...] = (3, 4, 6, 7, 12)
    seasonality_min_score: float = 0.6

    # Distribution
    outlier_iqr_factor: float = 1.5
    normal_skew_limit: float = 0.5
    normal_kurtosis_limit: float = 0.5


class InsightThresholds(BaseModel):
    """Rules that turn analysis results into insights."""

    model_config = ConfigDict(frozen=True)

    variance_to_mean_ratio: float = 2.0
    outlier_warning_fraction: float = 0.1
    skewness: float = 1.0
    strong_trend: float = 0.7
    volatility_ratio: float = 2.0
    significant_change: float = 0.7
    strong_correlation: float = 0.7
    weak_correlation: float = 0.3
    anomaly_warning_severity: float = 0.8


class APIConfig(BaseModel):
    """API server configuration."""
    title: str = "Auto Insights API"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AUTO_INSIGHTS_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    analysis: AnalysisThresholds = Field(default_factory=AnalysisThresholds)
    insights: InsightThresholds = Field(default_factory=InsightThresholds)
    api: APIConfig = Field(default_factory=APIConfig)

    # Processing Configuration
    log_level: str = "INFO"
    max_workers: int = 4
    max_rows: Optional[int] = None  # None = analyze every row

    @classmethod
    def from_yaml(cls, path: str) -> "Settings":
        """Load settings from a YAML file. Missing file = defaults."""
        config_path = Path(path)

        if not config_path.exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)


DEFAULT_ANALYSIS_THRESHOLDS = AnalysisThresholds()
DEFAULT_INSIGHT_THRESHOLDS = InsightThresholds()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    for candidate in (Path("auto_insights.yaml"), Path("auto_insights.yml")):
        if candidate.exists():
            return Settings.from_yaml(str(candidate))
    return Settings()
