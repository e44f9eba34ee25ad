"""
Main Insights Engine - Extracts numeric columns from a dataset, runs the
analyzers per column and collects the resulting insights.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import combinations
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd

from auto_insights.analysis.anomalies import detect_time_series_anomalies
from auto_insights.analysis.correlation import calculate_correlation
from auto_insights.analysis.distribution import analyze_distribution
from auto_insights.analysis.statistics import compute_statistical_metrics
from auto_insights.analysis.trends import calculate_growth_rate, detect_trends
from auto_insights.core.config import Settings, get_settings
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
    InsightOptions,
    InsightReport,
)

logger = logging.getLogger(__name__)

DataInput = Union[pd.DataFrame, Sequence[Dict[str, Any]]]


def to_dataframe(data: Optional[DataInput]) -> pd.DataFrame:
    """Accept a DataFrame or a list of row dicts."""
    if data is None:
        return pd.DataFrame()
    if isinstance(data, pd.DataFrame):
        return data
    return pd.DataFrame.from_records(list(data))


def numeric_column(df: pd.DataFrame, column: str) -> pd.Series:
    """Coerce a column to floats; unparseable cells become NaN."""
    return pd.to_numeric(df[column], errors="coerce").astype(float)


def _label(value: Any) -> Any:
    # Timestamps travel into insight metadata, keep them JSON friendly
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    if isinstance(value, (int, float, str)):
        return value
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


class InsightsEngine:
    """
    Batch orchestrator over a tabular dataset.

    Usage:
        engine = InsightsEngine()
        report = engine.generate(
            df,
            columns=["latency_ms", "requests"],
            options=InsightOptions(analyze_trends=True, analyze_correlations=True),
        )
        for insight in report.insights:
            print(insight.severity.value, insight.title)

    Columns are analyzed independently (in a thread pool when
    ``max_workers > 1``) and results are merged in the requested column
    order, so the output does not depend on scheduling.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.analysis_thresholds = self.settings.analysis
        self.insight_thresholds = self.settings.insights

    def extract_series(
        self,
        df: pd.DataFrame,
        column: str,
        timestamp_column: Optional[str] = None,
    ) -> Tuple[List[float], Optional[List[Any]]]:
        """
        Numeric values of a column (non-numeric cells dropped) and the
        matching timestamp labels, if a timestamp column is given.
        """
        values = numeric_column(df, column)
        mask = values.notna()

        timestamps = None
        if timestamp_column and timestamp_column in df.columns:
            timestamps = [_label(v) for v in df.loc[mask, timestamp_column].tolist()]
        elif timestamp_column:
            logger.warning(f"Timestamp column '{timestamp_column}' not found, ignoring")

        return values[mask].tolist(), timestamps

    def analyze_column(
        self,
        column: str,
        values: Sequence[float],
        timestamps: Optional[Sequence[Any]] = None,
        options: Optional[InsightOptions] = None,
    ) -> ColumnAnalysis:
        """Run every enabled analyzer on one column and collect its insights."""
        options = options or InsightOptions()

        metrics = compute_statistical_metrics(values)
        distribution = analyze_distribution(values, metrics, self.analysis_thresholds)
        analysis = ColumnAnalysis(column=column, metrics=metrics, distribution=distribution)
        analysis.insights.extend(generate_statistical_insights(
            column, metrics, distribution, self.insight_thresholds
        ))

        if options.analyze_trends:
            analysis.trend = detect_trends(values, timestamps, self.analysis_thresholds)
            analysis.growth_rate = calculate_growth_rate(values)
            analysis.insights.extend(generate_trend_insights(
                column, analysis.trend, self.insight_thresholds
            ))

        if options.detect_anomalies:
            analysis.anomalies = detect_time_series_anomalies(
                values, timestamps, self.analysis_thresholds
            )
            analysis.insights.extend(generate_anomaly_insights(
                column, analysis.anomalies, self.insight_thresholds
            ))

        logger.debug(f"Column '{column}': {metrics.count} values, {len(analysis.insights)} insights")
        return analysis

    def correlate(
        self,
        df: pd.DataFrame,
        columns: Sequence[str],
    ) -> Tuple[Dict[str, float], List[Insight]]:
        """Pearson correlation for every column pair, over rows where both are numeric."""
        correlations: Dict[str, float] = {}
        insights: List[Insight] = []

        for column_a, column_b in combinations(columns, 2):
            pair = pd.DataFrame({
                "a": numeric_column(df, column_a),
                "b": numeric_column(df, column_b),
            }).dropna()
            if pair.empty:
                continue

            r = calculate_correlation(pair["a"].tolist(), pair["b"].tolist())
            if r is None:
                continue
            correlations[f"{column_a}-{column_b}"] = r
            insights.extend(generate_correlation_insights(
                column_a, column_b, r, self.insight_thresholds
            ))

        return correlations, insights

    def generate(
        self,
        data: Optional[DataInput],
        columns: Sequence[str],
        options: Optional[InsightOptions] = None,
    ) -> InsightReport:
        """
        Generate insights for the given columns of a dataset.

        Args:
            data: DataFrame or list of row dicts
            columns: Column names to analyze (unknown names are skipped)
            options: Which optional analyses to run

        Returns:
            InsightReport with the summary insight first
        """
        options = options or InsightOptions()
        df = to_dataframe(data)
        if self.settings.max_rows is not None and len(df) > self.settings.max_rows:
            logger.info(f"Limiting analysis to the first {self.settings.max_rows} of {len(df)} rows")
            df = df.head(self.settings.max_rows)

        present = [c for c in columns if c in df.columns]
        skipped = [c for c in columns if c not in df.columns]
        for column in skipped:
            logger.warning(f"Column '{column}' not found in dataset, skipping")

        series = {
            column: self.extract_series(df, column, options.timestamp_column)
            for column in present
        }

        def run(column: str) -> ColumnAnalysis:
            values, timestamps = series[column]
            return self.analyze_column(column, values, timestamps, options)

        workers = max(1, min(self.settings.max_workers, len(present)))
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                analyses = list(executor.map(run, present))
        else:
            analyses = [run(column) for column in present]

        insights: List[Insight] = []
        for analysis in analyses:
            insights.extend(analysis.insights)

        correlations: Dict[str, float] = {}
        if options.analyze_correlations and len(present) >= 2 and len(df) > 0:
            correlations, correlation_insights = self.correlate(df, present)
            insights.extend(correlation_insights)

        summary = generate_summary_insight(insights)
        if summary is not None:
            insights.insert(0, summary)

        logger.info(
            f"Generated {len(insights)} insights for {len(present)} columns "
            f"over {len(df)} rows"
        )

        return InsightReport(
            insights=insights,
            columns=analyses,
            correlations=correlations,
            rows_analyzed=len(df),
            skipped_columns=skipped,
        )
