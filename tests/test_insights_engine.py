"""
Tests for the batch Insights Engine.
"""

import pandas as pd
import pytest

from auto_insights.core.config import Settings
from auto_insights.insights import InsightOptions, InsightsEngine, Severity


class TestInsightsEngine:
    """Test InsightsEngine.generate over DataFrames and row dicts."""

    def test_latency_end_to_end(self, latency_frame, settings):
        """Test outlier, skew and change-point insights for the latency column."""
        engine = InsightsEngine(settings)
        report = engine.generate(
            latency_frame,
            ["latency_ms"],
            InsightOptions(analyze_trends=True, timestamp_column="minute"),
        )

        ids = [i.id for i in report.insights]
        assert ids[0] == "summary"
        assert "outliers-latency_ms" in ids
        assert "skewness-latency_ms" in ids
        assert "change-points-latency_ms" in ids

        by_id = {i.id: i for i in report.insights}
        assert by_id["outliers-latency_ms"].metadata["outliers"] == [90.0]
        assert "right-skewed" in by_id["skewness-latency_ms"].description

        points = by_id["change-points-latency_ms"].metadata["change_points"]
        assert [p["index"] for p in points] == [4]
        assert points[0]["timestamp"] == "2025-01-01T00:04:00"

        assert by_id["summary"].severity == Severity.WARNING
        assert report.rows_analyzed == 7
        assert report.columns_analyzed == ["latency_ms"]

        column = report.columns[0]
        assert column.distribution.distribution_type.value == "skewed"
        assert column.trend is not None
        assert column.growth_rate == pytest.approx(10.0)

    def test_trends_disabled_by_default(self, latency_frame, settings):
        """Test only statistical insights run without options."""
        report = InsightsEngine(settings).generate(latency_frame, ["latency_ms"])
        ids = {i.id for i in report.insights}
        assert "change-points-latency_ms" not in ids
        assert report.columns[0].trend is None

    def test_row_dicts_with_strings(self, settings):
        """Test numeric strings are coerced and junk cells dropped."""
        rows = [
            {"amount": "10"},
            {"amount": "12.5"},
            {"amount": "n/a"},
            {"amount": None},
            {"amount": 11},
        ]
        report = InsightsEngine(settings).generate(rows, ["amount"])
        assert report.columns[0].metrics.count == 3
        assert report.rows_analyzed == 5

    def test_missing_column_is_skipped(self, latency_frame, settings):
        """Test unknown column names do not abort the batch."""
        report = InsightsEngine(settings).generate(latency_frame, ["nope", "latency_ms"])
        assert report.skipped_columns == ["nope"]
        assert report.columns_analyzed == ["latency_ms"]

    def test_empty_batch(self, settings):
        """Test no columns means no insights and no summary."""
        report = InsightsEngine(settings).generate(pd.DataFrame({"a": [1, 2]}), [])
        assert report.insights == []
        assert report.count == 0

    def test_correlations(self, settings):
        """Test column pairs are correlated when requested."""
        df = pd.DataFrame({
            "visits": [10, 20, 30, 40, 50, 60],
            "sales": [1, 2, 3, 4, 5, 6],
            "noise": [3, 1, 3, 1, 3, 1],
        })
        report = InsightsEngine(settings).generate(
            df, ["visits", "sales"], InsightOptions(analyze_correlations=True)
        )
        ids = [i.id for i in report.insights]
        assert "correlation-visits-sales" in ids
        assert report.correlations["visits-sales"] == pytest.approx(1.0)
        # Correlation insights come after the column insights
        assert ids[-1] == "correlation-visits-sales"

    def test_correlation_uses_rows_where_both_are_numeric(self, settings):
        """Test pairs are aligned row by row."""
        df = pd.DataFrame({
            "a": [1, 2, None, 4, 5],
            "b": [2, 4, 6, None, 10],
        })
        report = InsightsEngine(settings).generate(
            df, ["a", "b"], InsightOptions(analyze_correlations=True)
        )
        assert report.correlations["a-b"] == pytest.approx(1.0)

    def test_anomalies(self, settings):
        """Test anomaly detection adds an anomaly insight."""
        values = [10.0] * 15
        values[7] = 110.0
        report = InsightsEngine(settings).generate(
            pd.DataFrame({"cpu": values}), ["cpu"], InsightOptions(detect_anomalies=True)
        )
        by_id = {i.id: i for i in report.insights}
        assert "anomalies-cpu" in by_id
        assert by_id["anomalies-cpu"].metadata["anomalies"][0]["index"] == 7
        assert len(report.columns[0].anomalies) == 1

    def test_deterministic_across_workers(self, latency_frame):
        """Test parallel and sequential runs produce identical reports."""
        frame = latency_frame.assign(
            other=[5, 3, 8, 1, 9, 2, 7],
            third=[1, 2, 3, 4, 5, 6, 8],
        )
        options = InsightOptions(
            analyze_trends=True, detect_anomalies=True, analyze_correlations=True
        )
        columns = ["latency_ms", "other", "third"]

        parallel = InsightsEngine(Settings(max_workers=4)).generate(frame, columns, options)
        sequential = InsightsEngine(Settings(max_workers=1)).generate(frame, columns, options)
        again = InsightsEngine(Settings(max_workers=4)).generate(frame, columns, options)

        assert [i.to_dict() for i in parallel.insights] == [i.to_dict() for i in sequential.insights]
        assert [i.to_dict() for i in parallel.insights] == [i.to_dict() for i in again.insights]

    def test_max_rows(self, latency_frame):
        """Test the row cap limits the analyzed rows."""
        report = InsightsEngine(Settings(max_rows=3)).generate(latency_frame, ["latency_ms"])
        assert report.rows_analyzed == 3
        assert report.columns[0].metrics.count == 3

    def test_report_to_dict(self, latency_frame, settings):
        """Test the report serializes to plain types."""
        report = InsightsEngine(settings).generate(
            latency_frame, ["latency_ms"], InsightOptions(analyze_trends=True)
        )
        data = report.to_dict()
        assert data["count"] == len(report.insights)
        assert data["insights"][0]["id"] == "summary"
        assert data["columns"][0]["trend"]["trend"] == "volatile"
