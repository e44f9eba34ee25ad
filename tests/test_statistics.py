"""
Unit tests for descriptive statistics and distribution analysis.
"""

import math
from decimal import Decimal

import numpy as np
import pytest

from auto_insights.analysis.distribution import analyze_distribution
from auto_insights.analysis.models import DistributionType
from auto_insights.analysis.statistics import compute_statistical_metrics, percentile
from auto_insights.core.config import AnalysisThresholds


class TestStatisticalMetrics:
    """Test compute_statistical_metrics."""

    def test_empty_input(self):
        """Test empty input gives count 0 and no metrics."""
        metrics = compute_statistical_metrics([])
        assert metrics.count == 0
        assert metrics.mean is None
        assert metrics.median is None
        assert metrics.mode is None
        assert metrics.standard_deviation is None
        assert metrics.quartiles is None
        assert metrics.skewness is None
        assert metrics.kurtosis is None

    def test_non_numeric_values_are_dropped(self):
        """Test only finite numbers are counted."""
        metrics = compute_statistical_metrics(
            [1, "2", None, 3.0, float("nan"), float("inf"), True, np.int64(5)]
        )
        assert metrics.count == 3
        assert metrics.min == 1.0
        assert metrics.max == 5.0

    def test_none_input(self):
        """Test None is treated as an empty column."""
        assert compute_statistical_metrics(None).count == 0

    def test_decimal_samples(self):
        """Test Decimals from NUMERIC database columns are counted."""
        metrics = compute_statistical_metrics(
            [Decimal("1.5"), Decimal("2.5"), Decimal("3.5"), Decimal("NaN"), Decimal("Infinity")]
        )
        assert metrics.count == 3
        assert metrics.mean == 2.5
        assert metrics.median == 2.5

    def test_int_beyond_float_range_is_dropped(self):
        """Test an int too large for a float is skipped like NaN."""
        metrics = compute_statistical_metrics([1, 2, 10**400])
        assert metrics.count == 2
        assert metrics.mean == 1.5
        assert metrics.max == 2.0

    def test_population_variance(self):
        """Test variance divides by n."""
        metrics = compute_statistical_metrics([2, 4, 4, 4, 5, 5, 7, 9])
        assert metrics.mean == 5.0
        assert metrics.variance == 4.0
        assert metrics.standard_deviation == 2.0
        assert metrics.mode == 4.0
        assert metrics.range == 7.0

    def test_quartiles_use_linear_interpolation(self):
        """Test quartiles for the classic outlier example."""
        metrics = compute_statistical_metrics([1, 2, 3, 4, 5, 100])
        assert metrics.quartiles.q1 == pytest.approx(2.25)
        assert metrics.quartiles.q2 == pytest.approx(3.5)
        assert metrics.quartiles.q3 == pytest.approx(4.75)
        assert metrics.quartiles.iqr == pytest.approx(2.5)
        assert metrics.median == pytest.approx(3.5)

    def test_median_odd_count(self):
        """Test median picks the middle value regardless of input order."""
        metrics = compute_statistical_metrics([9, 1, 5])
        assert metrics.median == 5.0

    def test_mode_tie_goes_to_smallest(self):
        """Test equally frequent values resolve to the smallest."""
        assert compute_statistical_metrics([3, 1, 3, 1, 2]).mode == 1.0
        assert compute_statistical_metrics([7, 8, 9]).mode == 7.0
        assert compute_statistical_metrics([5, 5, 2]).mode == 5.0

    def test_skewness_and_kurtosis(self):
        """Test the sample skewness and excess kurtosis formulas."""
        metrics = compute_statistical_metrics([2, 4, 4, 4, 5, 5, 7, 9])
        assert metrics.skewness == pytest.approx(1.0)
        assert metrics.kurtosis == pytest.approx(2.7285714, rel=1e-6)

    def test_skewness_requires_three_values(self):
        """Test skewness is None below 3 samples."""
        metrics = compute_statistical_metrics([1, 2])
        assert metrics.skewness is None
        assert metrics.kurtosis is None

    def test_kurtosis_requires_four_values(self):
        """Test kurtosis is None with exactly 3 samples."""
        metrics = compute_statistical_metrics([1, 2, 3])
        assert metrics.skewness == pytest.approx(0.0)
        assert metrics.kurtosis is None

    def test_constant_column_has_no_shape_metrics(self):
        """Test zero standard deviation disables skewness and kurtosis."""
        metrics = compute_statistical_metrics([5, 5, 5, 5])
        assert metrics.standard_deviation == 0.0
        assert metrics.skewness is None
        assert metrics.kurtosis is None

    @pytest.mark.parametrize("values", [
        [1],
        [3, 1],
        [1, 2, 3, 4, 5, 100],
        [-4.5, 2.25, 0, 0, 17, -3, 8.5],
        list(range(50)),
    ])
    def test_order_and_spread_invariants(self, values):
        """Test min <= q1 <= median <= q3 <= max and std == sqrt(variance)."""
        metrics = compute_statistical_metrics(values)
        q = metrics.quartiles
        assert metrics.min <= q.q1 <= metrics.median <= q.q3 <= metrics.max
        assert metrics.variance >= 0
        assert metrics.standard_deviation == pytest.approx(math.sqrt(metrics.variance))
        assert metrics.count == len(values)

    def test_deterministic(self):
        """Test repeated calls return identical metrics."""
        values = [4.2, 1.1, 9.9, 4.2, 7.3, 1.1]
        assert compute_statistical_metrics(values) == compute_statistical_metrics(values)

    def test_percentile_helper(self):
        """Test percentile on an empty and a single-element array."""
        assert percentile(np.array([]), 50) is None
        assert percentile(np.array([7.0]), 25) == 7.0


class TestDistributionAnalysis:
    """Test analyze_distribution."""

    def test_single_outlier(self):
        """Test Tukey fences flag exactly the extreme value."""
        values = [1, 2, 3, 4, 5, 100]
        result = analyze_distribution(values, compute_statistical_metrics(values))
        assert result.outliers == [100.0]
        assert result.outlier_indices == [5]
        assert result.distribution_type == DistributionType.SKEWED
        assert result.is_normal is False

    def test_outlier_indices_refer_to_filtered_values(self):
        """Test indices skip non-numeric entries."""
        values = [1, None, 2, 3, 4, 5, "x", 100]
        result = analyze_distribution(values, compute_statistical_metrics(values))
        assert result.outlier_indices == [5]

    def test_symmetric_data_is_normal(self):
        """Test a symmetric, light-tailed column classifies as normal."""
        values = list(range(1, 10))
        result = analyze_distribution(values, compute_statistical_metrics(values))
        assert result.distribution_type == DistributionType.NORMAL
        assert result.is_normal is True
        assert result.outliers == []

    def test_constant_column_is_unknown(self):
        """Test zero spread yields an unknown distribution."""
        values = [3, 3, 3, 3]
        result = analyze_distribution(values, compute_statistical_metrics(values))
        assert result.distribution_type == DistributionType.UNKNOWN
        assert result.is_normal is False
        assert result.outliers == []

    def test_empty_column_is_unknown(self):
        """Test empty input yields an unknown distribution."""
        result = analyze_distribution([], compute_statistical_metrics([]))
        assert result.distribution_type == DistributionType.UNKNOWN
        assert result.outliers == []

    def test_custom_iqr_factor(self):
        """Test a wider fence removes the outlier."""
        values = [1, 2, 3, 4, 5, 100]
        result = analyze_distribution(
            values,
            compute_statistical_metrics(values),
            AnalysisThresholds(outlier_iqr_factor=50.0),
        )
        assert result.outliers == []

    def test_latency_column(self, latency_values):
        """Test the latency spike is the only outlier and skews right."""
        metrics = compute_statistical_metrics(latency_values)
        result = analyze_distribution(latency_values, metrics)
        assert result.outliers == [90.0]
        assert result.outlier_indices == [4]
        assert result.distribution_type == DistributionType.SKEWED
        assert metrics.skewness > 1

    def test_to_dict_uses_plain_values(self):
        """Test enum members serialize as strings."""
        values = [1, 2, 3, 4, 5, 100]
        data = analyze_distribution(values, compute_statistical_metrics(values)).to_dict()
        assert data["distribution_type"] == "skewed"
        assert data["outliers"] == [100.0]
