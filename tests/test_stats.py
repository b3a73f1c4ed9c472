"""Tests for statistical calculations."""

import math
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from prstats import stats as stats_module
from prstats.errors import EmptySampleError
from prstats.stats import (
    SampleStatistics,
    calculate_percentile,
    compute_statistics,
    percentile_from_value,
    standard_deviation,
)

FIBONACCI_SAMPLE = [1, 2, 2, 3, 5, 8, 13]


def test_pinned_conventions():
    """Verify the standard deviation divisor and percentile interpolation conventions."""
    assert stats_module.STDDEV_DDOF == 0
    assert stats_module.PERCENTILE_INTERPOLATION == "linear"


def test_calculate_percentile_empty_returns_none():
    """Verify percentile calculation returns None when sample list is empty."""
    assert calculate_percentile([], 50) is None


def test_calculate_percentile_out_of_range_raises_value_error():
    """Verify percentiles outside [0, 100] are rejected."""
    with pytest.raises(ValueError):
        calculate_percentile([1, 2, 3], 101)


def test_calculate_percentile_single_value_returns_same_for_common_percentiles():
    """Verify all common percentiles return the only value in a single-item sample."""
    values = [42.0]
    assert calculate_percentile(values, 50) == 42.0
    assert calculate_percentile(values, 75) == 42.0
    assert calculate_percentile(values, 90) == 42.0


def test_calculate_percentile_multiple_values_p50_p75_p90():
    """Verify linear interpolation percentile values for a multi-value sorted sample."""
    values = [10.0, 20.0, 30.0, 40.0]
    assert calculate_percentile(values, 50) == pytest.approx(25.0)
    assert calculate_percentile(values, 75) == pytest.approx(32.5)
    assert calculate_percentile(values, 90) == pytest.approx(37.0)


def test_compute_statistics_example_sample():
    """Verify min, max, mean, median and population stddev for a known sample."""
    summary = compute_statistics(FIBONACCI_SAMPLE)

    assert summary.count == 7
    assert summary.minimum == 1
    assert summary.maximum == 13
    assert summary.mean == pytest.approx(34 / 7)
    assert summary.median == 3
    assert summary.standard_deviation == pytest.approx(math.sqrt(776) / 7)


def test_compute_statistics_does_not_require_sorted_input():
    """Verify the summary sorts a copy of the sample."""
    values = [13, 1, 8, 2, 5, 3, 2]

    summary = compute_statistics(values)

    assert summary.sorted_values == tuple(FIBONACCI_SAMPLE)
    assert values == [13, 1, 8, 2, 5, 3, 2]


def test_median_even_sample_averages_middle_values():
    """Verify the median of an even-sized sample is the mean of the two middle values."""
    assert compute_statistics([4, 1, 3, 2]).median == 2.5


def test_standard_deviation_sample_divisor():
    """Verify ddof=1 switches to the n - 1 divisor."""
    mean = 34 / 7
    assert standard_deviation(FIBONACCI_SAMPLE, mean, ddof=1) == pytest.approx(math.sqrt(776 / 42))


def test_empty_sample_raises_empty_sample_error():
    """Verify statistics over zero elements fail with EmptySampleError."""
    with pytest.raises(EmptySampleError):
        compute_statistics([])


def test_value_from_percentile_truncates_to_whole_days():
    """Verify interpolated percentile values are truncated to integers."""
    summary = compute_statistics(FIBONACCI_SAMPLE)

    assert summary.value_from_percentile(50) == 3
    assert summary.value_from_percentile(60) == 4
    assert summary.value_from_percentile(95) == 11


def test_value_from_percentile_50_matches_median():
    """Verify p50 equals the median for odd sizes and is within one day for even sizes."""
    odd = compute_statistics([0, 4, 9, 1, 7])
    even = compute_statistics([0, 1, 4, 9])

    assert odd.value_from_percentile(50) == odd.median
    assert abs(even.value_from_percentile(50) - even.median) < 1


def test_percentile_from_value_counts_values_at_or_below():
    """Verify the inverse lookup rounds the share of values <= value up to a whole percent."""
    summary = compute_statistics(FIBONACCI_SAMPLE)

    assert summary.percentile_from_value(0) == 0
    assert summary.percentile_from_value(1) == 15
    assert summary.percentile_from_value(2) == 43
    assert summary.percentile_from_value(3) == 58
    assert summary.percentile_from_value(7) == 72
    assert summary.percentile_from_value(13) == 100
    assert summary.percentile_from_value(100) == 100


def test_percentile_from_value_failures_return_none():
    """Verify lookups that cannot be computed return None instead of raising."""
    assert percentile_from_value([], 3) is None
    assert percentile_from_value([1, 2, 3], float("nan")) is None


def test_percentile_round_trip_stays_close():
    """Verify mapping a percentile to a value and back lands near the original percentile."""
    summary = SampleStatistics.from_sample(list(range(0, 101)))

    for p in (50, 60, 70, 80, 90, 95):
        value = summary.value_from_percentile(p)
        assert abs(summary.percentile_from_value(value) - p) <= 1


def test_value_from_percentile_without_values_raises_empty_sample_error():
    """Verify a summary built without values refuses percentile lookups."""
    summary = SampleStatistics(
        sorted_values=(),
        count=0,
        minimum=0.0,
        maximum=0.0,
        mean=0.0,
        median=0.0,
        standard_deviation=0.0,
    )

    with pytest.raises(EmptySampleError):
        summary.value_from_percentile(50)
