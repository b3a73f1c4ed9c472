"""Fixed-layout text rendering of time-to-merge statistics."""

from __future__ import annotations

from typing import List, Sequence

from .stats import SampleStatistics

SEPARATOR = "-" * 48

PERCENTILE_THRESHOLDS = (50, 60, 70, 80, 90, 95)
PERCENTILES_PER_LINE = 3

WITHIN_DAYS_THRESHOLDS = (0, 1, 2, 3, 5, 7, 10)
WITHIN_DAYS_PER_LINE = 2

COLUMN_GAP = " " * 5
LOOKUP_FAILED = -1


def _chunked(values: Sequence[int], size: int) -> List[Sequence[int]]:
    return [values[index:index + size] for index in range(0, len(values), size)]


def format_percentile_rows(stats: SampleStatistics) -> List[str]:
    """Format ``NN% <= DD d`` cells, three per line."""
    return [
        COLUMN_GAP.join(f"{p}% <= {stats.value_from_percentile(p):2d} d" for p in group)
        for group in _chunked(PERCENTILE_THRESHOLDS, PERCENTILES_PER_LINE)
    ]


def format_within_days_rows(stats: SampleStatistics) -> List[str]:
    """Format ``NN days: PP%`` cells, two per line.

    A failed lookup is shown as ``-1``.
    """
    rows = []
    for group in _chunked(WITHIN_DAYS_THRESHOLDS, WITHIN_DAYS_PER_LINE):
        cells = []
        for days in group:
            percentage = stats.percentile_from_value(days)
            if percentage is None:
                percentage = LOOKUP_FAILED
            cells.append(f"{days:2d} days: {percentage:2d}%")
        rows.append(COLUMN_GAP.join(cells))
    return rows


def render_report(stats: SampleStatistics, description: str, sample_count: int) -> str:
    """Render one time-to-merge report block.

    The result is a pure function of its arguments and ends with an empty
    line, so printing it leaves a blank line after the closing separator.
    """
    lines = [
        SEPARATOR,
        "Time To Merge Stats",
        description,
        f"n = {sample_count}",
        SEPARATOR,
        f" Range: {int(stats.minimum):2d} - {int(stats.maximum):2d} days",
        f"  Mean: {stats.mean:5.2f}",
        f"Median: {stats.median:5.2f}",
        f"StdDev: {stats.standard_deviation:5.2f}",
        SEPARATOR,
        "Percentiles:",
        *format_percentile_rows(stats),
        SEPARATOR,
        "Percentage of Merges Within:",
        *format_within_days_rows(stats),
        SEPARATOR,
        "",
    ]

    return "\n".join(lines)
