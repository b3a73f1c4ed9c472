"""Descriptive statistics for time-to-merge samples.

This module provides:
- Percentile lookup on a pre-sorted sample using linear interpolation.
- The inverse lookup: the share of a sample at or below a given value.
- :class:`SampleStatistics`, a read-only summary of one sample.

Two conventions are pinned as module constants:
- ``STDDEV_DDOF``: delta degrees of freedom for the standard deviation.
  ``0`` divides by ``n`` (population standard deviation).
- ``PERCENTILE_INTERPOLATION``: how ``value_from_percentile`` picks a value
  between ranks. ``"linear"`` interpolates between the two closest ranks.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .errors import EmptySampleError

STDDEV_DDOF = 0
PERCENTILE_INTERPOLATION = "linear"


def calculate_percentile(sorted_values: Sequence[float], p: float) -> Optional[float]:
    """Calculate a percentile using linear interpolation.

    The input sequence is expected to already be sorted in ascending order.
    - Empty input returns ``None``.
    - ``p <= 0`` returns the first value.
    - ``p >= 100`` returns the last value.
    - Otherwise, the value is interpolated between the adjacent ranks around
      ``(n - 1) * p / 100``.

    Raises:
        ValueError: If ``p`` is outside ``[0, 100]``.
    """
    if not 0 <= p <= 100:
        raise ValueError("Percentile 'p' must be in the range [0, 100].")

    if not sorted_values:
        return None

    if p <= 0:
        return sorted_values[0]

    if p >= 100:
        return sorted_values[-1]

    position = (len(sorted_values) - 1) * (p / 100.0)
    lower_index = math.floor(position)
    upper_index = math.ceil(position)

    if lower_index == upper_index:
        return sorted_values[int(position)]

    lower_value = sorted_values[lower_index]
    upper_value = sorted_values[upper_index]
    return lower_value + (upper_value - lower_value) * (position - lower_index)


def percentile_from_value(sorted_values: Sequence[float], value: float) -> Optional[int]:
    """Return the percentage of samples less than or equal to ``value``.

    The percentage is rounded up to a whole number.
    Returns ``None`` when the lookup cannot be computed: an empty sample or a
    non-finite ``value``.
    """
    if not sorted_values:
        return None
    if not math.isfinite(value):
        return None

    at_or_below = sum(1 for sample in sorted_values if sample <= value)
    return -(-100 * at_or_below // len(sorted_values))


def standard_deviation(values: Sequence[float], mean: float, ddof: int = STDDEV_DDOF) -> float:
    """Standard deviation of ``values`` around ``mean`` with ``n - ddof`` divisor."""
    divisor = len(values) - ddof
    if divisor <= 0:
        return 0.0
    return math.sqrt(sum((value - mean) ** 2 for value in values) / divisor)


def _median(sorted_values: Sequence[float]) -> float:
    middle = len(sorted_values) // 2
    if len(sorted_values) % 2:
        return float(sorted_values[middle])
    return (sorted_values[middle - 1] + sorted_values[middle]) / 2.0


@dataclass(frozen=True)
class SampleStatistics:
    """Read-only summary of a non-empty numeric sample."""

    sorted_values: Tuple[float, ...]
    count: int
    minimum: float
    maximum: float
    mean: float
    median: float
    standard_deviation: float

    @classmethod
    def from_sample(cls, values: Sequence[float]) -> "SampleStatistics":
        """Compute the summary eagerly.

        Raises:
            EmptySampleError: If ``values`` is empty.
        """
        if not values:
            raise EmptySampleError("Cannot compute statistics for an empty sample.")

        sorted_values = tuple(sorted(values))
        count = len(sorted_values)
        mean = math.fsum(sorted_values) / count

        return cls(
            sorted_values=sorted_values,
            count=count,
            minimum=sorted_values[0],
            maximum=sorted_values[-1],
            mean=mean,
            median=_median(sorted_values),
            standard_deviation=standard_deviation(sorted_values, mean),
        )

    def value_from_percentile(self, p: float) -> int:
        """Return the ``p``-th percentile truncated to whole days."""
        value = calculate_percentile(self.sorted_values, p)
        if value is None:
            raise EmptySampleError("Cannot compute a percentile for an empty sample.")
        return int(value)

    def percentile_from_value(self, value: float) -> Optional[int]:
        """Return the percentage of the sample at or below ``value``, if computable."""
        return percentile_from_value(self.sorted_values, value)


def compute_statistics(values: Sequence[float]) -> SampleStatistics:
    """Summarize a time-to-merge sample.

    Raises:
        EmptySampleError: If ``values`` is empty.
    """
    return SampleStatistics.from_sample(values)
