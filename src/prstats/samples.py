"""Selection of recent pull requests and time-to-merge samples.

Reports are built from the same recency-filtered records, bucketed by a
minimum time-to-merge threshold:
- all merges (``min_ttm=0``)
- merges taking more than zero days (``min_ttm=1``)
- merges taking more than two days (``min_ttm=3``)
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Tuple

from .models import PullRequestRecord

logger = logging.getLogger(__name__)

REPORT_BUCKETS: Tuple[Tuple[int, str], ...] = (
    (0, "All Merges"),
    (1, "PRs taking >0 days"),
    (3, "PRs taking >2 days"),
)


def select_recent(records: Iterable[PullRequestRecord], cutoff: datetime) -> List[PullRequestRecord]:
    """Return records created strictly after ``cutoff``.

    Records without a creation timestamp are never selected.
    """
    return [
        record
        for record in records
        if record.created is not None and record.created > cutoff
    ]


def ttm_values(records: Iterable[PullRequestRecord], min_ttm: int = 0) -> List[int]:
    """Collect time-to-merge values of at least ``min_ttm`` days.

    Unmerged records are compared as 0 days and then dropped, so they never
    contribute a value whatever the threshold.
    """
    return [
        record.time_to_merge
        for record in records
        if (record.time_to_merge or 0) >= min_ttm and record.time_to_merge is not None
    ]


def describe_window(window_days: int) -> str:
    """Human-readable label for the recency window."""
    if window_days % 30 == 0:
        months = window_days // 30
        return f"Last {months} month" if months == 1 else f"Last {months} months"
    return f"Last {window_days} days"


def build_samples(records: List[PullRequestRecord], window_days: int) -> List[Tuple[str, List[int]]]:
    """Build ``(description, sample)`` pairs for every report bucket."""
    window_label = describe_window(window_days)
    samples: List[Tuple[str, List[int]]] = []

    for min_ttm, label in REPORT_BUCKETS:
        values = ttm_values(records, min_ttm)
        logger.info(
            "Built time-to-merge sample",
            extra={"min_ttm": min_ttm, "sample_size": len(values)},
        )
        samples.append((f"{label} ({window_label})", values))

    return samples
