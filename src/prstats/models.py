"""Domain models for pull request time-to-merge analysis.

The record mirrors one row of a pull request CSV export. Only the timestamp
columns are parsed; everything else is kept exactly as exported.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True, slots=True)
class PullRequestRecord:
    """Represents one exported pull request with its derived merge latency."""

    repo: Optional[str]
    number: Optional[str]
    user: Optional[str]
    title: Optional[str]
    state: Optional[str]
    created: Optional[datetime]
    updated: Optional[datetime]
    merged: Optional[datetime]
    url: Optional[str]
    time_to_merge: Optional[int]

    @property
    def is_merged(self) -> bool:
        return self.merged is not None

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as a plain dictionary."""
        return asdict(self)
