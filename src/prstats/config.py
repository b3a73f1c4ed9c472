"""Configuration parsing and validation for the PR time-to-merge stats tool."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional, Union

from .errors import ConfigurationError, MissingArgumentError

# Four months of thirty days.
DEFAULT_WINDOW_DAYS = 4 * 30
WINDOW_DAYS_ENV_VAR = "PR_STATS_WINDOW_DAYS"


@dataclass(frozen=True)
class Config:
    """Validated runtime settings used for one report run."""

    csv_path: Path
    window_days: int
    now: datetime
    cutoff: datetime


def _resolve_window_days(window_days: Optional[int]) -> int:
    if window_days is None:
        raw_value = os.getenv(WINDOW_DAYS_ENV_VAR, "").strip()
        if not raw_value:
            return DEFAULT_WINDOW_DAYS
        try:
            window_days = int(raw_value)
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid value for '{WINDOW_DAYS_ENV_VAR}': expected an integer, got {raw_value!r}."
            ) from exc

    if window_days <= 0:
        raise ConfigurationError(
            "Invalid value for 'window_days': expected an integer greater than 0."
        )
    return window_days


def load_config(
    csv_path: Optional[Union[str, Path]],
    window_days: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Config:
    """Build and validate application configuration.

    The recency cutoff is computed here, once per run, and carried on the
    returned ``Config``.

    Args:
        csv_path: Path to the pull request CSV export.
        window_days: Recency window in days. Falls back to the
            ``PR_STATS_WINDOW_DAYS`` environment variable, then to 120.
        now: Reference time; defaults to the current UTC time.

    Returns:
        A validated ``Config`` instance.

    Raises:
        MissingArgumentError: If ``csv_path`` is empty.
        ConfigurationError: If the window is not a positive integer.
    """
    if not csv_path:
        raise MissingArgumentError("Must provide a CSV filename.")

    resolved_days = _resolve_window_days(window_days)
    reference_time = now or datetime.now(timezone.utc)

    return Config(
        csv_path=Path(csv_path),
        window_days=resolved_days,
        now=reference_time,
        cutoff=reference_time - timedelta(days=resolved_days),
    )
