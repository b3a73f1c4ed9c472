"""Command-line argument parsing for the PR time-to-merge stats tool."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence


def _positive_int(value: str) -> int:
    """Parse and validate a positive integer CLI value.

    Raises:
        argparse.ArgumentTypeError: If value is not a positive integer.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be an integer") from exc

    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")

    return parsed


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for report generation.

    The CSV path is optional at the parser level so that a missing path is
    reported through ``MissingArgumentError`` like other configuration errors.
    """
    parser = argparse.ArgumentParser(
        prog="pr-ttm-stats",
        description=(
            "Print time-to-merge statistics for recently created pull requests "
            "from a CSV export."
        ),
    )

    parser.add_argument(
        "csv_file",
        nargs="?",
        default=None,
        help="CSV export with Repository, #, User, Title, State, Created, Updated, Merged and URL columns.",
    )
    parser.add_argument(
        "--window-days",
        type=_positive_int,
        default=None,
        help="Only include pull requests created within this many days (default: 120).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress details to stderr.",
    )

    return parser.parse_args(argv)
