"""Entry point for the PR time-to-merge stats tool."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .cli import parse_args
from .config import load_config
from .errors import (
    ConfigurationError,
    EmptySampleError,
    InvalidCSVError,
    MalformedInputError,
    PRStatsError,
)
from .records import load_records
from .report import render_report
from .samples import build_samples, select_recent
from .stats import compute_statistics

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_UNEXPECTED_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2
EXIT_INVALID_CSV = 3
EXIT_MALFORMED_INPUT = 4


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def orchestrate_report_generation(argv: Optional[Sequence[str]] = None) -> int:
    """Run the full pipeline and return a process exit code.

    Rows are loaded and parsed eagerly, then one report per bucket is printed
    in order. A bucket with no values is skipped with a warning; reports
    already printed are left as they are.
    """
    try:
        args = parse_args(argv)
        _configure_logging(args.verbose)

        config = load_config(csv_path=args.csv_file, window_days=args.window_days)
        records = load_records(config.csv_path)
        recent = select_recent(records, config.cutoff)
        logger.info(
            "Selected recent pull requests",
            extra={"cutoff": config.cutoff.isoformat(), "recent_total": len(recent)},
        )

        print()
        for description, sample in build_samples(recent, config.window_days):
            try:
                stats = compute_statistics(sample)
            except EmptySampleError:
                logger.warning("Skipping report '%s': no merged pull requests in sample.", description)
                continue
            print(render_report(stats, description, len(sample)))

        return EXIT_SUCCESS
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR
    except InvalidCSVError as exc:
        print(f"Invalid CSV: {exc}", file=sys.stderr)
        return EXIT_INVALID_CSV
    except MalformedInputError as exc:
        print(f"Malformed input: {exc}", file=sys.stderr)
        return EXIT_MALFORMED_INPUT
    except PRStatsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED_ERROR
    except Exception as exc:
        logger.exception("Unexpected failure while generating report")
        print(f"Unexpected error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED_ERROR


def main() -> int:
    return orchestrate_report_generation()


if __name__ == "__main__":
    raise SystemExit(main())
