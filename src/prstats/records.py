"""Parsing of pull request CSV exports into typed records.

The export has one header row followed by one row per pull request. Columns
are validated once against ``REQUIRED_COLUMNS`` when the file is loaded, then
each row is converted into a :class:`~prstats.models.PullRequestRecord`.
"""

from __future__ import annotations

import csv
import logging
import math
from collections.abc import Mapping
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, List, Optional, Union

from .errors import DateParseError, InvalidCSVError, MalformedInputError
from .models import PullRequestRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (
    "Repository",
    "#",
    "User",
    "Title",
    "State",
    "Created",
    "Updated",
    "Merged",
    "URL",
)

# Export timestamps carry no zone; they are always US Pacific standard time.
PACIFIC_UTC_OFFSET = "-0800"
DATE_TIME_FORMAT = "%m/%d/%y %H:%M:%S %z"

_ONE_DAY = timedelta(days=1)


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an exported ``MM/DD/YY HH:MM:SS`` timestamp.

    Args:
        value: Raw column value. Empty or missing values are allowed.

    Returns:
        A timezone-aware datetime, or ``None`` when the value is empty.

    Raises:
        DateParseError: If the value does not match the export format.
    """
    if not value:
        return None

    try:
        return datetime.strptime(f"{value} {PACIFIC_UTC_OFFSET}", DATE_TIME_FORMAT)
    except (TypeError, ValueError) as exc:
        raise DateParseError(
            f"Invalid timestamp {value!r}: expected MM/DD/YY HH:MM:SS."
        ) from exc


def compute_time_to_merge(created: Optional[datetime], merged: Optional[datetime]) -> Optional[int]:
    """Return whole days between creation and merge, or ``None`` if unmerged."""
    if merged is None:
        return None
    if created is None:
        raise MalformedInputError("Merged pull request is missing its 'Created' timestamp.")
    return math.floor((merged - created) / _ONE_DAY)


def parse_record(row: Mapping[str, Any]) -> PullRequestRecord:
    """Build a pull request record from one CSV row.

    Args:
        row: Mapping of column name to raw string value.

    Returns:
        The parsed record with its derived ``time_to_merge``.

    Raises:
        MalformedInputError: If ``row`` is not a mapping.
        DateParseError: If a timestamp column cannot be parsed.
    """
    if not isinstance(row, Mapping):
        raise MalformedInputError(
            f"Expected a mapping of column names to values, got {type(row).__name__}."
        )

    created = parse_datetime(row.get("Created"))
    merged = parse_datetime(row.get("Merged"))

    return PullRequestRecord(
        repo=row.get("Repository"),
        number=row.get("#"),
        user=row.get("User"),
        title=row.get("Title"),
        state=row.get("State"),
        created=created,
        updated=parse_datetime(row.get("Updated")),
        merged=merged,
        url=row.get("URL"),
        time_to_merge=compute_time_to_merge(created, merged),
    )


def validate_header(fieldnames: Optional[List[str]]) -> None:
    """Ensure the CSV header contains every required column.

    Raises:
        InvalidCSVError: If the header is missing or incomplete.
    """
    if not fieldnames:
        raise InvalidCSVError("CSV file has no header row.")

    missing = [column for column in REQUIRED_COLUMNS if column not in fieldnames]
    if missing:
        raise InvalidCSVError(f"CSV header is missing required columns: {', '.join(missing)}")


def load_records(path: Union[str, Path]) -> List[PullRequestRecord]:
    """Read and parse every row of a pull request CSV export.

    Rows are parsed eagerly; the first malformed row aborts the load.

    Raises:
        InvalidCSVError: If the file cannot be read, has no header, lacks
            required columns, or contains no data rows.
        MalformedInputError: If a row cannot be parsed. The message names the
            1-based data row number.
    """
    csv_path = Path(path)
    records: List[PullRequestRecord] = []

    try:
        with csv_path.open(newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle)
            validate_header(reader.fieldnames)

            for row_number, row in enumerate(reader, start=1):
                try:
                    record = parse_record(row)
                except DateParseError as exc:
                    raise DateParseError(f"Row {row_number}: {exc}") from exc
                except MalformedInputError as exc:
                    raise MalformedInputError(f"Row {row_number}: {exc}") from exc

                logger.debug(
                    "Parsed pull request record",
                    extra={"record": record.to_dict(), "row_number": row_number},
                )
                records.append(record)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise InvalidCSVError(f"Could not read CSV file '{csv_path}': {exc}") from exc

    if not records:
        raise InvalidCSVError(f"CSV file '{csv_path}' contains no pull request rows.")

    logger.info(
        "Loaded pull request records",
        extra={
            "csv_path": str(csv_path),
            "records_total": len(records),
            "records_merged": sum(1 for record in records if record.is_merged),
        },
    )

    return records
