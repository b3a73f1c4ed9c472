"""Custom exception types for the PR time-to-merge stats tool."""


class PRStatsError(Exception):
    """Base exception for all recoverable PR stats errors."""


class ConfigurationError(PRStatsError):
    """Raised when runtime configuration values are missing or invalid."""


class MissingArgumentError(ConfigurationError):
    """Raised when no CSV file path was supplied on the command line."""


class InvalidCSVError(PRStatsError):
    """Raised when the CSV export is unreadable or lacks a usable header or rows."""


class MalformedInputError(PRStatsError):
    """Raised when a CSV row cannot be interpreted as a pull request record."""


class DateParseError(MalformedInputError):
    """Raised when a timestamp field does not match the export's date format."""


class EmptySampleError(PRStatsError):
    """Raised when statistics are requested for a sample with no values."""
