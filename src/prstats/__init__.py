"""Time-to-merge statistics for pull request CSV exports."""

__version__ = "0.1.0"
