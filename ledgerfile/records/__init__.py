"""Text file records with timestamped appends."""

from ledgerfile.records.text_file import (
    DEFAULT_EXTENSION,
    DEFAULT_TIMESTAMP_FORMAT,
    FileRecordManager,
    format_timestamp_line,
    resolve_name,
)

__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_TIMESTAMP_FORMAT",
    "FileRecordManager",
    "format_timestamp_line",
    "resolve_name",
]
