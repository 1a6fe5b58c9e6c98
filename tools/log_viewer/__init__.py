"""Log Viewer - Parse Laravel-style log records into structured entries."""

from .collection import LogEntryCollection
from .entry import LogEntry, TimestampParseError, parse_entry
from .levels import LevelStyler, LogLevel
from .splitter import parse_records, split_records

__all__ = [
    "LogEntry",
    "LogEntryCollection",
    "LevelStyler",
    "LogLevel",
    "TimestampParseError",
    "parse_entry",
    "parse_records",
    "split_records",
]
