"""Ordered collection of parsed log entries."""

import json
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Union

from .entry import LogEntry
from .levels import ALL_LEVELS, LogLevel


class LogEntryCollection:
    """
    Parsed entries in the order they appeared.

    Attributes:
        entries: Underlying list of LogEntry objects
    """

    def __init__(self, entries: Iterable[LogEntry] = ()):
        self.entries: List[LogEntry] = list(entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return LogEntryCollection(self.entries[index])
        return self.entries[index]

    def filter_by_level(self, levels: Iterable[str]) -> "LogEntryCollection":
        """Keep entries whose level exactly matches one of ``levels``."""
        wanted = list(levels)
        return LogEntryCollection(
            e for e in self.entries if any(e.is_same_level(level) for level in wanted)
        )

    def count_by_level(self) -> Dict[str, int]:
        """
        Count entries per level.

        Every known level is present (zero when unseen), followed by any
        unknown levels, with the total under ``"all"``.
        """
        counts = Counter(e.level for e in self.entries)
        result = {ALL_LEVELS: len(self.entries)}
        result.update({level.value: counts.pop(level.value, 0) for level in LogLevel})
        result.update(sorted(counts.items()))
        return result

    def to_list(self) -> List[Dict[str, str]]:
        return [e.to_dict() for e in self.entries]

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_list(), **kwargs)
