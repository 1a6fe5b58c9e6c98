"""Log entry value object and header parsing."""

import json
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Mapping

from shared.logger import get_logger

logger = get_logger(__name__)

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
REGEX_DATETIME_PATTERN = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"

# Stack text of a record that carries no trace
EMPTY_STACK = "\n"

TIMESTAMP_RE = re.compile(r"^\[(?P<datetime>" + REGEX_DATETIME_PATTERN + r")\] ?")

# Matches "local.ERROR:" and friends. The separator is any character, not only a dot.
ENV_PREFIX_RE = re.compile(r"^[a-z]+.[A-Z]+:")


class TimestampParseError(ValueError):
    """Raised when a header does not start with a valid bracketed timestamp."""

    def __init__(self, header: str, reason: str = "missing bracketed timestamp"):
        self.header = header
        super().__init__(f"Cannot parse timestamp ({reason}): {header[:80]!r}")


def parse_datetime(value: str, header: str = "") -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS`` or raise TimestampParseError."""
    try:
        return datetime.strptime(value, DATETIME_FORMAT)
    except ValueError as e:
        raise TimestampParseError(header or value, reason=str(e)) from e


@dataclass(frozen=True)
class LogEntry:
    """One parsed log record."""

    level: str
    env: str
    datetime: datetime
    header: str
    stack: str

    @classmethod
    def parse(cls, level: str, raw_header: str, raw_stack: str) -> "LogEntry":
        """Shortcut for :func:`parse_entry`."""
        return parse_entry(level, raw_header, raw_stack)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogEntry":
        """
        Rebuild an entry from its :meth:`to_dict` mapping.

        The environment is not part of the serialized form and comes back empty.
        """
        return cls(
            level=data["level"],
            env="",
            datetime=parse_datetime(data["datetime"]),
            header=data["header"],
            stack=data["stack"],
        )

    def has_stack(self) -> bool:
        return self.stack != EMPTY_STACK

    def is_same_level(self, level: str) -> bool:
        return self.level == level

    def icon(self, icon_for: Callable[[str], str]) -> str:
        return icon_for(self.level)

    def name(self, name_for: Callable[[str], str]) -> str:
        return name_for(self.level)

    def label(self, icon_for: Callable[[str], str], name_for: Callable[[str], str]) -> str:
        """Icon and translated level name, e.g. ``"❌ Error"``."""
        return f"{self.icon(icon_for)} {self.name(name_for)}"

    def to_dict(self) -> Dict[str, str]:
        return {
            "level": self.level,
            "datetime": self.datetime.strftime(DATETIME_FORMAT),
            "header": self.header,
            "stack": self.stack,
        }

    def to_json(self, **kwargs) -> str:
        """Serialize :meth:`to_dict` to JSON; kwargs go to ``json.dumps``."""
        return json.dumps(self.to_dict(), **kwargs)


def parse_entry(level: str, raw_header: str, raw_stack: str) -> LogEntry:
    """
    Parse one raw log record.

    Args:
        level: Severity tag, kept verbatim
        raw_header: Header line, e.g. ``[2023-05-01 10:20:30] local.ERROR: Boom``
        raw_stack: Trailing detail text, ``"\\n"`` when there is none

    Returns:
        Immutable LogEntry

    Raises:
        TimestampParseError: If the header has no valid leading timestamp
    """
    match = TIMESTAMP_RE.match(raw_header)
    if not match:
        raise TimestampParseError(raw_header)

    timestamp = parse_datetime(match.group("datetime"), raw_header)
    header = raw_header[match.end():]

    env = ""
    env_match = ENV_PREFIX_RE.match(header)
    if env_match:
        env = env_match.group().split(".")[0]
        header = header[env_match.end():]

    entry = LogEntry(
        level=level,
        env=env,
        datetime=timestamp,
        header=header.strip(),
        stack=raw_stack,
    )
    logger.debug(f"Parsed {level or '-'} entry at {entry.datetime}")
    return entry
