"""Split raw log text into records and parse them."""

import re
from typing import Iterator, List, Tuple

from shared.logger import get_logger

from .collection import LogEntryCollection
from .entry import EMPTY_STACK, REGEX_DATETIME_PATTERN, LogEntry, TimestampParseError, parse_entry
from .levels import LogLevel

logger = get_logger(__name__)

# A header is any line that starts with a bracketed timestamp
HEADER_RE = re.compile(r"^\[" + REGEX_DATETIME_PATTERN + r"\].*", re.MULTILINE)

# A header's own "env.LEVEL:" prefix, right after the timestamp
LEVEL_PREFIX_RE = re.compile(
    r"^\[" + REGEX_DATETIME_PATTERN + r"\] ?[a-z]+\.(?P<level>[A-Za-z]+):"
)


def detect_level(header: str) -> str:
    """
    Find the level tag of a header.

    Takes the level from the ``env.LEVEL:`` prefix after the timestamp. When
    there is no prefix, looks for ``.<level>:`` anywhere in the header,
    case-insensitively, most severe level first.

    Returns:
        Lowercase level, or an empty string when none is present
    """
    match = LEVEL_PREFIX_RE.match(header)
    if match:
        return match.group("level").lower()

    lowered = header.lower()
    for level in LogLevel:
        if f".{level.value}:" in lowered:
            return level.value
    return ""


def split_records(text: str) -> Iterator[Tuple[str, str, str]]:
    """
    Split log text into ``(level, header, stack)`` triples.

    The stack of a record is everything between its header line and the next
    header, so a record directly followed by another one gets ``"\\n"``.
    Text before the first header is ignored.
    """
    headers = list(HEADER_RE.finditer(text))
    if not headers:
        return

    leading = text[: headers[0].start()]
    if leading.strip():
        logger.debug(f"Ignoring {len(leading)} characters before the first record")

    for index, match in enumerate(headers):
        header = match.group().rstrip("\r")
        end = headers[index + 1].start() if index + 1 < len(headers) else len(text)
        stack = text[match.end():end] or EMPTY_STACK
        yield detect_level(header), header, stack


def parse_records(text: str, strict: bool = False) -> LogEntryCollection:
    """
    Parse every record in a chunk of log text.

    Args:
        text: Raw log content
        strict: Raise on the first malformed record instead of skipping it

    Returns:
        LogEntryCollection in input order

    Raises:
        TimestampParseError: In strict mode, for a malformed record
    """
    entries: List[LogEntry] = []
    skipped = 0

    for level, header, stack in split_records(text):
        try:
            entries.append(parse_entry(level, header, stack))
        except TimestampParseError as e:
            if strict:
                raise
            skipped += 1
            logger.warning(f"Skipping malformed record: {e}")

    logger.info(f"Parsed {len(entries)} log entries ({skipped} skipped)")
    return LogEntryCollection(entries)
