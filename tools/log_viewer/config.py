"""Configuration for the log viewer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"


@dataclass
class ViewerConfig:
    """Options controlling how log text is parsed and shown."""

    strict: bool = False
    levels: List[str] = field(default_factory=list)
    limit: Optional[int] = 50
    output: OutputFormat = OutputFormat.TABLE
    show_stats: bool = False

    def __post_init__(self):
        if self.limit is not None and self.limit < 1:
            raise ValueError(f"limit must be positive, got {self.limit}")
        self.output = OutputFormat(self.output)
