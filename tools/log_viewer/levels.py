"""Log level vocabulary and display lookups."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class LogLevel(str, Enum):
    """Monolog severity levels, most severe first."""

    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"


# Key for the grand total in per-level counts
ALL_LEVELS = "all"

DEFAULT_ICONS: Mapping[str, str] = MappingProxyType(
    {
        LogLevel.EMERGENCY.value: "🚨",
        LogLevel.ALERT.value: "📣",
        LogLevel.CRITICAL.value: "💥",
        LogLevel.ERROR.value: "❌",
        LogLevel.WARNING.value: "⚠️",
        LogLevel.NOTICE.value: "📌",
        LogLevel.INFO.value: "ℹ️",
        LogLevel.DEBUG.value: "🐛",
    }
)

DEFAULT_NAMES: Mapping[str, str] = MappingProxyType(
    {level.value: level.value.capitalize() for level in LogLevel}
)

DEFAULT_STYLES: Mapping[str, str] = MappingProxyType(
    {
        LogLevel.EMERGENCY.value: "bold white on red",
        LogLevel.ALERT.value: "bold red",
        LogLevel.CRITICAL.value: "bold red",
        LogLevel.ERROR.value: "red",
        LogLevel.WARNING.value: "bold yellow",
        LogLevel.NOTICE.value: "cyan",
        LogLevel.INFO.value: "green",
        LogLevel.DEBUG.value: "dim",
    }
)


@dataclass(frozen=True)
class LevelStyler:
    """
    Read-only icon, name and style tables keyed by level.

    Pass the bound ``icon_for`` / ``name_for`` methods wherever a log entry
    needs a human-facing label. Unknown levels never raise.
    """

    icons: Mapping[str, str] = field(default_factory=lambda: DEFAULT_ICONS)
    names: Mapping[str, str] = field(default_factory=lambda: DEFAULT_NAMES)
    styles: Mapping[str, str] = field(default_factory=lambda: DEFAULT_STYLES)

    def __post_init__(self):
        # Freeze caller-supplied dicts so lookups stay immutable
        for attr in ("icons", "names", "styles"):
            value = getattr(self, attr)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, attr, MappingProxyType(dict(value)))

    def icon_for(self, level: str) -> str:
        """Icon for a level, empty when unknown."""
        return self.icons.get(level, "")

    def name_for(self, level: str) -> str:
        """Display name for a level, the capitalized level when unknown."""
        return self.names.get(level, level.capitalize())

    def style_for(self, level: str) -> str:
        """Rich style for a level, empty when unknown."""
        return self.styles.get(level, "")


default_styler = LevelStyler()
