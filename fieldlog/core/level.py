"""
Log level enumeration

Levels are ordered by severity: a larger value is more severe.
"""

from enum import IntEnum
from typing import Dict, Tuple, Union


class Level(IntEnum):
    """
    Severity of a log entry.

    A logger configured at level L processes every entry whose level
    is at least as severe as L.
    """

    DEBUG = 10      # Verbose diagnostics
    INFO = 20       # Routine operational messages
    WARN = 30       # Something unexpected, still working
    ERROR = 40      # An operation failed
    FATAL = 50      # Logged, then the process exits
    PANIC = 60      # Logged, then PanicError is raised

    def __str__(self) -> str:
        """Lowercase level name, as rendered by the formatters."""
        return self.name.lower()

    @classmethod
    def from_string(cls, level_str: str) -> "Level":
        """
        Convert string to Level.

        Args:
            level_str: Level name (case-insensitive). "warning" is
                       accepted as an alias of "warn".

        Returns:
            Level enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().lower()
        if key in LEVEL_FROM_NAME:
            return LEVEL_FROM_NAME[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            Level.DEBUG: "\033[37m",    # White
            Level.INFO: "\033[36m",     # Cyan
            Level.WARN: "\033[33m",     # Yellow
            Level.ERROR: "\033[31m",    # Red
            Level.FATAL: "\033[31m",    # Red
            Level.PANIC: "\033[35m",    # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


ALL_LEVELS: Tuple[Level, ...] = tuple(sorted(Level))

LEVEL_FROM_NAME: Dict[str, Level] = {str(level): level for level in Level}
LEVEL_FROM_NAME["warning"] = Level.WARN


def parse_level(level: Union[Level, int, str]) -> Level:
    """Coerce a Level, its integer value or its name into a Level."""
    if isinstance(level, Level):
        return level
    if isinstance(level, str):
        return Level.from_string(level)
    return Level(level)


def compare(a: Level, b: Level) -> int:
    """Return -1, 0 or 1 as a is less, equally or more severe than b."""
    return (a > b) - (a < b)


def is_at_least(level: Level, threshold: Level) -> bool:
    """True if level is at least as severe as threshold."""
    return level >= threshold
