"""
Text formatter producing logfmt-style key=value lines

    time="2026-01-02T15:04:05+00:00" level=info msg=login user=alice
"""

import re
from typing import TYPE_CHECKING, Any, List, Optional

from fieldlog.formatters.base_formatter import (
    BaseFormatter,
    LEVEL_KEY,
    MESSAGE_KEY,
    TIME_KEY,
    prefix_field_clashes,
)

if TYPE_CHECKING:
    from fieldlog.core.entry import Entry

# Values made only of these characters are written without quotes
_BARE_VALUE = re.compile(r"^[A-Za-z0-9\-._/@^+]+$")


class TextFormatter(BaseFormatter):
    """
    Format log entries as ``key=value`` pairs.

    Fields follow time, level and msg, sorted by key.
    """

    def __init__(
        self,
        colored: Optional[bool] = False,
        timestamp_format: Optional[str] = None,
        disable_timestamp: bool = False,
        sort_keys: bool = True,
    ):
        """
        Initialize text formatter.

        Args:
            colored: Wrap the level in ANSI colors. None means colored
                     only when the logger writes to a terminal.
            timestamp_format: strftime format (default: ISO 8601)
            disable_timestamp: Leave the time key out entirely
            sort_keys: Sort fields by key

        Example:
            # Plain output for files
            formatter = TextFormatter()

            # Colors on a terminal, short timestamps
            formatter = TextFormatter(colored=None, timestamp_format="%H:%M:%S")
        """
        self.colored = colored
        self.timestamp_format = timestamp_format
        self.disable_timestamp = disable_timestamp
        self.sort_keys = sort_keys

    def format(self, entry: "Entry") -> bytes:
        """
        Format log entry as a single key=value line.

        Args:
            entry: Log entry to format

        Returns:
            UTF-8 encoded line ending in a newline
        """
        data = prefix_field_clashes(entry.data.to_dict())
        keys = sorted(data) if self.sort_keys else list(data)

        parts: List[str] = []
        if not self.disable_timestamp and entry.time is not None:
            parts.append(self._pair(TIME_KEY, self._format_time(entry)))

        level = str(entry.level)
        if self._use_colors(entry):
            level = f"{entry.level.color_code}{level}{entry.level.reset_code}"
        parts.append(f"{LEVEL_KEY}={level}")
        parts.append(self._pair(MESSAGE_KEY, entry.message))

        for key in keys:
            parts.append(self._pair(key, data[key]))

        return (" ".join(parts) + "\n").encode("utf-8")

    def _format_time(self, entry: "Entry") -> str:
        if self.timestamp_format:
            return entry.time.strftime(self.timestamp_format)
        return entry.time.isoformat(timespec="seconds")

    def _use_colors(self, entry: "Entry") -> bool:
        if self.colored is not None:
            return self.colored
        isatty = getattr(entry.logger.out, "isatty", None)
        try:
            return bool(isatty and isatty())
        except (OSError, ValueError):
            return False

    def _pair(self, key: str, value: Any) -> str:
        return f"{key}={self._quote(value)}"

    @staticmethod
    def _quote(value: Any) -> str:
        text = str(value)
        if _BARE_VALUE.match(text):
            return text
        escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(colored={self.colored})"
