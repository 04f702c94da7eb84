"""
JSON formatter for structured logging

Formats each entry as one JSON object per line
"""

import json
from typing import TYPE_CHECKING, Any, Optional

from fieldlog.formatters.base_formatter import (
    BaseFormatter,
    LEVEL_KEY,
    MESSAGE_KEY,
    TIME_KEY,
    prefix_field_clashes,
)

if TYPE_CHECKING:
    from fieldlog.core.entry import Entry


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    Field values JSON cannot represent, exceptions included, are written
    as their ``str()``.
    """

    def __init__(
        self,
        timestamp_format: Optional[str] = None,
        disable_timestamp: bool = False,
        indent: Optional[int] = None,
        ensure_ascii: bool = False,
    ):
        """
        Initialize JSON formatter.

        Args:
            timestamp_format: strftime format (default: ISO 8601)
            disable_timestamp: Leave the time key out entirely
            indent: JSON indentation (None keeps one entry per line)
            ensure_ascii: Escape non-ASCII characters
        """
        self.timestamp_format = timestamp_format
        self.disable_timestamp = disable_timestamp
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, entry: "Entry") -> bytes:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            UTF-8 encoded JSON document followed by a newline
        """
        log_dict = {}
        if not self.disable_timestamp and entry.time is not None:
            if self.timestamp_format:
                log_dict[TIME_KEY] = entry.time.strftime(self.timestamp_format)
            else:
                log_dict[TIME_KEY] = entry.time.isoformat()
        log_dict[LEVEL_KEY] = str(entry.level)
        log_dict[MESSAGE_KEY] = entry.message

        for key, value in prefix_field_clashes(entry.data.to_dict()).items():
            if isinstance(value, BaseException):
                value = str(value)
            log_dict[key] = value

        text = json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=_json_default,
        )
        return (text + "\n").encode("utf-8")

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    return str(value)
