"""Writer hook - copies selected entries to a second stream"""

import threading
from typing import IO, TYPE_CHECKING, Iterable, Optional, Tuple

from fieldlog.core.level import Level
from fieldlog.core.sink import write_to

if TYPE_CHECKING:
    from fieldlog.core.entry import Entry
    from fieldlog.formatters.base_formatter import Formatter


class WriterHook:
    """
    Write entries of the selected levels to another stream.

    A typical use is copying ERROR and above to stderr or a separate
    file while everything goes to the logger's main output.
    """

    def __init__(
        self,
        stream: IO,
        levels: Iterable[Level] = (Level.ERROR, Level.FATAL, Level.PANIC),
        formatter: Optional["Formatter"] = None,
    ):
        """
        Initialize writer hook.

        Args:
            stream: Text or binary stream to write to
            levels: Levels to copy (default: ERROR, FATAL, PANIC)
            formatter: Formatter to use (default: the entry's logger formatter)
        """
        self.stream = stream
        self.formatter = formatter
        self._levels: Tuple[Level, ...] = tuple(levels)
        self._lock = threading.Lock()

    def levels(self) -> Tuple[Level, ...]:
        return self._levels

    def fire(self, entry: "Entry") -> None:
        """Format entry and write it to the stream."""
        formatter = self.formatter or entry.logger.formatter
        data = formatter.format(entry)
        if isinstance(data, str):
            data = data.encode("utf-8")

        with self._lock:
            write_to(self.stream, data)

    def __repr__(self) -> str:
        """String representation."""
        return f"WriterHook(levels={[str(level) for level in self._levels]})"
