"""
Formatter interface

The logger only needs an object with ``format(entry) -> bytes``;
BaseFormatter is a convenience base for implementations in this package.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fieldlog.core.entry import Entry

# Keys every formatter reserves for the entry itself
TIME_KEY = "time"
LEVEL_KEY = "level"
MESSAGE_KEY = "msg"


@runtime_checkable
class Formatter(Protocol):
    """Anything that renders an entry to bytes."""

    def format(self, entry: "Entry") -> bytes:
        ...


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters must not keep per-entry state: the same instance may be
    used by several loggers at once.
    """

    @abstractmethod
    def format(self, entry: "Entry") -> bytes:
        """
        Format a log entry.

        Args:
            entry: The finalized log entry

        Returns:
            Encoded record, including the trailing newline
        """
        pass

    def __call__(self, entry: "Entry") -> bytes:
        """Allow formatters to be callable."""
        return self.format(entry)


def prefix_field_clashes(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Rename fields that collide with the reserved keys.

    A field named ``level`` would otherwise be overwritten by the entry's
    level; it is kept as ``fields.level`` instead.
    """
    result = dict(data)
    for key in (TIME_KEY, LEVEL_KEY, MESSAGE_KEY):
        if key in result:
            result["fields." + key] = result.pop(key)
    return result
