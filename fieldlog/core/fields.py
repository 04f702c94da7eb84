"""
Structured key/value context attached to log entries
"""

from typing import Any, Dict, Iterator, Mapping, Optional


class Fields(Mapping):
    """
    Read-only mapping of field names to values.

    Fields never change after construction. ``with_field`` and
    ``with_fields`` return a new instance layering the additions over
    the existing keys, so a later key shadows an earlier one.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data) if data else {}

    def with_field(self, key: str, value: Any) -> "Fields":
        """Return a copy with key set to value."""
        data = dict(self._data)
        data[key] = value
        return Fields(data)

    def with_fields(self, other: Mapping[str, Any]) -> "Fields":
        """Return a copy merged with other; keys in other take precedence."""
        data = dict(self._data)
        data.update(other)
        return Fields(data)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict copy of the fields."""
        return dict(self._data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Fields({self._data!r})"
