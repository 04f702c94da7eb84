"""
Callback-based hook

Forwards matching entries to a plain function
"""

from typing import TYPE_CHECKING, Callable, Iterable, Optional, Tuple

from fieldlog.core.level import ALL_LEVELS, Level

if TYPE_CHECKING:
    from fieldlog.core.entry import Entry


class CallbackHook:
    """
    Call a function for every entry of the selected levels.

    Exceptions raised by the callback are reported by the logger as hook
    failures; they never reach the code that logged the entry.
    """

    def __init__(
        self,
        callback: Callable[["Entry"], None],
        levels: Optional[Iterable[Level]] = None,
    ):
        """
        Initialize callback hook.

        Args:
            callback: Function taking the finalized Entry
            levels: Levels to fire for (default: all levels)

        Example:
            # Count errors
            errors = []
            hook = CallbackHook(errors.append, levels=[Level.ERROR])
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback
        self._levels: Tuple[Level, ...] = tuple(levels) if levels is not None else ALL_LEVELS

    def levels(self) -> Tuple[Level, ...]:
        return self._levels

    def fire(self, entry: "Entry") -> None:
        self.callback(entry)

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackHook(callback={callback_name})"
