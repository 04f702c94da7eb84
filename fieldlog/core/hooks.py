"""
Hook registry

Hooks observe entries of the levels they ask for. They are fired in
registration order, before the entry is written.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Dict, Iterable, List, Protocol, runtime_checkable

from fieldlog.core.errors import HookError
from fieldlog.core.level import Level

if TYPE_CHECKING:
    from fieldlog.core.entry import Entry


@runtime_checkable
class Hook(Protocol):
    """Anything with ``levels()`` and ``fire(entry)``."""

    def levels(self) -> Iterable[Level]:
        ...

    def fire(self, entry: "Entry") -> None:
        ...


class LevelHooks:
    """
    Hooks grouped by the level they fire for.

    Registration is guarded by a lock; firing works on a snapshot of
    the hooks for one level, so hooks may be added while entries are
    being logged.
    """

    def __init__(self):
        self._hooks: Dict[Level, List[Hook]] = {}
        self._lock = threading.Lock()

    def add(self, hook: Hook) -> None:
        """Register hook under every level it reports."""
        if not isinstance(hook, Hook):
            raise TypeError("hook must provide levels() and fire(entry)")

        with self._lock:
            for level in dict.fromkeys(hook.levels()):
                self._hooks.setdefault(Level(level), []).append(hook)

    def for_level(self, level: Level) -> List[Hook]:
        """Hooks registered for level, in registration order."""
        with self._lock:
            return list(self._hooks.get(level, ()))

    def fire(self, level: Level, entry: "Entry") -> List[HookError]:
        """
        Fire every hook registered for level.

        A failing hook does not stop the remaining ones.

        Returns:
            One HookError per failed hook, in firing order
        """
        errors = []
        for hook in self.for_level(level):
            try:
                hook.fire(entry)
            except Exception as e:
                errors.append(HookError(hook, e))
        return errors

    def clear(self) -> None:
        """Remove all hooks."""
        with self._lock:
            self._hooks.clear()

    def __len__(self) -> int:
        """Number of distinct registered hooks."""
        with self._lock:
            return len({id(h) for hooks in self._hooks.values() for h in hooks})

    def __repr__(self) -> str:
        with self._lock:
            counts = {str(level): len(hooks) for level, hooks in self._hooks.items()}
        return f"LevelHooks({counts})"
