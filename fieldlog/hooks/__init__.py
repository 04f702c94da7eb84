"""
Hook implementations

Ready-made hooks for common needs. Any object with ``levels()`` and
``fire(entry)`` can be registered instead.
"""

from fieldlog.hooks.callback_hook import CallbackHook
from fieldlog.hooks.writer_hook import WriterHook

__all__ = ["CallbackHook", "WriterHook"]
