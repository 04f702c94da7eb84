"""
Exception types

Only PanicError ever reaches the caller of a logging method. The other
errors describe failures that are reported on the logger's error output.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from fieldlog.core.entry import Entry


class FieldLogError(Exception):
    """Base class for fieldlog errors."""


class FormatError(FieldLogError):
    """The formatter failed to render an entry."""


class WriteError(FieldLogError):
    """The output sink rejected a formatted entry."""


class HookError(FieldLogError):
    """A hook failed while handling an entry."""

    def __init__(self, hook: Any, cause: BaseException):
        super().__init__(f"{type(hook).__name__}: {cause}")
        self.hook = hook
        self.cause = cause


class PanicError(FieldLogError):
    """
    Raised after a PANIC entry has been written.

    The exception message is the logged message; the finalized entry is
    available as ``entry``.
    """

    def __init__(self, message: str, entry: Optional["Entry"] = None):
        super().__init__(message)
        self.message = message
        self.entry = entry
