"""
Log entry

An Entry carries the fields attached so far and, once a severity method
is called, the finalized time, level and message of one record.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from fieldlog.core.errors import FormatError, PanicError, WriteError
from fieldlog.core.fields import Fields
from fieldlog.core.level import Level, is_at_least

if TYPE_CHECKING:
    from fieldlog.core.logger import Logger

ERROR_KEY = "error"


def sprint(*args: Any) -> str:
    """Join args with single spaces, the way print() does."""
    return " ".join(str(arg) for arg in args)


def sprintf(template: str, *args: Any) -> str:
    """
    printf-style formatting with ``%``.

    Without args the template is returned untouched, so literal percent
    signs survive. A template that does not match its args falls back to
    space-joining instead of raising.
    """
    if not args:
        return str(template)
    try:
        return str(template) % args
    except (TypeError, ValueError, KeyError):
        return sprint(template, *args)


def sprintln(*args: Any) -> str:
    """Space-joined args without a trailing newline."""
    message = sprint(*args)
    if message.endswith("\n"):
        message = message[:-1]
    return message


class Entry:
    """
    One log record.

    Entries are built with ``with_field``/``with_fields``, each returning
    a new Entry, and emitted by a severity method such as ``info``. An
    Entry used as a builder is never modified by logging through it: the
    severity method finalizes a copy carrying time, level and message.
    """

    def __init__(self, logger: "Logger", data: Optional[Mapping[str, Any]] = None):
        self.logger = logger
        self.data: Fields = data if isinstance(data, Fields) else Fields(data)
        self.time: Optional[datetime] = None
        self.level: Level = Level.INFO
        self.message: str = ""

    def with_field(self, key: str, value: Any) -> "Entry":
        """Return a new Entry with key set to value."""
        return Entry(self.logger, self.data.with_field(key, value))

    def with_fields(self, fields: Mapping[str, Any]) -> "Entry":
        """Return a new Entry with fields merged over the current ones."""
        return Entry(self.logger, self.data.with_fields(fields))

    def with_error(self, err: BaseException) -> "Entry":
        """Return a new Entry with err stored under the ``error`` key."""
        return self.with_field(ERROR_KEY, err)

    def string(self) -> str:
        """Render this entry with the logger's formatter, without writing it."""
        data = self.logger.formatter.format(self)
        if isinstance(data, bytes):
            return data.decode("utf-8", errors="replace")
        return str(data)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "time": self.time.isoformat() if self.time else None,
            "level": str(self.level),
            "msg": self.message,
            "fields": self.data.to_dict(),
        }

    # -- dispatch --------------------------------------------------------

    def log(self, level: Level, message: str) -> None:
        """
        Emit message at level if the logger's threshold allows it.

        Hooks fire first, outside the logger lock. Formatting and the
        write to the sink happen under the lock. FATAL then exits the
        process and PANIC raises PanicError.
        """
        if not is_at_least(level, self.logger.level):
            return
        self._dispatch(level, message)

    def _dispatch(self, level: Level, message: str) -> None:
        entry = Entry(self.logger, self.data)
        entry.time = datetime.now().astimezone()
        entry.level = level
        entry.message = message

        logger = self.logger
        for err in logger.hooks.fire(level, entry):
            logger.report(f"Failed to fire hook: {err}")

        with logger.lock:
            try:
                data = logger.formatter.format(entry)
                if isinstance(data, str):
                    data = data.encode("utf-8")
            except Exception as e:
                logger.report(f"Failed to format entry: {FormatError(e)}")
                data = _fallback_bytes(entry)

            try:
                logger.write(data)
            except Exception as e:
                logger.report(f"Failed to write to log: {WriteError(e)}")

        if level == Level.FATAL:
            logger.exit(1)
        elif level == Level.PANIC:
            raise PanicError(message, entry)

    # -- space-joined variants --------------------------------------------

    def debug(self, *args: Any) -> None:
        if self.logger.level <= Level.DEBUG:
            self.log(Level.DEBUG, sprint(*args))

    def info(self, *args: Any) -> None:
        if self.logger.level <= Level.INFO:
            self.log(Level.INFO, sprint(*args))

    def print(self, *args: Any) -> None:
        """Log at INFO regardless of the logger's level."""
        self._dispatch(Level.INFO, sprint(*args))

    def warn(self, *args: Any) -> None:
        if self.logger.level <= Level.WARN:
            self.log(Level.WARN, sprint(*args))

    def warning(self, *args: Any) -> None:
        self.warn(*args)

    def error(self, *args: Any) -> None:
        if self.logger.level <= Level.ERROR:
            self.log(Level.ERROR, sprint(*args))

    def fatal(self, *args: Any) -> None:
        if self.logger.level <= Level.FATAL:
            self.log(Level.FATAL, sprint(*args))

    def panic(self, *args: Any) -> None:
        if self.logger.level <= Level.PANIC:
            self.log(Level.PANIC, sprint(*args))

    # -- printf-style variants --------------------------------------------

    def debugf(self, template: str, *args: Any) -> None:
        if self.logger.level <= Level.DEBUG:
            self.log(Level.DEBUG, sprintf(template, *args))

    def infof(self, template: str, *args: Any) -> None:
        if self.logger.level <= Level.INFO:
            self.log(Level.INFO, sprintf(template, *args))

    def printf(self, template: str, *args: Any) -> None:
        """Log at INFO regardless of the logger's level."""
        self._dispatch(Level.INFO, sprintf(template, *args))

    def warnf(self, template: str, *args: Any) -> None:
        if self.logger.level <= Level.WARN:
            self.log(Level.WARN, sprintf(template, *args))

    def warningf(self, template: str, *args: Any) -> None:
        self.warnf(template, *args)

    def errorf(self, template: str, *args: Any) -> None:
        if self.logger.level <= Level.ERROR:
            self.log(Level.ERROR, sprintf(template, *args))

    def fatalf(self, template: str, *args: Any) -> None:
        if self.logger.level <= Level.FATAL:
            self.log(Level.FATAL, sprintf(template, *args))

    def panicf(self, template: str, *args: Any) -> None:
        if self.logger.level <= Level.PANIC:
            self.log(Level.PANIC, sprintf(template, *args))

    # -- line variants ----------------------------------------------------

    def debugln(self, *args: Any) -> None:
        if self.logger.level <= Level.DEBUG:
            self.log(Level.DEBUG, sprintln(*args))

    def infoln(self, *args: Any) -> None:
        if self.logger.level <= Level.INFO:
            self.log(Level.INFO, sprintln(*args))

    def println(self, *args: Any) -> None:
        """Log at INFO regardless of the logger's level."""
        self._dispatch(Level.INFO, sprintln(*args))

    def warnln(self, *args: Any) -> None:
        if self.logger.level <= Level.WARN:
            self.log(Level.WARN, sprintln(*args))

    def warningln(self, *args: Any) -> None:
        self.warnln(*args)

    def errorln(self, *args: Any) -> None:
        if self.logger.level <= Level.ERROR:
            self.log(Level.ERROR, sprintln(*args))

    def fatalln(self, *args: Any) -> None:
        if self.logger.level <= Level.FATAL:
            self.log(Level.FATAL, sprintln(*args))

    def panicln(self, *args: Any) -> None:
        if self.logger.level <= Level.PANIC:
            self.log(Level.PANIC, sprintln(*args))

    def __repr__(self) -> str:
        return f"Entry(level={str(self.level)}, message={self.message!r}, data={self.data!r})"


def _fallback_bytes(entry: Entry) -> bytes:
    """Minimal rendering used when the formatter fails."""
    return f"level={str(entry.level)} msg={entry.message!r}\n".encode("utf-8", errors="replace")
