"""
Logger - shared configuration and the synchronization point for writes

Configuration is changed by assigning the attributes directly::

    logger = Logger()
    logger.out = open("app.log", "ab")
    logger.formatter = JSONFormatter()
    logger.level = Level.DEBUG
"""

from __future__ import annotations

import sys
import threading
from typing import IO, TYPE_CHECKING, Any, Callable, Mapping, Optional, Union

from fieldlog.core.entry import Entry
from fieldlog.core.exit import exit_process, run_exit_handlers
from fieldlog.core.hooks import Hook, LevelHooks
from fieldlog.core.level import Level, parse_level
from fieldlog.core.sink import write_to
from fieldlog.formatters.text_formatter import TextFormatter

if TYPE_CHECKING:
    from fieldlog.core.logger_config import LoggerConfig
    from fieldlog.formatters.base_formatter import Formatter


class Logger:
    """
    Leveled, structured logger.

    Attributes:
        out: Sink the formatted entries are written to (default: stdout).
             Binary streams receive bytes; text streams receive the
             decoded text.
        formatter: Object with ``format(entry) -> bytes``
                   (default: TextFormatter).
        hooks: LevelHooks registry (default: empty).
        level: Threshold; entries less severe are dropped (default: INFO).
        err_out: Stream internal failures are reported to (default: stderr).
        exit_func: Called with the exit code after a FATAL entry
                   (default: exit_process).
        lock: Held while an entry is formatted and written.
    """

    def __init__(
        self,
        out: Optional[IO] = None,
        formatter: Optional["Formatter"] = None,
        hooks: Optional[LevelHooks] = None,
        level: Union[Level, str] = Level.INFO,
        err_out: Optional[IO] = None,
        exit_func: Optional[Callable[[int], Any]] = None,
    ):
        self.out = out if out is not None else sys.stdout
        self.formatter = formatter if formatter is not None else TextFormatter(colored=None)
        self.hooks = hooks if hooks is not None else LevelHooks()
        self.level = level
        self.err_out = err_out
        self.exit_func = exit_func or exit_process
        self.lock = threading.Lock()

    @property
    def level(self) -> Level:
        return self._level

    @level.setter
    def level(self, level: Union[Level, str]) -> None:
        """Accepts a Level, its integer value or a level name."""
        self._level = parse_level(level)

    @classmethod
    def from_config(cls, config: "LoggerConfig") -> "Logger":
        """Create a logger from a LoggerConfig."""
        return cls(
            out=config.output,
            formatter=config.create_formatter(),
            level=config.level,
            err_out=config.error_output,
        )

    # -- configuration ----------------------------------------------------

    def set_level(self, level: Union[Level, str]) -> None:
        """Set the threshold from a Level or a level name."""
        self.level = level

    def add_hook(self, hook: Hook) -> None:
        """Register a hook for the levels it reports."""
        self.hooks.add(hook)

    # -- level predicates -------------------------------------------------
    #
    # Use these to skip computing expensive arguments:
    #
    #     if logger.is_debug():
    #         logger.debugf("state = %r", expensive_dump())

    def is_debug(self) -> bool:
        return self.level <= Level.DEBUG

    def is_info(self) -> bool:
        return self.level <= Level.INFO

    def is_warn(self) -> bool:
        return self.level <= Level.WARN

    def is_error(self) -> bool:
        return self.level <= Level.ERROR

    def is_fatal(self) -> bool:
        return self.level <= Level.FATAL

    def is_panic(self) -> bool:
        return self.level <= Level.PANIC

    # -- output -----------------------------------------------------------

    def write(self, data: bytes) -> None:
        """
        Write one formatted entry to ``out``.

        Callers must hold ``lock``.
        """
        write_to(self.out, data)

    def report(self, message: str) -> None:
        """Report an internal failure on ``err_out``."""
        try:
            write_to(self.err_out or sys.stderr, (message + "\n").encode("utf-8"))
        except Exception:
            pass  # Nowhere left to report to

    def exit(self, code: int) -> None:
        """Run registered exit handlers, then ``exit_func(code)``."""
        run_exit_handlers()
        self.exit_func(code)

    # -- entry factories --------------------------------------------------

    def with_field(self, key: str, value: Any) -> Entry:
        """
        Start an entry carrying one field.

        Nothing is logged until a severity method is called on the
        returned entry.
        """
        return Entry(self).with_field(key, value)

    def with_fields(self, fields: Mapping[str, Any]) -> Entry:
        """Start an entry carrying fields."""
        return Entry(self).with_fields(fields)

    def with_error(self, err: BaseException) -> Entry:
        """Start an entry carrying err under the ``error`` key."""
        return Entry(self).with_error(err)

    # -- severity methods -------------------------------------------------

    def log(self, level: Union[Level, str], message: str) -> None:
        Entry(self).log(parse_level(level), message)

    def debug(self, *args: Any) -> None:
        Entry(self).debug(*args)

    def info(self, *args: Any) -> None:
        Entry(self).info(*args)

    def print(self, *args: Any) -> None:
        Entry(self).print(*args)

    def warn(self, *args: Any) -> None:
        Entry(self).warn(*args)

    def warning(self, *args: Any) -> None:
        Entry(self).warn(*args)

    def error(self, *args: Any) -> None:
        Entry(self).error(*args)

    def fatal(self, *args: Any) -> None:
        Entry(self).fatal(*args)

    def panic(self, *args: Any) -> None:
        Entry(self).panic(*args)

    def debugf(self, template: str, *args: Any) -> None:
        Entry(self).debugf(template, *args)

    def infof(self, template: str, *args: Any) -> None:
        Entry(self).infof(template, *args)

    def printf(self, template: str, *args: Any) -> None:
        Entry(self).printf(template, *args)

    def warnf(self, template: str, *args: Any) -> None:
        Entry(self).warnf(template, *args)

    def warningf(self, template: str, *args: Any) -> None:
        Entry(self).warnf(template, *args)

    def errorf(self, template: str, *args: Any) -> None:
        Entry(self).errorf(template, *args)

    def fatalf(self, template: str, *args: Any) -> None:
        Entry(self).fatalf(template, *args)

    def panicf(self, template: str, *args: Any) -> None:
        Entry(self).panicf(template, *args)

    def debugln(self, *args: Any) -> None:
        Entry(self).debugln(*args)

    def infoln(self, *args: Any) -> None:
        Entry(self).infoln(*args)

    def println(self, *args: Any) -> None:
        Entry(self).println(*args)

    def warnln(self, *args: Any) -> None:
        Entry(self).warnln(*args)

    def warningln(self, *args: Any) -> None:
        Entry(self).warnln(*args)

    def errorln(self, *args: Any) -> None:
        Entry(self).errorln(*args)

    def fatalln(self, *args: Any) -> None:
        Entry(self).fatalln(*args)

    def panicln(self, *args: Any) -> None:
        Entry(self).panicln(*args)

    def __repr__(self) -> str:
        return f"Logger(level={str(self.level)}, formatter={self.formatter!r}, hooks={self.hooks!r})"
