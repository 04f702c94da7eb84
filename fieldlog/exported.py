"""
Process-wide standard logger

``std`` is created once at import time with the default settings. The
functions below delegate to it for code that prefers module-level
calls::

    import fieldlog

    fieldlog.set_level("debug")
    fieldlog.with_field("user", "alice").info("login")

Library code should accept a Logger as a parameter instead; nothing in
fieldlog.core looks at ``std``.
"""

from typing import IO, Any, Mapping, Union

from fieldlog.core.entry import Entry
from fieldlog.core.hooks import Hook
from fieldlog.core.level import Level, parse_level
from fieldlog.core.logger import Logger

std = Logger()


def standard_logger() -> Logger:
    """Return the standard logger."""
    return std


def set_output(out: IO) -> None:
    """Set the standard logger's sink."""
    with std.lock:
        std.out = out


def set_formatter(formatter) -> None:
    """Set the standard logger's formatter."""
    with std.lock:
        std.formatter = formatter


def set_level(level: Union[Level, str]) -> None:
    """Set the standard logger's level."""
    std.level = parse_level(level)


def get_level() -> Level:
    """Return the standard logger's level."""
    return std.level


def add_hook(hook: Hook) -> None:
    """Register a hook on the standard logger."""
    std.add_hook(hook)


def with_field(key: str, value: Any) -> Entry:
    return std.with_field(key, value)


def with_fields(fields: Mapping[str, Any]) -> Entry:
    return std.with_fields(fields)


def with_error(err: BaseException) -> Entry:
    return std.with_error(err)


def debug(*args: Any) -> None:
    std.debug(*args)


def info(*args: Any) -> None:
    std.info(*args)


def print(*args: Any) -> None:
    std.print(*args)


def warn(*args: Any) -> None:
    std.warn(*args)


def warning(*args: Any) -> None:
    std.warning(*args)


def error(*args: Any) -> None:
    std.error(*args)


def fatal(*args: Any) -> None:
    std.fatal(*args)


def panic(*args: Any) -> None:
    std.panic(*args)


def debugf(template: str, *args: Any) -> None:
    std.debugf(template, *args)


def infof(template: str, *args: Any) -> None:
    std.infof(template, *args)


def printf(template: str, *args: Any) -> None:
    std.printf(template, *args)


def warnf(template: str, *args: Any) -> None:
    std.warnf(template, *args)


def warningf(template: str, *args: Any) -> None:
    std.warningf(template, *args)


def errorf(template: str, *args: Any) -> None:
    std.errorf(template, *args)


def fatalf(template: str, *args: Any) -> None:
    std.fatalf(template, *args)


def panicf(template: str, *args: Any) -> None:
    std.panicf(template, *args)


def debugln(*args: Any) -> None:
    std.debugln(*args)


def infoln(*args: Any) -> None:
    std.infoln(*args)


def println(*args: Any) -> None:
    std.println(*args)


def warnln(*args: Any) -> None:
    std.warnln(*args)


def warningln(*args: Any) -> None:
    std.warningln(*args)


def errorln(*args: Any) -> None:
    std.errorln(*args)


def fatalln(*args: Any) -> None:
    std.fatalln(*args)


def panicln(*args: Any) -> None:
    std.panicln(*args)
