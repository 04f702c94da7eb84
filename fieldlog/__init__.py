"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

fieldlog - Structured, leveled logging with fields, hooks and
pluggable formatters
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from fieldlog.core.logger import Logger
from fieldlog.core.logger_builder import LoggerBuilder
from fieldlog.core.logger_config import LoggerConfig
from fieldlog.core.entry import Entry
from fieldlog.core.fields import Fields
from fieldlog.core.level import Level, parse_level
from fieldlog.core.hooks import Hook, LevelHooks
from fieldlog.core.errors import (
    FieldLogError,
    FormatError,
    HookError,
    PanicError,
    WriteError,
)
from fieldlog.core.exit import register_exit_handler
from fieldlog.formatters import TextFormatter, JSONFormatter

# Import submodules (not all classes by default)
from fieldlog import formatters
from fieldlog import hooks

from fieldlog.exported import (
    std,
    standard_logger,
    set_output,
    set_formatter,
    set_level,
    get_level,
    add_hook,
    with_field,
    with_fields,
    with_error,
    debug,
    info,
    warn,
    warning,
    error,
    fatal,
    panic,
    debugf,
    infof,
    printf,
    warnf,
    warningf,
    errorf,
    fatalf,
    panicf,
    debugln,
    infoln,
    println,
    warnln,
    warningln,
    errorln,
    fatalln,
    panicln,
)

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LoggerConfig",
    "Entry",
    "Fields",
    "Level",
    "parse_level",
    "Hook",
    "LevelHooks",
    "FieldLogError",
    "FormatError",
    "HookError",
    "PanicError",
    "WriteError",
    "register_exit_handler",
    "TextFormatter",
    "JSONFormatter",
    "formatters",
    "hooks",
    "std",
    "standard_logger",
    "set_output",
    "set_formatter",
    "set_level",
    "get_level",
    "add_hook",
    "with_field",
    "with_fields",
    "with_error",
    "debug",
    "info",
    "warn",
    "warning",
    "error",
    "fatal",
    "panic",
    "debugf",
    "infof",
    "printf",
    "warnf",
    "warningf",
    "errorf",
    "fatalf",
    "panicf",
    "debugln",
    "infoln",
    "println",
    "warnln",
    "warningln",
    "errorln",
    "fatalln",
    "panicln",
]
