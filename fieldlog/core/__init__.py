"""
Core module for fieldlog

This module contains the fundamental classes:
- Logger: Shared configuration, sink and write lock
- Entry: One log record and its fields
- Fields: Read-only field mapping
- Level: Severity enumeration
- LevelHooks: Hook registry
- LoggerConfig / LoggerBuilder: Configuration
"""

from fieldlog.core.level import Level, parse_level
from fieldlog.core.fields import Fields
from fieldlog.core.errors import (
    FieldLogError,
    FormatError,
    HookError,
    PanicError,
    WriteError,
)
from fieldlog.core.hooks import Hook, LevelHooks
from fieldlog.core.entry import Entry
from fieldlog.core.logger import Logger
from fieldlog.core.logger_config import LoggerConfig
from fieldlog.core.logger_builder import LoggerBuilder

__all__ = [
    "Level",
    "parse_level",
    "Fields",
    "FieldLogError",
    "FormatError",
    "HookError",
    "PanicError",
    "WriteError",
    "Hook",
    "LevelHooks",
    "Entry",
    "Logger",
    "LoggerConfig",
    "LoggerBuilder",
]
