"""
Log formatters module

Formatters turn a finalized Entry into the bytes written to the sink.
"""

from fieldlog.formatters.base_formatter import BaseFormatter, Formatter
from fieldlog.formatters.text_formatter import TextFormatter
from fieldlog.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "Formatter",
    "TextFormatter",
    "JSONFormatter",
]
