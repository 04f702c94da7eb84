"""Tests for log levels"""

import pytest

from fieldlog import Level, parse_level
from fieldlog.core.level import ALL_LEVELS, compare, is_at_least


class TestLevel:
    """Test level ordering and parsing."""

    def test_levels_ordered_by_severity(self):
        assert Level.DEBUG < Level.INFO
        assert Level.INFO < Level.WARN
        assert Level.WARN < Level.ERROR
        assert Level.ERROR < Level.FATAL
        assert Level.FATAL < Level.PANIC

    def test_all_levels_ascending(self):
        assert ALL_LEVELS == (
            Level.DEBUG, Level.INFO, Level.WARN,
            Level.ERROR, Level.FATAL, Level.PANIC,
        )

    def test_str_is_lowercase_name(self):
        assert str(Level.INFO) == "info"
        assert str(Level.PANIC) == "panic"

    def test_from_string(self):
        assert Level.from_string("DEBUG") == Level.DEBUG
        assert Level.from_string("info") == Level.INFO
        assert Level.from_string("warning") == Level.WARN
        assert Level.from_string(" Error ") == Level.ERROR

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            Level.from_string("verbose")

    def test_parse_level(self):
        assert parse_level(Level.FATAL) is Level.FATAL
        assert parse_level("panic") == Level.PANIC
        assert parse_level(30) == Level.WARN

    def test_compare(self):
        assert compare(Level.ERROR, Level.INFO) == 1
        assert compare(Level.INFO, Level.ERROR) == -1
        assert compare(Level.WARN, Level.WARN) == 0

    def test_is_at_least(self):
        assert is_at_least(Level.ERROR, Level.INFO)
        assert is_at_least(Level.INFO, Level.INFO)
        assert not is_at_least(Level.DEBUG, Level.INFO)

    def test_color_codes(self):
        assert Level.ERROR.color_code.startswith("\033[")
        assert Level.INFO.reset_code == "\033[0m"
