"""Tests for text and JSON formatters"""

import io
import json
from datetime import datetime, timezone

from fieldlog import Entry, JSONFormatter, Level, Logger, TextFormatter
from fieldlog.formatters import BaseFormatter, Formatter


def finalized(level=Level.INFO, message="hello", fields=None, **kwargs):
    data = dict(fields or {}, **kwargs)
    entry = Entry(Logger(out=io.BytesIO()), data)
    entry.time = datetime(2026, 1, 2, 15, 4, 5, tzinfo=timezone.utc)
    entry.level = level
    entry.message = message
    return entry


class TestTextFormatter:
    """Test TextFormatter."""

    def test_basic_line(self):
        data = TextFormatter().format(finalized(user="alice"))
        assert data == b"time=2026-01-02T15:04:05+00:00 level=info msg=hello user=alice\n"

    def test_fields_sorted(self):
        data = TextFormatter(disable_timestamp=True).format(finalized(b=2, a=1))
        assert data == b"level=info msg=hello a=1 b=2\n"

    def test_quoting(self):
        entry = finalized(message='say "hi"', path="/tmp/x", note="two words")
        data = TextFormatter(disable_timestamp=True).format(entry).decode()
        assert 'msg="say \\"hi\\""' in data
        assert "path=/tmp/x" in data
        assert 'note="two words"' in data

    def test_newline_escaped(self):
        data = TextFormatter(disable_timestamp=True).format(finalized(message="a\nb"))
        assert data == b'level=info msg="a\\nb"\n'

    def test_reserved_key_clash(self):
        data = TextFormatter(disable_timestamp=True).format(finalized(fields={"level": "custom"}))
        assert data == b"level=info msg=hello fields.level=custom\n"

    def test_timestamp_format(self):
        data = TextFormatter(timestamp_format="%H:%M:%S").format(finalized())
        assert data.startswith(b"time=15:04:05 ")

    def test_colored(self):
        data = TextFormatter(colored=True, disable_timestamp=True).format(
            finalized(level=Level.ERROR)
        ).decode()
        assert f"level={Level.ERROR.color_code}error\033[0m" in data

    def test_auto_color_off_for_non_tty(self):
        data = TextFormatter(colored=None, disable_timestamp=True).format(finalized())
        assert b"\033[" not in data

    def test_is_formatter(self):
        formatter = TextFormatter()
        assert isinstance(formatter, BaseFormatter)
        assert isinstance(formatter, Formatter)
        assert formatter(finalized()) == formatter.format(finalized())


class TestJSONFormatter:
    """Test JSONFormatter."""

    def test_basic_object(self):
        data = JSONFormatter().format(finalized(user="alice", count=3))
        assert data.endswith(b"\n")
        record = json.loads(data)
        assert record == {
            "time": "2026-01-02T15:04:05+00:00",
            "level": "info",
            "msg": "hello",
            "user": "alice",
            "count": 3,
        }

    def test_single_line(self):
        data = JSONFormatter().format(finalized(nested={"a": [1, 2]}))
        assert data.count(b"\n") == 1

    def test_reserved_key_clash(self):
        record = json.loads(JSONFormatter().format(finalized(fields={"msg": "field", "time": "t"})))
        assert record["msg"] == "hello"
        assert record["fields.msg"] == "field"
        assert record["fields.time"] == "t"

    def test_non_serializable_values(self):
        record = json.loads(JSONFormatter(disable_timestamp=True).format(
            finalized(error=ValueError("bad"), when=datetime(2020, 1, 1), tags={"b", "a"})
        ))
        assert "time" not in record
        assert record["error"] == "bad"
        assert record["when"] == "2020-01-01 00:00:00"
        assert record["tags"] == ["a", "b"]

    def test_unicode_preserved(self):
        data = JSONFormatter(disable_timestamp=True).format(finalized(message="héllo"))
        assert "héllo".encode("utf-8") in data

    def test_logger_integration(self):
        out = io.BytesIO()
        logger = Logger(out=out, formatter=JSONFormatter())
        logger.with_fields({"user": "alice"}).info("login")

        record = json.loads(out.getvalue())
        assert record["level"] == "info"
        assert record["msg"] == "login"
        assert record["user"] == "alice"
