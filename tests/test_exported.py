"""Tests for the standard logger and exit handlers"""

import io

import pytest

import fieldlog
from fieldlog import Level, PanicError, TextFormatter
from fieldlog.core import exit as exit_module
from fieldlog.exported import std
from fieldlog.hooks import CallbackHook


class TestStandardLogger:
    """Test module-level helpers."""

    def setup_method(self):
        self._saved = (std.out, std.formatter, std.level)
        self.out = io.BytesIO()
        fieldlog.set_output(self.out)
        fieldlog.set_formatter(TextFormatter(disable_timestamp=True))

    def teardown_method(self):
        std.out, std.formatter, std.level = self._saved
        std.hooks.clear()

    def lines(self):
        return self.out.getvalue().decode().splitlines()

    def test_standard_logger_is_shared(self):
        assert fieldlog.standard_logger() is std
        assert fieldlog.std is std

    def test_with_field(self):
        fieldlog.with_field("user", "alice").info("login")
        fieldlog.debug("trace")
        assert self.lines() == ["level=info msg=login user=alice"]

    def test_set_level(self):
        fieldlog.set_level("debug")
        assert fieldlog.get_level() == Level.DEBUG
        fieldlog.debugf("x=%d", 1)
        assert self.lines() == ['level=debug msg="x=1"']

    def test_add_hook(self):
        seen = []
        fieldlog.add_hook(CallbackHook(seen.append, levels=[Level.WARN]))
        fieldlog.warning("w")
        fieldlog.errorln("e")
        assert [e.message for e in seen] == ["w"]

    def test_panic(self):
        with pytest.raises(PanicError):
            fieldlog.panicf("bad %s", "state")
        assert self.lines() == ['level=panic msg="bad state"']

    def test_print_family(self):
        fieldlog.set_level(Level.PANIC)
        fieldlog.exported.print("p")
        fieldlog.printf("%s", "f")
        fieldlog.println("l")
        assert self.lines() == ["level=info msg=p", "level=info msg=f", "level=info msg=l"]


class TestExitHandlers:
    """Test exit handler registry."""

    def setup_method(self):
        exit_module.clear_exit_handlers()

    def teardown_method(self):
        exit_module.clear_exit_handlers()

    def test_run_in_order(self):
        order = []
        fieldlog.register_exit_handler(lambda: order.append(1))
        fieldlog.register_exit_handler(lambda: order.append(2))
        exit_module.run_exit_handlers()
        assert order == [1, 2]

    def test_failing_handler_does_not_stop_others(self, capsys):
        order = []

        def broken():
            raise RuntimeError("flush failed")

        exit_module.register_exit_handler(broken)
        exit_module.register_exit_handler(lambda: order.append("after"))
        exit_module.run_exit_handlers()

        assert order == ["after"]
        assert "flush failed" in capsys.readouterr().err

    def test_unregister(self):
        order = []
        handler = lambda: order.append(1)  # noqa: E731
        exit_module.register_exit_handler(handler)
        exit_module.unregister_exit_handler(handler)
        exit_module.run_exit_handlers()
        assert order == []

    def test_requires_callable(self):
        with pytest.raises(TypeError):
            exit_module.register_exit_handler(None)

    def test_exit_process(self):
        with pytest.raises(SystemExit) as exc_info:
            exit_module.exit_process(3)
        assert exc_info.value.code == 3
