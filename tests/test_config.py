"""Tests for configuration and builder"""

import io
from unittest.mock import Mock

import pytest

from fieldlog import JSONFormatter, Level, Logger, LoggerBuilder, LoggerConfig, TextFormatter
from fieldlog.hooks import CallbackHook


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.level == Level.INFO
        assert config.formatter == "text"
        assert config.output is None

    def test_debug_config(self):
        config = LoggerConfig.debug_config()
        assert config.level == Level.DEBUG
        assert config.colored is None

    def test_production_config(self):
        config = LoggerConfig.production_config()
        assert config.level == Level.WARN
        assert isinstance(config.create_formatter(), JSONFormatter)

    def test_level_name_parsed(self):
        assert LoggerConfig(level="error").level == Level.ERROR

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            LoggerConfig(level="loud")

    def test_invalid_formatter(self):
        with pytest.raises(ValueError):
            LoggerConfig(formatter="xml")

    def test_invalid_output(self):
        with pytest.raises(ValueError):
            LoggerConfig(output="app.log")

    def test_from_dict(self):
        config = LoggerConfig.from_dict({"level": "debug", "formatter": "JSON"})
        assert config.level == Level.DEBUG
        assert config.formatter == "json"

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError):
            LoggerConfig.from_dict({"lvl": "debug"})

    def test_logger_from_config(self):
        out = io.BytesIO()
        err = io.StringIO()
        config = LoggerConfig(level="warn", output=out, error_output=err, disable_timestamp=True)
        logger = Logger.from_config(config)

        logger.info("hidden")
        logger.warn("shown")

        assert logger.err_out is err
        assert out.getvalue() == b"level=warn msg=shown\n"


class TestLoggerBuilder:
    """Test LoggerBuilder."""

    def test_build_defaults(self):
        logger = LoggerBuilder().build()
        assert logger.level == Level.INFO
        assert isinstance(logger.formatter, TextFormatter)

    def test_builder_pattern(self):
        out = io.BytesIO()
        seen = []
        exit_func = Mock()
        logger = (LoggerBuilder()
            .with_level("debug")
            .with_output(out)
            .with_error_output(io.StringIO())
            .with_json()
            .with_hook(CallbackHook(seen.append, levels=[Level.DEBUG]))
            .with_exit_func(exit_func)
            .build())

        logger.debug("d")

        assert logger.level == Level.DEBUG
        assert isinstance(logger.formatter, JSONFormatter)
        assert logger.exit_func is exit_func
        assert len(seen) == 1
        assert b'"msg": "d"' in out.getvalue()

    def test_custom_formatter(self):
        formatter = TextFormatter(disable_timestamp=True)
        logger = LoggerBuilder().with_json().with_formatter(formatter).build()
        assert logger.formatter is formatter

    def test_with_text_colored(self):
        logger = LoggerBuilder().with_text(colored=True).build()
        assert logger.formatter.colored is True

    def test_invalid_level_rejected_on_build(self):
        with pytest.raises(ValueError):
            LoggerBuilder().with_level("loud").build()
