"""Logger builder pattern"""

from typing import IO, Any, Callable, List, Optional, Union

from fieldlog.core.hooks import Hook
from fieldlog.core.level import Level
from fieldlog.core.logger import Logger
from fieldlog.core.logger_config import LoggerConfig


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._formatter = None
        self._hooks: List[Hook] = []
        self._exit_func: Optional[Callable[[int], Any]] = None

    def with_level(self, level: Union[Level, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        self._config.level = level
        return self

    def with_output(self, stream: IO) -> "LoggerBuilder":
        """Set the sink entries are written to."""
        self._config.output = stream
        return self

    def with_error_output(self, stream: IO) -> "LoggerBuilder":
        """Set the stream internal failures are reported to."""
        self._config.error_output = stream
        return self

    def with_text(self, colored: Optional[bool] = False) -> "LoggerBuilder":
        """Use the text formatter."""
        self._config.formatter = "text"
        self._config.colored = colored
        return self

    def with_json(self) -> "LoggerBuilder":
        """Use the JSON formatter."""
        self._config.formatter = "json"
        return self

    def with_formatter(self, formatter) -> "LoggerBuilder":
        """
        Use a custom formatter.

        Args:
            formatter: Object with format(entry) -> bytes

        Returns:
            Self for method chaining
        """
        self._formatter = formatter
        return self

    def with_hook(self, hook: Hook) -> "LoggerBuilder":
        """
        Register a hook.

        Args:
            hook: Object with levels() and fire(entry)

        Returns:
            Self for method chaining

        Example:
            from fieldlog.hooks import WriterHook

            logger = (LoggerBuilder()
                .with_hook(WriterHook(sys.stderr, levels=[Level.ERROR]))
                .build())
        """
        self._hooks.append(hook)
        return self

    def with_exit_func(self, exit_func: Callable[[int], Any]) -> "LoggerBuilder":
        """Replace the function called after a FATAL entry."""
        self._exit_func = exit_func
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        # Re-run validation on values set through the builder
        config = LoggerConfig(**vars(self._config))
        logger = Logger.from_config(config)

        if self._formatter is not None:
            logger.formatter = self._formatter
        if self._exit_func is not None:
            logger.exit_func = self._exit_func
        for hook in self._hooks:
            logger.add_hook(hook)

        return logger
