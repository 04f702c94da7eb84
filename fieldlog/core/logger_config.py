"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import IO, Any, Dict, Optional, Union

from fieldlog.core.level import Level, parse_level
from fieldlog.formatters.json_formatter import JSONFormatter
from fieldlog.formatters.text_formatter import TextFormatter

FORMATTERS = ("text", "json")


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Describes a Logger declaratively; ``Logger.from_config`` builds it.
    """

    level: Union[Level, str] = Level.INFO

    # Format settings
    formatter: str = "text"
    colored: Optional[bool] = False
    timestamp_format: Optional[str] = None
    disable_timestamp: bool = False

    # Streams (None means stdout / stderr)
    output: Optional[IO] = None
    error_output: Optional[IO] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.level = parse_level(self.level)
        self.formatter = self.formatter.lower()
        if self.formatter not in FORMATTERS:
            raise ValueError(f"formatter must be one of {FORMATTERS}, got {self.formatter!r}")
        if self.output is not None and not hasattr(self.output, "write"):
            raise ValueError("output must have a write() method")
        if self.error_output is not None and not hasattr(self.error_output, "write"):
            raise ValueError("error_output must have a write() method")

    def create_formatter(self):
        """Instantiate the configured formatter."""
        if self.formatter == "json":
            return JSONFormatter(
                timestamp_format=self.timestamp_format,
                disable_timestamp=self.disable_timestamp,
            )
        return TextFormatter(
            colored=self.colored,
            timestamp_format=self.timestamp_format,
            disable_timestamp=self.disable_timestamp,
        )

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=Level.DEBUG,
            colored=None,  # Colors when attached to a terminal
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=Level.WARN,
            formatter="json",
            colored=False,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggerConfig":
        """
        Create configuration from a dictionary, e.g. a parsed settings file.

        Unknown keys are rejected.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)
