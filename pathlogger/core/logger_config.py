"""
Logger configuration management
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Union

STREAMS = ("stdout", "stderr")
FORMATTERS = ("default", "text", "json", "compact")


@dataclass
class LoggerConfig:
    """
    Declarative description of a logger.

    ``LoggerBuilder.with_config`` turns it into combinator steps: the path
    is set first, then the console and file consumers are added, and the
    indentation is applied last so every consumer sees indented messages.
    """

    # Basic settings
    path: str = ""
    indent_level: int = 0

    # Console settings
    console_output: bool = False
    colored_output: bool = False
    stream: str = "stdout"

    # File settings
    log_file: Optional[Union[str, Path]] = None

    # Format settings
    formatter: str = "default"
    text_template: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.indent_level < 0:
            raise ValueError("indent_level cannot be negative")
        if self.stream not in STREAMS:
            raise ValueError(f"stream must be one of {STREAMS}, got {self.stream!r}")
        if self.formatter not in FORMATTERS:
            raise ValueError(f"formatter must be one of {FORMATTERS}, got {self.formatter!r}")
        if self.text_template is not None and self.formatter != "text":
            raise ValueError("text_template requires formatter='text'")

        # Convert log_file to Path if it's a string
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration (root path, no output)."""
        return cls()

    @classmethod
    def console_config(cls, path: str = "") -> "LoggerConfig":
        """Create configuration printing to stdout."""
        return cls(path=path, console_output=True)

    @classmethod
    def debug_config(cls, path: str = "") -> "LoggerConfig":
        """Create configuration for debugging: colored stderr output."""
        return cls(
            path=path,
            console_output=True,
            colored_output=True,
            stream="stderr",
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoggerConfig":
        """
        Create configuration from a plain mapping (e.g. parsed JSON).

        Raises:
            ValueError: If the mapping has keys that are not config fields
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)
