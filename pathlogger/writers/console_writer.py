"""Console consumer with optional ANSI colors"""

import sys
from typing import Optional, TextIO

from pathlogger.core.log_entry import LogEntry
from pathlogger.formatters.base_formatter import BaseFormatter


class ConsoleWriter:
    """Consumer writing one line per entry to a console stream."""

    def __init__(
        self,
        colored: bool = False,
        stream: Optional[TextIO] = None,
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize console writer.

        Args:
            colored: Wrap lines in the level's ANSI color code
            stream: Output stream (default: sys.stdout at write time)
            formatter: Log formatter (default: uses entry's __str__)
        """
        self.colored = colored
        self.stream = stream
        self.formatter = formatter

    def write(self, entry: LogEntry) -> None:
        """Write log entry to the stream."""
        if self.formatter:
            msg = self.formatter.format(entry)
        else:
            msg = str(entry)

        # Colors only apply to the default layout
        if self.colored and not self.formatter:
            msg = f"{entry.level.color_code}{msg}{entry.level.reset_code}"

        stream = self.stream or sys.stdout
        stream.write(msg + "\n")
        stream.flush()

    __call__ = write

    def flush(self) -> None:
        """Flush stream."""
        (self.stream or sys.stdout).flush()

    def __repr__(self) -> str:
        return f"ConsoleWriter(colored={self.colored}, formatter={self.formatter!r})"
