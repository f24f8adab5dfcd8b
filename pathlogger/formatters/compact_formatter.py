"""
Compact formatter for minimal log output

Produces concise single-line log entries
"""

from pathlogger.core.log_entry import LogEntry
from pathlogger.core.log_level import LEVEL_ABBREVIATIONS
from pathlogger.formatters.base_formatter import BaseFormatter


class CompactFormatter(BaseFormatter):
    """
    Format log entries in a compact single-line format.
    """

    def __init__(self, include_timestamp: bool = True, include_path: bool = True):
        """
        Initialize compact formatter.

        Args:
            include_timestamp: Include timestamp in output
            include_path: Include logger path in output (skipped when empty)

        Example:
            # Minimal format: "INF: message"
            formatter = CompactFormatter(include_timestamp=False, include_path=False)

            # Full format: "12:34:56 [db/pool] INF: message"
            formatter = CompactFormatter()
        """
        self.include_timestamp = include_timestamp
        self.include_path = include_path

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry in compact format.

        Args:
            entry: Log entry to format

        Returns:
            Compact formatted string
        """
        parts = []

        if self.include_timestamp:
            parts.append(entry.time.strftime("%H:%M:%S"))

        if self.include_path and entry.path:
            parts.append(f"[{entry.path}]")

        parts.append(f"{LEVEL_ABBREVIATIONS[entry.level]}:")
        parts.append(entry.message)

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"CompactFormatter(timestamp={self.include_timestamp}, path={self.include_path})"
