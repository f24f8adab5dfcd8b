"""
Text formatter with customizable template

Formats log entries using a template string with placeholders
"""

from typing import Optional

from pathlogger.core.log_entry import LogEntry
from pathlogger.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entries using a customizable template.

    Supports placeholders for all LogEntry fields.
    """

    DEFAULT_TEMPLATE = "[{time}|{level}]{path} :{message}"

    def __init__(self, template: Optional[str] = None, timestamp_format: Optional[str] = None):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {time}: Entry timestamp
                     - {level}: Log level name
                     - {path}: Logger path
                     - {message}: Log message
            timestamp_format: strftime format for timestamps
                     (default: ISO 8601 with a space separator)

        Example:
            # Same layout as str(entry)
            formatter = TextFormatter()

            # Custom format
            formatter = TextFormatter("{level:5} {path}: {message}")

        Raises:
            KeyError: From format() when the template names an unknown placeholder
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry using the template.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        if self.timestamp_format:
            time_str = entry.time.strftime(self.timestamp_format)
        else:
            time_str = entry.time.isoformat(sep=" ")

        return self.template.format(
            time=time_str,
            level=entry.level.name,
            path=entry.path,
            message=entry.message,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
