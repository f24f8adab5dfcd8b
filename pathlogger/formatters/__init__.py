"""
Log formatters module

Formatters turn a LogEntry into text for the writers.
"""

from pathlogger.formatters.base_formatter import BaseFormatter
from pathlogger.formatters.text_formatter import TextFormatter
from pathlogger.formatters.json_formatter import JSONFormatter
from pathlogger.formatters.compact_formatter import CompactFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
    "CompactFormatter",
]
