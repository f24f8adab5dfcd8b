"""
Core module for pathlogger

This module contains the fundamental pieces:
- LogLevel: Log level enumeration
- LogEntry: Immutable log entry
- Logger: Immutable logger value (path + consumer)
- combinators: Functions deriving new loggers
- LoggerConfig / LoggerBuilder: Configuration and fluent construction
"""

from pathlogger.core.log_level import LogLevel
from pathlogger.core.log_entry import LogEntry
from pathlogger.core.logger import Logger, LogFormatError
from pathlogger.core import combinators
from pathlogger.core.logger_config import LoggerConfig
from pathlogger.core.logger_builder import LoggerBuilder

__all__ = [
    "LogLevel",
    "LogEntry",
    "Logger",
    "LogFormatError",
    "combinators",
    "LoggerConfig",
    "LoggerBuilder",
]
