"""
Immutable logger value

A Logger pairs a path with a consumer. Every logging call builds a LogEntry
and hands it to the consumer synchronously, before the call returns. Errors
raised by the consumer propagate to the caller unchanged.

Loggers and entries are immutable and may be shared between threads. A
consumer that mutates shared state (an unsynchronized file handle, a list)
must provide its own locking; this layer adds none.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from pathlogger.core.log_level import LogLevel
from pathlogger.core.log_entry import LogEntry

Consumer = Callable[[LogEntry], None]


class LogFormatError(ValueError):
    """Raised when a format template does not match its arguments."""


def render(fmt: str, args: tuple) -> str:
    """
    Render a printf-style template.

    A single mapping argument is used for ``%(name)s`` style templates,
    as the standard library's LogRecord does.

    Raises:
        LogFormatError: If the template and the arguments are incompatible
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        values: Any = args[0]
    else:
        values = args
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError) as e:
        raise LogFormatError(f"Cannot render {fmt!r} with {args!r}: {e}") from e


@dataclass(frozen=True)
class Logger:
    """Immutable logger holding a path and a consumer."""

    path: str
    consumer: Consumer

    def log(self, level: LogLevel, message: str) -> None:
        """Log an already rendered message at the given level."""
        entry = LogEntry(level, datetime.now(), self.path, message)
        self.consumer(entry)

    def logf(self, level: LogLevel, fmt: str, *args: Any) -> None:
        """
        Render ``fmt % args`` and log the result at the given level.

        The template is rendered before the consumer runs, so a formatting
        failure never reaches the consumer.

        Raises:
            LogFormatError: If the template and the arguments are incompatible
        """
        self.log(level, render(fmt, args))

    def debug(self, fmt: str, *args: Any) -> None:
        """Log debug message."""
        self.logf(LogLevel.DEBUG, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        """Log info message."""
        self.logf(LogLevel.INFO, fmt, *args)

    def warn(self, fmt: str, *args: Any) -> None:
        """Log warning message."""
        self.logf(LogLevel.WARN, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        """Log error message."""
        self.logf(LogLevel.ERROR, fmt, *args)

    def fatal(self, fmt: str, *args: Any) -> None:
        """Log fatal message."""
        self.logf(LogLevel.FATAL, fmt, *args)

    def __repr__(self) -> str:
        consumer_name = getattr(self.consumer, "__qualname__", repr(self.consumer))
        return f"Logger: {{path = '{self.path}'; consumer = {consumer_name}}}"
