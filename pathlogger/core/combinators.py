"""
Logger combinators

Pure functions deriving new Logger values from existing ones. None of them
mutate their input; each returns a fresh Logger.

Combinators take their extra parameters first and the logger last, so they
curry naturally with functools.partial and chain with ``pipe``::

    from functools import partial

    logger = pipe(
        PRINTFN,
        partial(append_path, "db"),
        partial(add_consumer, audit),
        indent,
    )

The order of application is the order of execution: in the example the
entry is indented, printed, then handed to ``audit``. A consumer added
after ``indent`` would receive the entry before indentation.
"""

import os
from typing import Any, Callable

from pathlogger.core.log_entry import LogEntry
from pathlogger.core.log_level import LogLevel
from pathlogger.core.logger import Consumer, Logger

INDENT = "    "


def ignore(entry: LogEntry) -> None:
    """Consumer that discards every entry."""


def print_entry(entry: LogEntry) -> None:
    """Consumer that prints the entry's default text to stdout."""
    print(entry)


# The default logger. Has no path and does nothing on consumption.
DEFAULT = Logger("", ignore)

# A logger that prints every entry to stdout.
PRINTFN = Logger("", print_entry)


def with_consumer(new_consumer: Consumer, logger: Logger) -> Logger:
    """Create a new logger with the provided consumer."""
    return Logger(logger.path, new_consumer)


def with_path(new_path: str, logger: Logger) -> Logger:
    """Create a new logger with the provided path."""
    return Logger(new_path, logger.consumer)


def append_path(new_segment: str, logger: Logger) -> Logger:
    """
    Create a new logger with a path segment appended.

    Segments are joined with ``os.path.join``, so ``"a"`` and ``"b"`` give
    ``"a/b"`` on POSIX and an empty parent path gives just the segment.
    """
    return Logger(os.path.join(logger.path, new_segment), logger.consumer)


def logf(level: LogLevel, logger: Logger, fmt: str, *args: Any) -> None:
    """Log a formatted message to the logger at the provided level."""
    logger.logf(level, fmt, *args)


def add_consumer(new_consumer: Consumer, logger: Logger) -> Logger:
    """
    Add a consumer so that the current one runs first, then the new one.

    Both receive the same entry. An error from the current consumer stops
    the chain before the new one runs.
    """
    current = logger.consumer

    def consume(entry: LogEntry) -> None:
        current(entry)
        new_consumer(entry)

    return with_consumer(consume, logger)


def decorate(f: Callable[[LogEntry], LogEntry], logger: Logger) -> Logger:
    """Create a new logger whose consumer sees ``f(entry)`` instead of ``entry``."""
    current = logger.consumer

    def consume(entry: LogEntry) -> None:
        current(f(entry))

    return Logger(logger.path, consume)


def indent_entry(entry: LogEntry) -> LogEntry:
    return entry.with_message(INDENT + entry.message)


def indent(logger: Logger) -> Logger:
    """Create a new logger that indents all messages by 4 spaces."""
    return decorate(indent_entry, logger)


def pipe(logger: Logger, *steps: Callable[[Logger], Logger]) -> Logger:
    """Apply single-argument combinators to a logger from left to right."""
    for step in steps:
        logger = step(logger)
    return logger
