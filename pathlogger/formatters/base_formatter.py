"""
Formatter interface

A formatter maps a LogEntry to a line of text. Formatters are plain callables,
so they slot into writers and into ``to_consumer`` alike.
"""

from abc import ABC, abstractmethod
from typing import Callable

from pathlogger.core.log_entry import LogEntry
from pathlogger.core.logger import Consumer


class BaseFormatter(ABC):
    """Abstract base class for entry formatters."""

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """Render one entry as text."""

    def __call__(self, entry: LogEntry) -> str:
        return self.format(entry)

    def to_consumer(self, sink: Callable[[str], object]) -> Consumer:
        """
        Build a consumer that formats each entry and passes the text to ``sink``.

        Example:
            logger = with_consumer(JSONFormatter().to_consumer(print), DEFAULT)
        """
        def consume(entry: LogEntry) -> None:
            sink(self.format(entry))

        return consume
