"""Logger builder pattern"""

import sys
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional, Union

from pathlogger.core import combinators
from pathlogger.core.log_entry import LogEntry
from pathlogger.core.logger import Consumer, Logger
from pathlogger.core.logger_config import LoggerConfig
from pathlogger.formatters import BaseFormatter, CompactFormatter, JSONFormatter, TextFormatter
from pathlogger.writers.console_writer import ConsoleWriter
from pathlogger.writers.file_writer import FileWriter

Step = Callable[[Logger], Logger]


def make_formatter(name: str, template: Optional[str] = None) -> Optional[BaseFormatter]:
    """Map a config formatter name to a formatter; ``"default"`` means ``str(entry)``."""
    if name == "default":
        return None
    if name == "text":
        return TextFormatter(template)
    if name == "json":
        return JSONFormatter()
    if name == "compact":
        return CompactFormatter()
    raise ValueError(f"Unknown formatter: {name}")


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Each call records one combinator step; ``build`` applies the steps to
    the base logger in call order, so the builder composes exactly like
    chaining the combinators by hand::

        logger = (LoggerBuilder()
            .append_path("svc")
            .indent()
            .with_console()
            .build())
    """

    def __init__(self, base: Logger = combinators.DEFAULT):
        self._base = base
        self._steps: List[Step] = []
        self.writers: List[Union[ConsoleWriter, FileWriter]] = []

    def _step(self, step: Step) -> "LoggerBuilder":
        self._steps.append(step)
        return self

    def with_path(self, path: str) -> "LoggerBuilder":
        """Replace the path."""
        return self._step(partial(combinators.with_path, path))

    def append_path(self, segment: str) -> "LoggerBuilder":
        """Append a path segment."""
        return self._step(partial(combinators.append_path, segment))

    def with_consumer(self, consumer: Consumer) -> "LoggerBuilder":
        """Replace the consumer built so far."""
        return self._step(partial(combinators.with_consumer, consumer))

    def add_consumer(self, consumer: Consumer) -> "LoggerBuilder":
        """Run ``consumer`` after the consumer built so far."""
        return self._step(partial(combinators.add_consumer, consumer))

    def decorate(self, f: Callable[[LogEntry], LogEntry]) -> "LoggerBuilder":
        """Map entries through ``f`` before the consumer built so far."""
        return self._step(partial(combinators.decorate, f))

    def indent(self, times: int = 1) -> "LoggerBuilder":
        """Indent messages by 4 spaces, ``times`` times."""
        for _ in range(times):
            self._step(combinators.indent)
        return self

    def with_console(
        self,
        colored: bool = False,
        stream=None,
        formatter: Optional[BaseFormatter] = None,
    ) -> "LoggerBuilder":
        """Add a console consumer."""
        writer = ConsoleWriter(colored=colored, stream=stream, formatter=formatter)
        self.writers.append(writer)
        return self._step(partial(combinators.add_consumer, writer))

    def with_file(
        self,
        filepath: Union[str, Path],
        formatter: Optional[BaseFormatter] = None,
    ) -> "LoggerBuilder":
        """
        Add a file consumer.

        The file is opened here, once; every logger returned by ``build``
        shares that writer. Close it through ``writers``.
        """
        writer = FileWriter(filepath, formatter=formatter)
        self.writers.append(writer)
        return self._step(partial(combinators.add_consumer, writer))

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """
        Record the steps described by a LoggerConfig.

        Args:
            config: Configuration to apply

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_config(LoggerConfig.console_config("worker"))
                .build())
        """
        formatter = make_formatter(config.formatter, config.text_template)

        self.with_path(config.path)
        if config.console_output:
            stream = sys.stderr if config.stream == "stderr" else None
            self.with_console(colored=config.colored_output, stream=stream, formatter=formatter)
        if config.log_file is not None:
            self.with_file(config.log_file, formatter=formatter)
        return self.indent(config.indent_level)

    def build(self) -> Logger:
        """Build and return configured logger."""
        return combinators.pipe(self._base, *self._steps)

    @classmethod
    def from_config(cls, config: LoggerConfig) -> Logger:
        """Build a logger straight from a LoggerConfig."""
        return cls().with_config(config).build()
