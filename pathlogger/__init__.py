"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

pathlogger - Immutable, composable loggers built from a path and a consumer
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from pathlogger.core.log_level import LogLevel
from pathlogger.core.log_entry import LogEntry
from pathlogger.core.logger import Logger, LogFormatError
from pathlogger.core.combinators import (
    DEFAULT,
    PRINTFN,
    add_consumer,
    append_path,
    decorate,
    ignore,
    indent,
    logf,
    pipe,
    print_entry,
    with_consumer,
    with_path,
)
from pathlogger.core.logger_config import LoggerConfig
from pathlogger.core.logger_builder import LoggerBuilder

# Import submodules (not all classes by default)
from pathlogger import formatters
from pathlogger import writers

__all__ = [
    "LogLevel",
    "LogEntry",
    "Logger",
    "LogFormatError",
    "DEFAULT",
    "PRINTFN",
    "add_consumer",
    "append_path",
    "decorate",
    "ignore",
    "indent",
    "logf",
    "pipe",
    "print_entry",
    "with_consumer",
    "with_path",
    "LoggerConfig",
    "LoggerBuilder",
    "formatters",
    "writers",
]
