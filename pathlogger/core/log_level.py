"""
Log level enumeration

Five fixed levels ordered by increasing severity.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are ordinal (DEBUG=0 ... FATAL=4) so levels compare by severity.
    """

    DEBUG = 0   # Debug information
    INFO = 1    # Informational messages
    WARN = 2    # Warning messages
    ERROR = 3   # Error messages
    FATAL = 4   # Unrecoverable errors

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.upper()
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        return LEVEL_COLORS.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "\033[36m",  # Cyan
    LogLevel.INFO: "\033[32m",   # Green
    LogLevel.WARN: "\033[33m",   # Yellow
    LogLevel.ERROR: "\033[31m",  # Red
    LogLevel.FATAL: "\033[35m",  # Magenta
}

# Short names used by the compact formatter
LEVEL_ABBREVIATIONS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "DBG",
    LogLevel.INFO: "INF",
    LogLevel.WARN: "WRN",
    LogLevel.ERROR: "ERR",
    LogLevel.FATAL: "FTL",
}
