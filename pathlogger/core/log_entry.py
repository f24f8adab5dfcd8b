"""
Log entry data structure

One immutable record per logging call.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Dict, Any

from pathlogger.core.log_level import LogLevel


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Holds the level, the time the entry was logged, the path of the
    originating logger and the fully rendered message. Instances are frozen;
    derive modified copies with ``with_message`` or ``dataclasses.replace``.
    """

    level: LogLevel
    time: datetime
    path: str
    message: str

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            raise TypeError("message must be an already rendered str")

    def with_message(self, message: str) -> "LogEntry":
        """Return a copy of this entry carrying a different message."""
        return replace(self, message=message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "time": self.time.isoformat(),
            "path": self.path,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """
        Create log entry from dictionary.

        Args:
            data: Dictionary with log entry data

        Returns:
            New LogEntry instance
        """
        return cls(
            level=LogLevel[data["level"]],
            time=datetime.fromisoformat(data["time"]),
            path=data.get("path", ""),
            message=data["message"],
        )

    def __str__(self) -> str:
        """Render as ``[<time>|<level>]<path> :<message>`` using the stored time."""
        return f"[{self.time.isoformat(sep=' ')}|{self.level.name}]{self.path} :{self.message}"
