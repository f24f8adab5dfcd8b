"""File appending consumer"""

from pathlib import Path
from typing import Optional, Union

from pathlogger.core.log_entry import LogEntry
from pathlogger.formatters.base_formatter import BaseFormatter


class FileWriter:
    """
    Consumer appending one line per entry to a file.

    The file is opened on construction and stays open until ``close``.
    Writes are not synchronized; share one writer across threads only
    behind your own lock.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        mode: str = "a",
        encoding: str = "utf-8",
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file (parent directories are created)
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            formatter: Log formatter (default: uses entry's __str__)
        """
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self.formatter = formatter
        self._file = None
        self._open()

    def _open(self):
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    @property
    def closed(self) -> bool:
        return self._file is None

    def write(self, entry: LogEntry) -> None:
        """
        Write log entry to file.

        Raises:
            ValueError: If the writer has been closed
        """
        if self._file is None:
            raise ValueError(f"FileWriter for {self.filepath} is closed")
        if self.formatter:
            msg = self.formatter.format(entry)
        else:
            msg = str(entry)
        self._file.write(msg + "\n")

    __call__ = write

    def flush(self) -> None:
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self) -> None:
        """Close file. Safe to call more than once."""
        if self._file:
            self._file.close()
            self._file = None

    def __enter__(self) -> "FileWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileWriter(filepath='{self.filepath}')"
