"""Writers module - ready-made consumers"""

from pathlogger.writers.console_writer import ConsoleWriter
from pathlogger.writers.file_writer import FileWriter

__all__ = ["ConsoleWriter", "FileWriter"]
