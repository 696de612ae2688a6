"""Small line-oriented logger with console and file sinks."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import IO, Any

BUFFER_SIZE = 1024
_RESET = "\033[0m"


class LogLevel(IntEnum):
    """Severity of a log message, ordered from least to most severe."""

    VERBOSE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5
    FIXED = 6


_NAMES = {
    LogLevel.VERBOSE: "VERBOSE",
    LogLevel.DEBUG: "  DEBUG",
    LogLevel.INFO: "   INFO",
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "  ERROR",
    LogLevel.FATAL: "  FATAL",
    LogLevel.FIXED: "  FIXED",
}

_COLORS = {
    LogLevel.VERBOSE: "\033[90m",
    LogLevel.DEBUG: "\033[36m",
    LogLevel.INFO: "\033[32m",
    LogLevel.WARNING: "\033[33m",
    LogLevel.ERROR: "\033[31m",
    LogLevel.FATAL: "\033[91m",
    LogLevel.FIXED: "\033[97m",
}


def level_name(level: LogLevel) -> str:
    """Return the fixed-width label of a level."""
    return _NAMES.get(level, "UNKNOWN")


def level_color(level: LogLevel) -> str:
    """Return the ANSI colour sequence used for a level."""
    return _COLORS.get(level, _RESET)


class LogBuffer:
    """Accumulates message fragments and emits them as one timestamped line."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self.stream = stream
        self.level = LogLevel.INFO
        self.console_threshold = LogLevel.VERBOSE
        self.file_threshold = LogLevel.VERBOSE
        self.use_colors = True
        self.include_date = True
        self.file_logging_enabled = False
        self.file_path: Path | None = None
        self._file: IO[str] | None = None
        self._text = ""
        self.lock = threading.RLock()

    @property
    def text(self) -> str:
        """The message accumulated so far."""
        return self._text

    def reset(self) -> None:
        """Discard the accumulated message and restore the default level."""
        self._text = ""
        self.level = LogLevel.INFO

    def _add(self, fragment: str) -> None:
        room = BUFFER_SIZE - 1 - len(self._text)
        if room > 0:
            self._text += fragment[:room]

    def append(self, value: Any) -> None:
        """Append a value followed by a space; None and empty strings are skipped."""
        if value is None:
            return
        if isinstance(value, bool):
            self._add(("true" if value else "false") + " ")
        elif isinstance(value, int):
            self._add(f"{value} ")
        elif isinstance(value, float):
            self._add(f"{value:.8f} ")
        elif isinstance(value, str):
            if value:
                self._add(value + " ")
        else:
            text = str(value)
            if text:
                self._add(text + " ")

    def append_hex(self, value: int) -> None:
        """Append a non-negative integer in upper-case hexadecimal with a 0x prefix."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("append_hex expects an integer")
        if value < 0:
            raise ValueError("append_hex expects a non-negative integer")
        self._add(f"0x{value:X} ")

    def timestamp(self) -> str:
        """Return the current local time formatted as a line prefix."""
        now = datetime.now()
        fmt = "%Y-%m-%d %H:%M:%S" if self.include_date else "%H:%M:%S"
        return f"{now.strftime(fmt)}.{now.microsecond:06d} | "

    def emit(self, level: LogLevel) -> str:
        """Write the accumulated message at the given level and reset; return the line."""
        with self.lock:
            self.level = level
            message = f"{self.timestamp()}{level_name(level)} | {self._text}\n"
            if level >= self.console_threshold:
                stream = self.stream if self.stream is not None else sys.stdout
                if self.use_colors:
                    stream.write(f"{level_color(level)}{message}{_RESET}")
                else:
                    stream.write(message)
            if self.file_logging_enabled and level >= self.file_threshold and self._file:
                self._file.write(message)
                self._file.flush()
            self.reset()
            return message

    def enable_file_logging(self, directory: str | Path | None = None) -> Path | None:
        """Open a time-stamped log file in the directory; return its path or None."""
        with self.lock:
            if self.file_logging_enabled:
                return self.file_path
            name = datetime.now().strftime("log_%Y%m%d_%H%M%S.txt")
            path = Path(directory) / name if directory is not None else Path(name)
            try:
                self._file = open(path, "w", encoding="utf-8")
            except OSError:
                self._file = None
                self.file_logging_enabled = False
                return None
            self.file_path = path
            self.file_logging_enabled = True
            return path

    def disable_file_logging(self) -> None:
        """Close the log file, if one is open."""
        with self.lock:
            if self._file is not None:
                self._file.close()
                self._file = None
            self.file_logging_enabled = False


_logger = LogBuffer()


def get_logger() -> LogBuffer:
    """Return the shared logger."""
    return _logger


def set_logger(logger: LogBuffer) -> None:
    """Replace the shared logger."""
    global _logger
    _logger = logger


def log_print(level: LogLevel, *args: Any) -> str:
    """Append each argument to the shared logger and emit the line."""
    logger = get_logger()
    with logger.lock:
        for arg in args:
            logger.append(arg)
        return logger.emit(level)


def log_init(
    console_level: LogLevel,
    file_level: LogLevel,
    enable_file: bool,
    use_colors: bool,
    include_date: bool,
) -> None:
    """Configure the shared logger."""
    logger = get_logger()
    logger.console_threshold = console_level
    logger.file_threshold = file_level
    logger.use_colors = use_colors
    logger.include_date = include_date
    if enable_file:
        logger.enable_file_logging()
    else:
        logger.disable_file_logging()


def log_deinit() -> None:
    """Close the shared logger's file sink."""
    get_logger().disable_file_logging()