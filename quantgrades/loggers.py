"""Logger interface and concrete loggers (in-memory, silent, file)."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO

from quantgrades.loglevel import LogLevel

__all__ = ["Logger", "MockLogger", "NullLogger", "FileLogger"]


class Logger(ABC):
    """Base logger: subclasses implement :meth:`log`.

    The convenience methods accept an optional ``{}``-style format string
    with positional arguments.
    """

    @abstractmethod
    def log(self, level: LogLevel, message: str) -> None:
        """Record a message at the given level."""

    def _emit(self, level: LogLevel, message: str, args: tuple) -> None:
        self.log(level, message.format(*args) if args else message)

    def trace(self, message: str, *args) -> None:
        self._emit(LogLevel.TRACE, message, args)

    def debug(self, message: str, *args) -> None:
        self._emit(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args) -> None:
        self._emit(LogLevel.INFO, message, args)

    def warn(self, message: str, *args) -> None:
        self._emit(LogLevel.WARN, message, args)

    def error(self, message: str, *args) -> None:
        self._emit(LogLevel.ERROR, message, args)

    def critical(self, message: str, *args) -> None:
        self._emit(LogLevel.CRITICAL, message, args)

    def flush(self) -> None:
        """Force pending output to be written; nothing to do by default."""


class MockLogger(Logger):
    """Captures messages in memory for inspection in tests."""

    def __init__(self, level: LogLevel = LogLevel.DEBUG) -> None:
        self.level = level
        self._lock = threading.Lock()
        self._records: list[tuple[LogLevel, str]] = []

    def log(self, level: LogLevel, message: str) -> None:
        if level < self.level:
            return
        with self._lock:
            self._records.append((level, message))

    def all_logs(self) -> list[str]:
        """All captured messages, in order."""
        with self._lock:
            return [message for _, message in self._records]

    def logs_by_level(self, level: LogLevel) -> list[str]:
        """Captured messages of exactly the given level."""
        with self._lock:
            return [message for lvl, message in self._records if lvl == level]


class NullLogger(Logger):
    """Discards every message."""

    def log(self, level: LogLevel, message: str) -> None:
        pass


_LEVEL_TAGS = {
    LogLevel.DEBUG: "[DEBUG]",
    LogLevel.INFO: "[INFO]",
    LogLevel.WARN: "[WARNING]",
    LogLevel.ERROR: "[ERROR]",
    LogLevel.CRITICAL: "[CRITICAL]",
}


class FileLogger(Logger):
    """Appends timestamped lines to a text file, filtering by level."""

    def __init__(
        self,
        path: str | Path = "logs/app.log",
        level: LogLevel = LogLevel.INFO,
    ) -> None:
        self.level = level
        self._lock = threading.Lock()
        self._file: IO[str] | None = None
        self.open_file(path)

    def open_file(self, path: str | Path) -> None:
        """Switch output to another file, opened for appending."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None
            self._file = open(path, "a", encoding="utf-8")

    def log(self, level: LogLevel, message: str) -> None:
        if level < self.level:
            return
        tag = _LEVEL_TAGS.get(level, "[UNKNOWN]")
        stamp = time.strftime("[%Y-%m-%d %H:%M:%S]", time.localtime())
        with self._lock:
            if self._file is None:
                raise ValueError("log file is closed")
            self._file.write(f"{stamp} {tag} {message}\n")
            self._file.flush()

    def flush(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.flush()

    def close(self) -> None:
        """Close the log file; further logging raises ValueError."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> FileLogger:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()