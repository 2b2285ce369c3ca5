"""Log severity levels and their textual forms."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["LogLevel", "to_string", "parse_log_level"]


class LogLevel(IntEnum):
    """Severity of a log message, ordered from most to least verbose."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5
    OFF = 6

    def __str__(self) -> str:
        return to_string(self)


_NAMES = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRITICAL",
    LogLevel.OFF: "OFF",
}

_ALIASES = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "warning": LogLevel.WARN,
    "err": LogLevel.ERROR,
    "error": LogLevel.ERROR,
    "critical": LogLevel.CRITICAL,
    "crit": LogLevel.CRITICAL,
    "off": LogLevel.OFF,
    "none": LogLevel.OFF,
}


def to_string(level: LogLevel) -> str:
    """Return the upper-case name of a level, "INFO" for anything unknown."""
    return _NAMES.get(level, "INFO")


def parse_log_level(text: str, warnings: list[str] | None = None) -> LogLevel | None:
    """Parse a level name case-insensitively.

    Returns None for an unknown name and, if a warnings list is given,
    appends a message describing the problem.
    """
    lowered = text.lower()
    level = _ALIASES.get(lowered)
    if level is None and warnings is not None:
        warnings.append(f"logging.level: unknown value '{lowered}'")
    return level