"""Severity levels and level filtering.

Lower numeric value means higher severity, so a threshold admits every level
whose value is less than or equal to it.
"""

import logging
from enum import IntEnum


class Level(IntEnum):
    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6


ALL_LEVELS = sorted(Level)

_ALIASES = {"WARN": Level.WARNING, "CRITICAL": Level.FATAL}


def parse_level(value) -> Level:
    """Accept a Level, an int, or a case-insensitive level name."""
    if isinstance(value, Level):
        return value
    if isinstance(value, int):
        return Level(value)
    normalized = str(value).strip().upper()
    if normalized in _ALIASES:
        return _ALIASES[normalized]
    try:
        return Level[normalized]
    except KeyError:
        raise ValueError(f"Unknown log level: {value!r}") from None


def from_logging_level(levelno: int) -> Level:
    """Map a stdlib ``logging`` level number onto a Level."""
    if levelno >= logging.CRITICAL:
        return Level.FATAL
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARNING
    if levelno >= logging.INFO:
        return Level.INFO
    if levelno >= logging.DEBUG:
        return Level.DEBUG
    return Level.TRACE


def applicable_levels(threshold: Level) -> list[Level]:
    """Return every level at or above *threshold*, most severe first."""
    return [level for level in ALL_LEVELS if level <= threshold]
