"""Process-wide logging hook with severity filtering and simple stdout loggers."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Callable, Optional

# Longest message handed to a logger; longer text is cut short.
MAX_MESSAGE_LENGTH = 4095


class LogLevel(IntEnum):
    """Message severity; a smaller value is more severe."""

    FATAL = 0
    CRITICAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6


Logger = Callable[[LogLevel, str], None]

_level: LogLevel = LogLevel.INFO
_logger: Optional[Logger] = None
_print_lock = threading.Lock()


def log_level_to_string(level: int) -> str | None:
    """The display name of a level, or None if the value is not a level."""
    try:
        member = LogLevel(level)
    except ValueError:
        return None
    return f"LD_LOG_{member.name}"


def basic_logger(level: LogLevel, text: str) -> None:
    """Print a message to standard output with its level in brackets."""
    print(f"[{log_level_to_string(level)}] {text}")


def thread_safe_basic_logger(level: LogLevel, text: str) -> None:
    """Like basic_logger, but whole lines never interleave between threads."""
    with _print_lock:
        print(f"[{log_level_to_string(level)}] {text}")


def configure_global_logger(level: LogLevel, logger: Optional[Logger]) -> None:
    """Install ``logger`` for messages at ``level`` or more severe; None silences."""
    global _level, _logger
    _logger = logger
    _level = LogLevel(level)


def log(level: LogLevel, message: str, *args: object) -> None:
    """Format ``message`` printf-style with ``args`` and pass it to the logger."""
    logger = _logger
    if message is None or logger is None or level > _level:
        return
    text = message % args if args else message
    logger(LogLevel(level), text[:MAX_MESSAGE_LENGTH])