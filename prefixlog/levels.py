# prefixlog/levels.py
"""Log levels and their routing."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from prefixlog.colors import Color
from prefixlog.sinks import StreamName


class LogLevel(str, Enum):
    """Importance of a logged message.

    Every level maps to an output stream and a color. Debug messages are
    only emitted when explicitly enabled.
    """

    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    DEBUG = "debug"

    @classmethod
    def parse(cls, value: LogLevel | str) -> LogLevel:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(level.value for level in cls)
            raise ValueError(f"unknown log level {value!r} (expected one of: {choices})") from None

    @property
    def stream(self) -> StreamName:
        return "stderr" if self in (LogLevel.WARN, LogLevel.ERROR) else "stdout"

    @property
    def color(self) -> Optional[Color]:
        return _COLORS.get(self)

    @property
    def loguru_name(self) -> str:
        return _LOGURU_NAMES[self]


_COLORS: dict[LogLevel, Color] = {
    LogLevel.WARN: Color.YELLOW,
    LogLevel.ERROR: Color.RED,
    LogLevel.DEBUG: Color.GRAY,
}

_LOGURU_NAMES: dict[LogLevel, str] = {
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARNING",
    LogLevel.ERROR: "ERROR",
    LogLevel.DEBUG: "DEBUG",
}


__all__ = ["LogLevel"]
