# prefixlog/logger.py
"""Leveled console logger with prefixes, timestamps and colors.

Usage::

    log = Logger.with_prefix("svc")
    log.info("listening on %s:%d", host, port)
    log.warn("retrying")

Warnings and errors go to stderr, info and debug to stdout. Debug output is
off until ``Logger.set_debug_enabled()`` is called.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from datetime import datetime
from typing import Any, ClassVar, Iterator, Optional, Protocol

from prefixlog.colors import Color, colorize, supports_color
from prefixlog.formatting import format_message
from prefixlog.levels import LogLevel
from prefixlog.registry import LoggerRegistry
from prefixlog.sinks import emit


class Logging(Protocol):
    """A logging device bound to one prefix."""

    @property
    def prefix(self) -> Optional[str]: ...

    def info(self, message: Any, *parameters: Any) -> None: ...

    def warn(self, message: Any, *parameters: Any) -> None: ...

    def warning(self, message: Any, *parameters: Any) -> None: ...

    def error(self, message: Any, *parameters: Any) -> None: ...

    def debug(self, message: Any, *parameters: Any) -> None: ...

    def log(self, level: LogLevel | str, message: Any, *parameters: Any) -> None: ...


DEFAULT_REGISTRY = LoggerRegistry()


class Logger:
    """Console logger; one instance per prefix via ``with_prefix``."""

    internal: ClassVar[Logger]

    def __init__(
        self,
        prefix: Optional[str] = None,
        *,
        registry: Optional[LoggerRegistry] = None,
    ) -> None:
        self._prefix = prefix
        self._registry = registry if registry is not None else DEFAULT_REGISTRY

    def __repr__(self) -> str:
        return f"Logger(prefix={self._prefix!r})"

    @property
    def prefix(self) -> Optional[str]:
        return self._prefix

    @property
    def registry(self) -> LoggerRegistry:
        return self._registry

    # ────────────── construction ──────────────
    @classmethod
    def with_prefix(
        cls, prefix: str, *, registry: Optional[LoggerRegistry] = None
    ) -> Logging:
        """Return the logger for ``prefix``; the same object on every call."""
        owner = registry if registry is not None else DEFAULT_REGISTRY
        return owner.get_or_create(prefix, lambda: cls(prefix, registry=owner))

    withPrefix = with_prefix

    # ────────────── global switches ──────────────
    @staticmethod
    def set_debug_enabled(enabled: bool = True) -> None:
        """Turn debug level logging on or off. Off by default."""
        DEFAULT_REGISTRY.set_debug_enabled(enabled)

    @staticmethod
    def set_timestamp_enabled(enabled: bool = True) -> None:
        """Turn timestamps in log messages on or off. On by default."""
        DEFAULT_REGISTRY.set_timestamp_enabled(enabled)

    @staticmethod
    def force_color() -> None:
        """Colorize output even if the stream does not look like a terminal."""
        DEFAULT_REGISTRY.force_color()

    @staticmethod
    def reset() -> None:
        DEFAULT_REGISTRY.reset()

    @staticmethod
    @contextmanager
    def override(
        *,
        debug_enabled: Optional[bool] = None,
        timestamp_enabled: Optional[bool] = None,
        force_color: Optional[bool] = None,
    ) -> Iterator[LoggerRegistry]:
        with DEFAULT_REGISTRY.override(
            debug_enabled=debug_enabled,
            timestamp_enabled=timestamp_enabled,
            force_color=force_color,
        ) as registry:
            yield registry

    setDebugEnabled = set_debug_enabled
    setTimestampEnabled = set_timestamp_enabled
    forceColor = force_color

    # ────────────── levels ──────────────
    def info(self, message: Any, *parameters: Any) -> None:
        self.log(LogLevel.INFO, message, *parameters)

    def warn(self, message: Any, *parameters: Any) -> None:
        self.log(LogLevel.WARN, message, *parameters)

    # loguru/stdlib spelling
    warning = warn

    def error(self, message: Any, *parameters: Any) -> None:
        self.log(LogLevel.ERROR, message, *parameters)

    def debug(self, message: Any, *parameters: Any) -> None:
        # disabled debug calls never format their arguments
        if self._registry.debug_enabled:
            self.log(LogLevel.DEBUG, message, *parameters)

    def log(self, level: LogLevel | str, message: Any, *parameters: Any) -> None:
        level = LogLevel.parse(level)
        registry = self._registry

        text = format_message(message, *parameters)
        stream = sys.stderr if level.stream == "stderr" else sys.stdout
        use_color = registry.color_forced or supports_color(stream)

        # innermost to outermost: level color, prefix, timestamp
        text = colorize(text, level.color, use_color)
        if self._prefix:
            text = colorize(f"[{self._prefix}] ", Color.CYAN, use_color) + text
        if registry.timestamp_enabled:
            stamp = datetime.now().strftime(registry.timestamp_format)
            text = colorize(f"[{stamp}] ", Color.WHITE, use_color) + text

        emit(text, stream=level.stream, level=level.loguru_name)


Logger.internal = Logger()


__all__ = ["DEFAULT_REGISTRY", "Logger", "Logging"]
