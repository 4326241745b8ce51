# prefixlog/sinks.py
"""Private Loguru logger with one callable sink writing to stdout/stderr.

The logger owns its own handler core, so the application's ``loguru.logger``
is never touched: its handlers stay in place, and removing them does not
silence prefixlog.
"""

from __future__ import annotations

import sys
import threading
from typing import Literal, Optional

from loguru._logger import Core
from loguru._logger import Logger as LoguruLogger

from prefixlog.colors import enable_windows_ansi

StreamName = Literal["stdout", "stderr"]

_LOCK = threading.Lock()
_LOGGER: Optional[LoguruLogger] = None


def _console_sink(msg) -> None:
    r = msg.record
    # one log == one write; streams are looked up per call so redirection works
    stream = sys.stderr if r["extra"].get("stream") == "stderr" else sys.stdout
    stream.write(r["message"] + "\n")


def _new_logger() -> LoguruLogger:
    # same arguments loguru uses to build its global logger, with a fresh core
    return LoguruLogger(
        core=Core(),
        exception=None,
        depth=0,
        record=False,
        lazy=False,
        colors=False,
        raw=False,
        capture=True,
        patchers=[],
        extra={},
    )


def configure() -> LoguruLogger:
    """Build the prefixlog logger and its sink (idempotent)."""
    global _LOGGER
    with _LOCK:
        if _LOGGER is not None:
            return _LOGGER
        enable_windows_ansi()
        logger = _new_logger()
        logger.add(
            _console_sink,
            level="DEBUG",
            format="{message}",
            colorize=False,
            catch=False,
        )
        _LOGGER = logger
        return _LOGGER


def emit(text: str, *, stream: StreamName, level: str) -> None:
    """Write ``text`` as one line to ``stream`` via loguru level ``level``."""
    logger = _LOGGER if _LOGGER is not None else configure()
    logger.bind(stream=stream).log(level, text)


__all__ = ["StreamName", "configure", "emit"]
