# prefixlog/__init__.py
"""Leveled, prefixed console logging and error-normalizing helpers."""

from __future__ import annotations

from prefixlog.config import Settings, get_settings
from prefixlog.error_tracker import ErrorTracker, error_scope
from prefixlog.errors import (
    ErrorLike,
    getError,
    getErrorMessage,
    getErrorName,
    getErrorStack,
    get_error,
    get_error_message,
    get_error_name,
    get_error_stack,
)
from prefixlog.formatting import format_message
from prefixlog.levels import LogLevel
from prefixlog.logger import DEFAULT_REGISTRY, Logger, Logging
from prefixlog.registry import LoggerRegistry

__all__ = [
    "DEFAULT_REGISTRY",
    "ErrorLike",
    "ErrorTracker",
    "LogLevel",
    "Logger",
    "LoggerRegistry",
    "Logging",
    "Settings",
    "error_scope",
    "format_message",
    "getError",
    "getErrorMessage",
    "getErrorName",
    "getErrorStack",
    "get_error",
    "get_error_message",
    "get_error_name",
    "get_error_stack",
    "get_settings",
]
