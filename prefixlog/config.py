# prefixlog/config.py
"""Centralized configuration for the prefixlog console logger.

Defaults live here as constants; ``get_settings`` applies environment
overrides on top of them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

# ============================================================================
# DEFAULTS
# ============================================================================

DEBUG_ENABLED_DEFAULT: Final[bool] = False
TIMESTAMP_ENABLED_DEFAULT: Final[bool] = True
FORCE_COLOR_DEFAULT: Final[bool] = False
# Locale date and time, e.g. "10/18/26, 14:03:12"
TIMESTAMP_FORMAT_DEFAULT: Final[str] = "%x, %X"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def _env_str(key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(key)
    return value if value is not None else default


def _env_bool(key: str, default: bool) -> bool:
    """Resolve boolean from environment variable with fallback."""
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{key} must be a boolean flag, got {value!r}")


# ============================================================================
# SETTINGS
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Initial state for a logger registry.

    Instances are immutable; the registry copies these values into its own
    mutable flags on construction and on reset.
    """

    debug_enabled: bool = DEBUG_ENABLED_DEFAULT
    timestamp_enabled: bool = TIMESTAMP_ENABLED_DEFAULT
    force_color: bool = FORCE_COLOR_DEFAULT
    timestamp_format: str = TIMESTAMP_FORMAT_DEFAULT


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        PREFIXLOG_DEBUG: Emit debug-level messages
        PREFIXLOG_TIMESTAMP: Prepend a timestamp to every message
        PREFIXLOG_FORCE_COLOR: Colorize even when the stream is not a terminal
        PREFIXLOG_TIMESTAMP_FORMAT: strftime format of the timestamp
    """
    return Settings(
        debug_enabled=_env_bool("PREFIXLOG_DEBUG", DEBUG_ENABLED_DEFAULT),
        timestamp_enabled=_env_bool("PREFIXLOG_TIMESTAMP", TIMESTAMP_ENABLED_DEFAULT),
        force_color=_env_bool("PREFIXLOG_FORCE_COLOR", FORCE_COLOR_DEFAULT),
        timestamp_format=_env_str("PREFIXLOG_TIMESTAMP_FORMAT", TIMESTAMP_FORMAT_DEFAULT),
    )


__all__ = [
    "get_settings",
    "Settings",
    "DEBUG_ENABLED_DEFAULT",
    "TIMESTAMP_ENABLED_DEFAULT",
    "FORCE_COLOR_DEFAULT",
    "TIMESTAMP_FORMAT_DEFAULT",
]
