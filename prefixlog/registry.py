# prefixlog/registry.py
"""Owner of the prefix cache and the flags shared by every logger."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Callable, Dict, Iterator, Optional

from prefixlog.config import Settings, get_settings

if TYPE_CHECKING:
    from prefixlog.logger import Logging


class LoggerRegistry:
    """Process-wide logger state, held in one explicit object.

    Loggers read the flags at call time, so toggling a flag affects every
    logger created from this registry immediately.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._lock = threading.RLock()
        self._cache: Dict[str, Logging] = {}
        self.debug_enabled = self._settings.debug_enabled
        self.timestamp_enabled = self._settings.timestamp_enabled
        self.color_forced = self._settings.force_color
        self.timestamp_format = self._settings.timestamp_format

    @property
    def settings(self) -> Settings:
        return self._settings

    # ────────────── prefix cache ──────────────
    def get_or_create(self, prefix: str, factory: Callable[[], Logging]) -> Logging:
        """Return the handle cached for ``prefix``, building it on first use."""
        with self._lock:
            logging = self._cache.get(prefix)
            if logging is None:
                logging = factory()
                self._cache[prefix] = logging
            return logging

    def __contains__(self, prefix: object) -> bool:
        with self._lock:
            return prefix in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    # ────────────── flags ──────────────
    def set_debug_enabled(self, enabled: bool = True) -> None:
        with self._lock:
            self.debug_enabled = bool(enabled)

    def set_timestamp_enabled(self, enabled: bool = True) -> None:
        with self._lock:
            self.timestamp_enabled = bool(enabled)

    def force_color(self, enabled: bool = True) -> None:
        with self._lock:
            self.color_forced = bool(enabled)

    def reset(self, settings: Optional[Settings] = None) -> None:
        """Drop every cached logger and restore flags from ``settings``."""
        with self._lock:
            if settings is not None:
                self._settings = settings
            self._cache.clear()
            self.debug_enabled = self._settings.debug_enabled
            self.timestamp_enabled = self._settings.timestamp_enabled
            self.color_forced = self._settings.force_color
            self.timestamp_format = self._settings.timestamp_format

    @contextmanager
    def override(
        self,
        *,
        debug_enabled: Optional[bool] = None,
        timestamp_enabled: Optional[bool] = None,
        force_color: Optional[bool] = None,
    ) -> Iterator[LoggerRegistry]:
        """Temporarily change flags; previous values come back on exit."""
        with self._lock:
            saved = (self.debug_enabled, self.timestamp_enabled, self.color_forced)
            if debug_enabled is not None:
                self.debug_enabled = debug_enabled
            if timestamp_enabled is not None:
                self.timestamp_enabled = timestamp_enabled
            if force_color is not None:
                self.color_forced = force_color
        try:
            yield self
        finally:
            with self._lock:
                self.debug_enabled, self.timestamp_enabled, self.color_forced = saved


__all__ = ["LoggerRegistry"]
