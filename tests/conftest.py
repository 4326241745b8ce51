# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import re
from typing import Callable, Iterator

import pytest

from prefixlog.config import Settings
from prefixlog.logger import DEFAULT_REGISTRY
from prefixlog.registry import LoggerRegistry

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture(autouse=True)
def clean_registry(monkeypatch: pytest.MonkeyPatch) -> Iterator[LoggerRegistry]:
    """Fresh default registry with built-in defaults and no color hints from env."""
    for key in ("FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(key, raising=False)
    DEFAULT_REGISTRY.reset(Settings())
    yield DEFAULT_REGISTRY
    DEFAULT_REGISTRY.reset(Settings())


@pytest.fixture
def no_timestamps(clean_registry: LoggerRegistry) -> LoggerRegistry:
    """Default registry with timestamps turned off."""
    clean_registry.set_timestamp_enabled(False)
    return clean_registry


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove ANSI color sequences from captured output."""

    def _strip(text: str) -> str:
        return _ANSI.sub("", text)

    return _strip
