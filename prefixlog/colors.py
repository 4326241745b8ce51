# prefixlog/colors.py
"""ANSI color helpers on top of colorama."""

from __future__ import annotations

import os
from enum import Enum
from typing import TextIO

from colorama import Fore, just_fix_windows_console


class Color(str, Enum):
    """Foreground colors used by the logger."""

    YELLOW = Fore.YELLOW
    RED = Fore.RED
    GRAY = Fore.LIGHTBLACK_EX
    CYAN = Fore.CYAN
    WHITE = Fore.WHITE


RESET = Fore.RESET

_WINDOWS_FIXED = False


def enable_windows_ansi() -> None:
    """Make Windows consoles understand ANSI sequences (no-op elsewhere)."""
    global _WINDOWS_FIXED
    if _WINDOWS_FIXED:
        return
    just_fix_windows_console()
    _WINDOWS_FIXED = True


def colorize(text: str, color: Color | None, enabled: bool = True) -> str:
    if not enabled or color is None or not text:
        return text
    return f"{color.value}{text}{RESET}"


def supports_color(stream: TextIO | None) -> bool:
    """Guess whether ``stream`` renders ANSI colors.

    ``FORCE_COLOR`` (anything but ``0``) wins over ``NO_COLOR``, which wins
    over terminal detection.
    """
    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    if os.environ.get("NO_COLOR"):
        return False
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, OSError):
        # closed or stream-like objects without a terminal behind them
        return False


__all__ = ["Color", "RESET", "colorize", "enable_windows_ansi", "supports_color"]
