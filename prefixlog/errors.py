# prefixlog/errors.py
"""Normalize arbitrary caught values into readable strings.

Every helper accepts any object and never raises. Exceptions and objects
exposing string ``name``/``message`` attributes are treated as errors;
everything else falls back to its string conversion.
"""

from __future__ import annotations

import traceback
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ErrorLike(Protocol):
    """Anything that describes itself the way an error does."""

    name: str
    """Error kind, e.g. ``TypeError``"""
    message: str
    """Human readable description"""


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        pass
    try:
        return repr(value)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(value).__name__} object>"


def _safe_attr(value: Any, name: str) -> Any:
    # properties and __getattr__ hooks may raise anything
    try:
        return getattr(value, name, None)
    except Exception:  # noqa: BLE001
        return None


def _describe(value: Any) -> tuple[str, str, str | None] | None:
    """Return ``(name, message, stack)`` for error-like values, else None."""
    if isinstance(value, BaseException):
        name = type(value).__name__
        message = _safe_str(value)
        stack = None
        if value.__traceback__ is not None:
            try:
                stack = "".join(
                    traceback.format_exception(type(value), value, value.__traceback__)
                ).rstrip("\n")
            except Exception:  # noqa: BLE001
                stack = None
        return name, message, stack

    name = _safe_attr(value, "name")
    message = _safe_attr(value, "message")
    if isinstance(name, str) and isinstance(message, str):
        stack = _safe_attr(value, "stack")
        return name, message, stack if isinstance(stack, str) else None
    return None


def get_error(error: object) -> str:
    """String form of ``error``; errors render as ``"Name: message"``."""
    described = _describe(error)
    if described is None:
        return _safe_str(error)
    name, message, _ = described
    return f"{name}: {message}" if message else name


def get_error_name(error: object) -> str:
    described = _describe(error)
    return described[0] if described is not None else _safe_str(error)


def get_error_message(error: object) -> str:
    described = _describe(error)
    return described[1] if described is not None else _safe_str(error)


def get_error_stack(error: object) -> str:
    """Stack trace if the error carries a non-empty one, otherwise its message."""
    described = _describe(error)
    if described is None:
        return _safe_str(error)
    _, message, stack = described
    return stack or message


# camelCase aliases
getError = get_error
getErrorName = get_error_name
getErrorMessage = get_error_message
getErrorStack = get_error_stack


__all__ = [
    "ErrorLike",
    "get_error",
    "get_error_name",
    "get_error_message",
    "get_error_stack",
    "getError",
    "getErrorName",
    "getErrorMessage",
    "getErrorStack",
]
