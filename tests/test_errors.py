# tests/test_errors.py
"""Tests for the error-normalizing helpers."""

from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from prefixlog.errors import (
    ErrorLike,
    getErrorStack,
    get_error,
    get_error_message,
    get_error_name,
    get_error_stack,
)


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no str")


class _Hopeless:
    def __str__(self) -> str:
        raise RuntimeError("no str")

    def __repr__(self) -> str:
        raise RuntimeError("no repr")


class _ExplodingAttrs:
    def __getattr__(self, name: str):
        raise RuntimeError(f"no {name}")

    def __str__(self) -> str:
        return "exploding"


@dataclass
class _ApiError:
    name: str
    message: str
    stack: str = ""


@pytest.mark.parametrize("value", [42, "plain", None, 3.5, ["a", 1], {"k": "v"}])
def test_non_errors_fall_back_to_str(value: object) -> None:
    """Non-error values stringify identically through every helper."""
    expected = str(value)
    assert get_error(value) == expected
    assert get_error_name(value) == expected
    assert get_error_message(value) == expected
    assert get_error_stack(value) == expected


def test_error_like_without_stack_uses_message() -> None:
    """Stack falls back to the message when absent."""
    err = SimpleNamespace(name="TypeError", message="bad")

    assert isinstance(err, ErrorLike)
    assert get_error_name(err) == "TypeError"
    assert get_error_message(err) == "bad"
    assert get_error_stack(err) == "bad"
    assert get_error(err) == "TypeError: bad"


def test_error_like_with_stack() -> None:
    err = _ApiError(name="ApiError", message="quota", stack="ApiError: quota\n  at call()")

    assert get_error_stack(err) == "ApiError: quota\n  at call()"


def test_error_like_with_empty_stack_uses_message() -> None:
    err = _ApiError(name="ApiError", message="quota", stack="")

    assert get_error_stack(err) == "quota"


def test_error_like_requires_string_fields() -> None:
    """Objects with non-string name/message are not treated as errors."""
    value = SimpleNamespace(name=1, message=None)

    assert get_error_name(value) == str(value)
    assert get_error_message(value) == str(value)


def test_exception_without_traceback() -> None:
    exc = ValueError("boom")

    assert get_error_name(exc) == "ValueError"
    assert get_error_message(exc) == "boom"
    assert get_error_stack(exc) == "boom"
    assert get_error(exc) == "ValueError: boom"


def test_exception_with_empty_message() -> None:
    exc = KeyboardInterrupt()

    assert get_error(exc) == "KeyboardInterrupt"
    assert get_error_message(exc) == ""


def test_raised_exception_carries_traceback() -> None:
    try:
        raise KeyError("missing")
    except KeyError as exc:
        stack = get_error_stack(exc)

    assert stack.startswith("Traceback (most recent call last):")
    assert stack.endswith("KeyError: 'missing'")
    assert "test_raised_exception_carries_traceback" in stack


def test_unprintable_values_never_raise() -> None:
    assert get_error(_Unprintable()).startswith("<")
    assert get_error_name(_Hopeless()) == "<unprintable _Hopeless object>"


def test_attribute_errors_are_contained() -> None:
    """Attribute lookups that raise are treated as missing attributes."""
    assert get_error_message(_ExplodingAttrs()) == "exploding"


def test_camel_case_alias() -> None:
    assert getErrorStack is get_error_stack
