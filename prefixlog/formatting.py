# prefixlog/formatting.py
"""printf-style message interpolation.

Supported conversions::

    %s  str(value)
    %d  number (integers print without a fractional part)
    %i  integer, truncated
    %f  floating point
    %j  JSON
    %o  repr(value)
    %O  repr(value)
    %c  consumes a value, prints nothing
    %%  a literal percent sign

Values left over after all conversions are appended, separated by spaces.
Conversions without a matching value are kept verbatim.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Callable

_CONVERSION = re.compile(r"%(.)", re.DOTALL)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))")

NAN_TEXT = "NaN"


def _number_text(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _as_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return None
    return None


def _format_number(value: Any) -> str:
    number = _as_number(value)
    return NAN_TEXT if number is None else _number_text(number)


def _format_int(value: Any) -> str:
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return str(int(match.group(1))) if match else NAN_TEXT
    number = _as_number(value)
    if number is None:
        return NAN_TEXT
    if isinstance(number, float) and not math.isfinite(number):
        return NAN_TEXT
    return str(int(number))


def _format_float(value: Any) -> str:
    if isinstance(value, str):
        match = _LEADING_FLOAT.match(value)
        return _number_text(float(match.group(1))) if match else NAN_TEXT
    number = _as_number(value)
    return NAN_TEXT if number is None else _number_text(float(number))


def _format_json(value: Any) -> str:
    try:
        return json.dumps(value, default=str)
    except ValueError:
        # circular reference
        return "[Circular]"
    except TypeError:
        # keys json cannot encode
        return repr(value)


def _format_string(value: Any) -> str:
    # floats print like %d does: 2.0 -> "2"
    if isinstance(value, float):
        return _number_text(value)
    return str(value)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "s": _format_string,
    "d": _format_number,
    "i": _format_int,
    "f": _format_float,
    "j": _format_json,
    "o": repr,
    "O": repr,
    "c": lambda _value: "",
}


def _format_extra(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def format_message(message: Any, *parameters: Any) -> str:
    """Interpolate ``parameters`` into ``message``.

    Without parameters the message is returned untouched, ``%%`` included.
    A non-string ``message`` is not scanned for conversions; it is joined
    with the parameters instead.
    """
    if not isinstance(message, str):
        return " ".join([str(message), *(_format_extra(value) for value in parameters)])
    if not parameters:
        return message

    remaining = list(parameters)
    remaining.reverse()

    def _substitute(match: re.Match[str]) -> str:
        conversion = match.group(1)
        if conversion == "%":
            return "%"
        converter = _CONVERTERS.get(conversion)
        if converter is None or not remaining:
            return match.group(0)
        return converter(remaining.pop())

    text = _CONVERSION.sub(_substitute, message)
    if remaining:
        extras = " ".join(_format_extra(value) for value in reversed(remaining))
        text = f"{text} {extras}"
    return text


__all__ = ["format_message", "NAN_TEXT"]
