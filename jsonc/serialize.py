"""Helpers for producing JSON text: string escaping, indentation and number formatting."""

import enum
import math
import threading
from typing import Optional

STANDARD_DOUBLE_FORMAT = "%.17g"

# Longest text a double may serialize to; longer custom output is truncated.
_MAX_DOUBLE_TEXT = 127

_HEX_CHARS = "0123456789abcdef"

_SIMPLE_ESCAPES = {
    "\b": "\\b",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\f": "\\f",
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
}


class ToStringFlags(enum.IntFlag):
    """Options that control how values are written out."""

    PLAIN = 0
    SPACED = 1 << 0
    PRETTY = 1 << 1
    NOZERO = 1 << 2
    PRETTY_TAB = 1 << 3
    NOSLASHESCAPE = 1 << 4


class OptionScope(enum.IntEnum):
    """Whether an option applies to every thread or only the calling one."""

    GLOBAL = 0
    THREAD = 1


_global_double_format: Optional[str] = None
_thread_state = threading.local()


def escape_string(text: str, flags: int = 0) -> str:
    """Return text with JSON escapes applied, without surrounding quotes."""
    parts = []
    for char in text:
        if char == "/" and flags & ToStringFlags.NOSLASHESCAPE:
            parts.append(char)
        elif char in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[char])
        elif ord(char) < 0x20:
            code = ord(char)
            parts.append("\\u00" + _HEX_CHARS[code >> 4] + _HEX_CHARS[code & 0xF])
        else:
            parts.append(char)
    return "".join(parts)


def indent(level: int, flags: int) -> str:
    """Return the indentation for a nesting level; empty unless pretty printing."""
    if not flags & ToStringFlags.PRETTY:
        return ""
    if flags & ToStringFlags.PRETTY_TAB:
        return "\t" * level
    return " " * (level * 2)


def set_double_format(double_format: Optional[str], scope: int = OptionScope.GLOBAL) -> None:
    """Set the printf-style format used for doubles, or None to restore the default.

    Setting the global format also clears the calling thread's own format.
    """
    global _global_double_format
    try:
        scope = OptionScope(scope)
    except ValueError:
        raise ValueError(f"invalid global_or_thread value: {scope}") from None
    if scope is OptionScope.GLOBAL:
        _thread_state.double_format = None
        _global_double_format = double_format
    else:
        _thread_state.double_format = double_format


def current_double_format() -> str:
    """Return the double format in effect for the calling thread."""
    thread_format = getattr(_thread_state, "double_format", None)
    if thread_format is not None:
        return thread_format
    if _global_double_format is not None:
        return _global_double_format
    return STANDARD_DOUBLE_FORMAT


def _looks_numeric(text: str) -> bool:
    if text[:1].isdigit() and text[:1].isascii():
        return True
    return len(text) > 1 and text[0] == "-" and text[1].isascii() and text[1].isdigit()


def _drop_trailing_zeros(text: str, point: int) -> str:
    last = point + 1
    for position in range(point + 1, len(text)):
        if text[position] != "0":
            last = position
    if last < len(text):
        return text[: last + 1]
    return text


def format_double(value: float, flags: int = 0, double_format: Optional[str] = None) -> str:
    """Return the JSON text for a double.

    NaN and infinities are written as NaN, Infinity and -Infinity. A value
    printed without a decimal point or exponent gets ".0" appended unless
    the format contains ".0f".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    fmt = double_format if double_format is not None else current_double_format()
    try:
        text = fmt % value
    except (TypeError, ValueError) as exc:
        raise ValueError(f"cannot format double with {fmt!r}") from exc

    point = text.find(",")
    if point >= 0:
        text = text[:point] + "." + text[point + 1:]
    else:
        point = text.find(".")

    drops_decimals = ".0f" not in fmt
    if (
        len(text) < _MAX_DOUBLE_TEXT - 1
        and _looks_numeric(text)
        and point < 0
        and "e" not in text
        and drops_decimals
    ):
        text += ".0"

    if point >= 0 and flags & ToStringFlags.NOZERO:
        text = _drop_trailing_zeros(text, point)

    return text[:_MAX_DOUBLE_TEXT]