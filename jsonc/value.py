"""Scalar JSON values: booleans, integers, doubles and strings.

JSON null is represented by ``None``. Every value carries a reference
count, optional user data with a release callback, and a serializer that
can be replaced per value.
"""

from __future__ import annotations

import enum
import math
import operator
import re
from collections.abc import Callable
from typing import Any, Optional

from .serialize import ToStringFlags, escape_string, format_double

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

Serializer = Callable[["JsonValue", int, int], str]
UserDelete = Callable[["JsonValue", Any], None]


class JsonType(enum.IntEnum):
    """The kinds of JSON value."""

    NULL = 0
    BOOLEAN = 1
    DOUBLE = 2
    INT = 3
    OBJECT = 4
    ARRAY = 5
    STRING = 6


class JsonValue:
    """Base of every JSON value: reference count, user data and serializer."""

    json_type: JsonType = JsonType.NULL

    def __init__(self) -> None:
        self._ref_count = 1
        self._userdata: Any = None
        self._user_delete: Optional[UserDelete] = None
        self._serializer: Optional[Serializer] = None

    @property
    def ref_count(self) -> int:
        """Current number of owners."""
        return self._ref_count

    @property
    def userdata(self) -> Any:
        """User data set by set_userdata() or set_serializer()."""
        return self._userdata

    @property
    def user_delete(self) -> Optional[UserDelete]:
        """Callback that releases the user data, if any."""
        return self._user_delete

    @property
    def serializer(self) -> Optional[Serializer]:
        """Custom serializer, or None when the type's default is used."""
        return self._serializer

    @serializer.setter
    def serializer(self, func: Optional[Serializer]) -> None:
        self._serializer = func

    @property
    def serializes_userdata_text(self) -> bool:
        """Whether the serializer writes the user data out verbatim."""
        return self._serializer in (userdata_serializer, _double_text_serializer)

    def retain(self) -> "JsonValue":
        """Take another reference to this value and return it."""
        self._ref_count += 1
        return self

    def release(self) -> bool:
        """Drop a reference; return True when this freed the value."""
        if self._ref_count <= 0:
            raise RuntimeError("value released more times than retained")
        self._ref_count -= 1
        if self._ref_count > 0:
            return False
        if self._user_delete is not None:
            self._user_delete(self, self._userdata)
        self._dispose()
        return True

    def _dispose(self) -> None:
        """Release anything the value owns once its last reference is gone."""

    def set_userdata(self, userdata: Any, user_delete: Optional[UserDelete] = None) -> None:
        """Attach user data, releasing any previous user data first."""
        if self._user_delete is not None:
            self._user_delete(self, self._userdata)
        self._userdata = userdata
        self._user_delete = user_delete

    def set_serializer(self, func: Optional[Serializer], userdata: Any = None,
                       user_delete: Optional[UserDelete] = None) -> None:
        """Set a custom serializer, or None to restore the default."""
        self.set_userdata(userdata, user_delete)
        self._serializer = func

    def _serialize_default(self, level: int, flags: int) -> str:
        raise NotImplementedError

    def serialize(self, level: int = 0, flags: int = 0) -> str:
        """Return the JSON text for this value at the given nesting level."""
        if self._serializer is not None:
            return self._serializer(self, level, flags)
        return self._serialize_default(level, flags)

    def to_json_string(self, flags: int = ToStringFlags.SPACED) -> str:
        """Return the JSON text for this value."""
        return self.serialize(0, flags)


class JsonBoolean(JsonValue):
    """A JSON true or false."""

    json_type = JsonType.BOOLEAN

    def __init__(self, value: bool = False) -> None:
        super().__init__()
        self.value = bool(value)

    def set(self, value: bool) -> None:
        """Replace the value."""
        self.value = bool(value)

    def _serialize_default(self, level: int, flags: int) -> str:
        return "true" if self.value else "false"


def _check_int64(value: int) -> int:
    value = operator.index(value)
    if not INT64_MIN <= value <= INT64_MAX:
        raise OverflowError(f"{value} does not fit in a signed 64-bit integer")
    return value


def _check_uint64(value: int) -> int:
    value = operator.index(value)
    if not 0 <= value <= UINT64_MAX:
        raise OverflowError(f"{value} does not fit in an unsigned 64-bit integer")
    return value


class JsonInt(JsonValue):
    """A JSON integer held as a signed or unsigned 64-bit value."""

    json_type = JsonType.INT

    def __init__(self, value: int = 0) -> None:
        super().__init__()
        value = operator.index(value)
        if value > INT64_MAX:
            self.set_uint64(value)
        else:
            self.set_int64(value)

    @property
    def value(self) -> int:
        """The integer value."""
        return self._value

    @property
    def is_unsigned(self) -> bool:
        """Whether the value is held as an unsigned 64-bit integer."""
        return self._unsigned

    def set_int64(self, value: int) -> None:
        """Store a signed 64-bit value."""
        self._value = _check_int64(value)
        self._unsigned = False

    def set_uint64(self, value: int) -> None:
        """Store an unsigned 64-bit value."""
        self._value = _check_uint64(value)
        self._unsigned = True

    def increment(self, delta: int) -> None:
        """Add a signed 64-bit delta, saturating at the 64-bit limits."""
        delta = _check_int64(delta)
        current = self._value
        if not self._unsigned:
            if delta > 0 and current > INT64_MAX - delta:
                self.set_uint64(current + delta)
            elif delta < 0 and current < INT64_MIN - delta:
                self.set_int64(INT64_MIN)
            else:
                self.set_int64(current + delta)
        elif delta > 0 and current > UINT64_MAX - delta:
            self.set_uint64(UINT64_MAX)
        elif delta < 0 and current < -delta:
            self.set_int64(current + delta)
        else:
            self.set_uint64(current + delta)

    def _serialize_default(self, level: int, flags: int) -> str:
        return str(self._value)


def _double_text_serializer(jso: JsonValue, level: int, flags: int) -> str:
    """Write the text given when the double was created."""
    return userdata_serializer(jso, level, flags)


class JsonDouble(JsonValue):
    """A JSON floating point number, optionally with its exact source text."""

    json_type = JsonType.DOUBLE

    def __init__(self, value: float = 0.0, text: Optional[str] = None) -> None:
        super().__init__()
        self.value = float(value)
        if text is not None:
            self.set_serializer(_double_text_serializer, str(text))

    def set(self, value: float) -> None:
        """Replace the value, dropping any source text it was created with."""
        self.value = float(value)
        if self._serializer is _double_text_serializer:
            self.set_serializer(None, None, None)

    def _serialize_default(self, level: int, flags: int) -> str:
        return format_double(self.value, flags)


class JsonString(JsonValue):
    """A JSON string."""

    json_type = JsonType.STRING

    def __init__(self, value: str = "") -> None:
        super().__init__()
        self.value = str(value)

    def set(self, value: str) -> None:
        """Replace the value."""
        self.value = str(value)

    def _serialize_default(self, level: int, flags: int) -> str:
        return '"' + escape_string(self.value, flags) + '"'


def userdata_serializer(jso: JsonValue, level: int = 0, flags: int = 0) -> str:
    """Serializer that writes the value's user data text as-is."""
    return str(jso.userdata)


def double_serializer(jso: JsonValue, level: int = 0, flags: int = 0) -> str:
    """Serializer for doubles that uses the user data as the printf format."""
    return format_double(jso.value, flags, jso.userdata)


def get_type(jso: Optional[JsonValue]) -> JsonType:
    """Return the type of a value; None is NULL."""
    if jso is None:
        return JsonType.NULL
    return jso.json_type


def is_type(jso: Optional[JsonValue], json_type: JsonType) -> bool:
    """Return whether a value has the given type."""
    return get_type(jso) == json_type


def to_json_string(jso: Optional[JsonValue], flags: int = ToStringFlags.SPACED) -> str:
    """Return the JSON text for a value; None gives null."""
    if jso is None:
        return "null"
    return jso.to_json_string(flags)


_INT_PREFIX = re.compile(r"\s*([+-]?)(\d+)")


def _parse_int64(text: str) -> Optional[int]:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1) + match.group(2))
    return min(max(value, INT64_MIN), INT64_MAX)


def _parse_uint64(text: str) -> Optional[int]:
    match = _INT_PREFIX.match(text)
    if match is None or match.group(1) == "-":
        return None
    return min(int(match.group(2)), UINT64_MAX)


_DECIMAL_FLOAT = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_HEX_FLOAT = re.compile(
    r"\s*[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?",
    re.IGNORECASE,
)


def _parse_double(text: str) -> float:
    if _HEX_FLOAT.fullmatch(text):
        try:
            return float.fromhex(text.strip())
        except OverflowError:
            return 0.0
    if not _DECIMAL_FLOAT.fullmatch(text):
        return 0.0
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        # Out of range for a double.
        return 0.0
    return value


def get_boolean(jso: Optional[JsonValue]) -> bool:
    """Coerce a value to a boolean; containers and null are False."""
    kind = get_type(jso)
    if kind in (JsonType.BOOLEAN, JsonType.INT, JsonType.DOUBLE):
        return jso.value != 0
    if kind is JsonType.STRING:
        return len(jso.value) != 0
    return False


def get_int(jso: Optional[JsonValue]) -> int:
    """Coerce a value to a 32-bit integer, saturating out-of-range values."""
    kind = get_type(jso)
    if kind is JsonType.INT:
        number = min(jso.value, INT64_MAX)
    elif kind is JsonType.STRING:
        parsed = _parse_int64(jso.value)
        if parsed is None:
            return 0
        number = parsed
    elif kind is JsonType.DOUBLE:
        number = jso.value
        if math.isnan(number):
            return 0
    elif kind is JsonType.BOOLEAN:
        return int(jso.value)
    else:
        return 0
    if number <= INT32_MIN:
        return INT32_MIN
    if number >= INT32_MAX:
        return INT32_MAX
    return int(number)


def get_int64(jso: Optional[JsonValue]) -> int:
    """Coerce a value to a signed 64-bit integer, saturating out-of-range values."""
    kind = get_type(jso)
    if kind is JsonType.INT:
        return min(jso.value, INT64_MAX)
    if kind is JsonType.DOUBLE:
        number = jso.value
        if math.isnan(number):
            return 0
        if number >= float(INT64_MAX):
            return INT64_MAX
        if number <= INT64_MIN:
            return INT64_MIN
        return int(number)
    if kind is JsonType.BOOLEAN:
        return int(jso.value)
    if kind is JsonType.STRING:
        parsed = _parse_int64(jso.value)
        return 0 if parsed is None else parsed
    return 0


def get_uint64(jso: Optional[JsonValue]) -> int:
    """Coerce a value to an unsigned 64-bit integer; negatives become 0."""
    kind = get_type(jso)
    if kind is JsonType.INT:
        return max(jso.value, 0)
    if kind is JsonType.DOUBLE:
        number = jso.value
        if math.isnan(number):
            return 0
        if number >= float(UINT64_MAX):
            return UINT64_MAX
        if number < 0:
            return 0
        return int(number)
    if kind is JsonType.BOOLEAN:
        return int(jso.value)
    if kind is JsonType.STRING:
        parsed = _parse_uint64(jso.value)
        return 0 if parsed is None else parsed
    return 0


def get_double(jso: Optional[JsonValue]) -> float:
    """Coerce a value to a float; strings must hold a whole number literal."""
    kind = get_type(jso)
    if kind in (JsonType.DOUBLE, JsonType.INT, JsonType.BOOLEAN):
        return float(jso.value)
    if kind is JsonType.STRING:
        return _parse_double(jso.value)
    return 0.0


def get_string(jso: Optional[JsonValue]) -> Optional[str]:
    """Return a string's contents, the JSON text of other values, or None for null."""
    if jso is None:
        return None
    if jso.json_type is JsonType.STRING:
        return jso.value
    return jso.to_json_string(ToStringFlags.SPACED)


def get_string_len(jso: Optional[JsonValue]) -> int:
    """Return the length of a string value, or 0 for anything else."""
    if get_type(jso) is JsonType.STRING:
        return len(jso.value)
    return 0