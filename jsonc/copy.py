"""Structural equality and deep copying of JSON values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from .containers import JsonArray, JsonObject
from .value import (
    JsonBoolean,
    JsonDouble,
    JsonInt,
    JsonString,
    JsonType,
    JsonValue,
    get_type,
)

ShallowCopy = Callable[
    [JsonValue, Optional[JsonValue], Optional[str], Optional[int]], Optional[JsonValue]
]


def _arrays_equal(first: JsonArray, second: JsonArray) -> bool:
    if len(first) != len(second):
        return False
    return all(equal(a, b) for a, b in zip(first, second))


def _objects_equal(first: JsonObject, second: JsonObject) -> bool:
    for key, value in first.items():
        if key not in second:
            return False
        if not equal(value, second[key]):
            return False
    return all(key in first for key in second.keys())


def equal(first: Optional[JsonValue], second: Optional[JsonValue]) -> bool:
    """Return whether two values are structurally equal.

    Values of different types are never equal. Arrays compare element by
    element in order; objects compare by key regardless of field order.
    """
    if first is second:
        return True
    if first is None or second is None:
        return False
    kind = get_type(first)
    if kind != get_type(second):
        return False
    if kind in (JsonType.BOOLEAN, JsonType.DOUBLE, JsonType.INT, JsonType.STRING):
        return first.value == second.value
    if kind is JsonType.OBJECT:
        return _objects_equal(first, second)
    if kind is JsonType.ARRAY:
        return _arrays_equal(first, second)
    return False


def shallow_copy_default(src: JsonValue, parent: Optional[JsonValue] = None,
                         key: Optional[str] = None,
                         index: Optional[int] = None) -> JsonValue:
    """Create a new value of the same type and scalar contents as src.

    Containers come back empty. The serializer is carried over, but user
    data and its release callback are not.
    """
    kind = get_type(src)
    if kind is JsonType.BOOLEAN:
        dst: JsonValue = JsonBoolean(src.value)
    elif kind is JsonType.DOUBLE:
        dst = JsonDouble(src.value)
    elif kind is JsonType.INT:
        dst = JsonInt(0)
        if src.is_unsigned:
            dst.set_uint64(src.value)
        else:
            dst.set_int64(src.value)
    elif kind is JsonType.STRING:
        dst = JsonString(src.value)
    elif kind is JsonType.OBJECT:
        dst = JsonObject()
    elif kind is JsonType.ARRAY:
        dst = JsonArray()
    else:
        raise ValueError(f"cannot copy a value of type {kind.name}")
    dst.serializer = src.serializer
    return dst


def _copy_serializer_data(src: JsonValue, dst: JsonValue) -> None:
    if src.userdata is None and src.user_delete is None:
        return
    if not dst.serializes_userdata_text:
        raise ValueError(
            f"unable to copy unknown serializer data: {dst.serializer!r}"
        )
    if src.userdata is None:
        raise ValueError("serializer expects user data text but none is set")
    dst.set_userdata(src.userdata, src.user_delete)


def _deep_copy(src: JsonValue, parent: Optional[JsonValue], key: Optional[str],
               index: Optional[int], shallow_copy: ShallowCopy) -> JsonValue:
    dst = shallow_copy(src, parent, key, index)
    if dst is None:
        raise ValueError("shallow copy produced no value")
    # A shallow copy that already attached user data has set up its own
    # serializer state, so the standard user data copy is skipped.
    serializer_done = dst.userdata is not None or dst.user_delete is not None
    try:
        kind = get_type(src)
        if kind is JsonType.OBJECT:
            for child_key, child in src.items():
                copied = None if child is None else _deep_copy(
                    child, src, child_key, None, shallow_copy)
                dst.add(child_key, copied)
        elif kind is JsonType.ARRAY:
            for child_index, child in enumerate(src):
                copied = None if child is None else _deep_copy(
                    child, src, None, child_index, shallow_copy)
                dst.append(copied)
        if not serializer_done:
            _copy_serializer_data(src, dst)
    except Exception:
        dst.release()
        raise
    return dst


def deep_copy(src: JsonValue,
              shallow_copy: Optional[ShallowCopy] = None) -> JsonValue:
    """Return a full copy of src, built value by value with shallow_copy.

    shallow_copy(src, parent, key, index) must return a new value; parent
    is the container being copied (None at the top), with key set for
    object fields and index for array elements. Raises ValueError when src
    is None or a value cannot be copied; nothing partial is left behind.
    """
    if src is None:
        raise ValueError("cannot copy a null value")
    if shallow_copy is None:
        shallow_copy = shallow_copy_default
    return _deep_copy(src, None, None, None, shallow_copy)